from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from morizo_web.config import Settings
from morizo_web.api.v1.deps import get_settings
from morizo_web.core.models import TranscriptionResponse
from morizo_web.services.asr import build_asr
from morizo_web.services.exceptions import ASRError
from morizo_web.services.metrics import MetricsLogger
from morizo_web.telemetry import LogCategory, get_logger, log_api_call, start_timer

router = APIRouter(tags=["voice"])
logger = get_logger(LogCategory.VOICE)

PATH = "/api/whisper"

# ---- DI helpers --------------------------------------------------------------

def get_asr(settings: Settings = Depends(get_settings)):
    try:
        return build_asr(settings)
    except ASRError as e:
        raise HTTPException(status_code=503, detail=str(e))

# ---- Routes ------------------------------------------------------------------

@router.post(PATH, response_model=TranscriptionResponse)
async def transcribe(
    audio: Optional[UploadFile] = File(None, description="Audio file (mp3/wav/webm/ogg/m4a)"),
    language: Optional[str] = Form(None, description="ISO code like 'ja','en'"),
    settings: Settings = Depends(get_settings),
    asr=Depends(get_asr),
):
    timer = start_timer("whisper-api", LogCategory.VOICE)
    request_id = uuid.uuid4().hex[:9]

    if audio is None:
        logger.warning("[%s] no audio file in form data", request_id)
        log_api_call("POST", PATH, 400, error="missing audio", settings=settings)
        raise HTTPException(status_code=400, detail="Audio file not found")

    content_type = (audio.content_type or "").split(";")[0].strip()
    logger.info(
        "[%s] received audio name=%s type=%s bytes=%s",
        request_id, audio.filename, content_type, audio.size,
    )

    # read at most one byte past the limit
    size = audio.size
    if size is None or size <= settings.max_audio_bytes:
        content = await audio.read(settings.max_audio_bytes + 1)
        size = len(content)

    if size > settings.max_audio_bytes:
        logger.warning("[%s] audio too large: %d > %d", request_id, size, settings.max_audio_bytes)
        log_api_call("POST", PATH, 400, error="file too large", settings=settings)
        raise HTTPException(
            status_code=400,
            detail=f"File size exceeds the limit ({settings.max_audio_bytes // (1024 * 1024)}MB)",
        )

    if content_type not in settings.allowed_audio_types:
        logger.warning("[%s] unsupported audio type: %s", request_id, content_type)
        log_api_call("POST", PATH, 400, error="unsupported type", settings=settings)
        raise HTTPException(
            status_code=400,
            detail="Unsupported file type. Supported formats: MP3, WAV, WebM, OGG, M4A",
        )

    try:
        asr_timer = start_timer("whisper-transcribe", LogCategory.VOICE)
        text = await run_in_threadpool(
            asr.transcribe_bytes,
            content,
            filename=audio.filename or "audio.webm",
            content_type=content_type,
            language=language,
        )
        MetricsLogger(settings).log_latency(
            "transcribe",
            asr_timer(),
            extra={"bytes": len(content), "language": language or settings.asr_language},
        )
    except ASRError as e:
        logger.error("[%s] transcription failed: %s", request_id, e)
        log_api_call("POST", PATH, 502, duration_ms=timer(), error=str(e), settings=settings)
        raise HTTPException(status_code=502, detail=f"Speech recognition failed: {e}")

    logger.info("[%s] transcription ok, %d chars", request_id, len(text))
    log_api_call("POST", PATH, 200, duration_ms=timer(), settings=settings)
    return TranscriptionResponse(text=text, success=True)
