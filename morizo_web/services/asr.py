from __future__ import annotations

import io
from typing import Optional

from .exceptions import ASRError
from morizo_web.config import Settings


class WhisperASR:
    """
    OpenAI Whisper API adapter. No fallback: errors bubble as ASRError.
    """
    def __init__(self, settings: Settings):
        if not settings.openai_api_key:
            raise ASRError("OPENAI_API_KEY is not configured")
        try:
            from openai import OpenAI
        except ImportError as e:  # pragma: no cover
            raise ASRError("OpenAI SDK not installed. `pip install openai`") from e

        try:
            self._client = OpenAI(api_key=settings.openai_api_key)
        except Exception as e:
            raise ASRError(f"Could not initialize OpenAI client: {e}") from e
        self.model_name = settings.openai_model_transcribe
        self.language = settings.asr_language

    def transcribe_bytes(
        self,
        data: bytes,
        filename: str = "audio.webm",
        content_type: Optional[str] = None,
        language: Optional[str] = None,
    ) -> str:
        try:
            upload = (filename, data, content_type) if content_type else (filename, data)
            text = self._client.audio.transcriptions.create(
                file=upload,
                model=self.model_name,
                language=language or self.language,
                response_format="text",
            )
        except Exception as e:
            raise ASRError(f"ASR transcription failed: {e}") from e
        return str(text).strip()


class LocalWhisperASR:
    """
    Thin wrapper around faster-whisper for offline transcription.
    """
    def __init__(self, settings: Settings):
        try:
            from faster_whisper import WhisperModel  # local import to avoid hard dep at import-time
        except ImportError as e:  # pragma: no cover
            raise ASRError("faster-whisper not installed. `pip install faster-whisper`") from e

        try:
            self._model = WhisperModel(
                settings.asr_model,
                compute_type=settings.asr_compute_type,
            )
        except Exception as e:
            raise ASRError(f"Failed to initialize Whisper model: {e}") from e
        self._beam_size = settings.asr_beam_size
        self.model_name = settings.asr_model
        self.language = settings.asr_language

    def transcribe_bytes(
        self,
        data: bytes,
        filename: str = "audio.webm",
        content_type: Optional[str] = None,
        language: Optional[str] = None,
    ) -> str:
        try:
            segments, _info = self._model.transcribe(
                io.BytesIO(data),
                beam_size=self._beam_size,
                language=language or self.language,
            )
            return " ".join(seg.text.strip() for seg in segments)
        except Exception as e:
            raise ASRError(f"ASR transcription failed: {e}") from e


def build_asr(settings: Settings):
    if settings.asr_use_openai:
        return WhisperASR(settings)
    return LocalWhisperASR(settings)
