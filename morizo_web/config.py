from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional, List
from dotenv import load_dotenv
load_dotenv()  # populates os.environ from .env


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # OpenAI (speech-to-text)
    openai_api_key: Optional[str] = Field(None, description="OPENAI_API_KEY")
    openai_model_transcribe: str = Field("whisper-1", description="OPENAI_MODEL_TRANSCRIBE")

    # ASR
    asr_use_openai: bool = Field(True, description="ASR_USE_OPENAI; false runs faster-whisper locally")
    asr_language: str = Field("ja", description="ASR_LANGUAGE")
    asr_model: str = Field("tiny", description="ASR_MODEL (local only)")
    asr_compute_type: str = Field("int8", description="ASR_COMPUTE_TYPE (local only)")
    asr_beam_size: int = Field(1, description="ASR_BEAM_SIZE (local only)")
    max_audio_bytes: int = Field(10 * 1024 * 1024, description="MAX_AUDIO_BYTES")
    allowed_audio_types: List[str] = Field(
        default_factory=lambda: [
            "audio/mpeg",
            "audio/wav",
            "audio/webm",
            "audio/ogg",
            "audio/mp4",
            "audio/x-m4a",
        ]
    )

    # Upstream Morizo AI backend
    morizo_ai_url: str = Field("http://localhost:8000", description="MORIZO_AI_URL")
    upstream_timeout: float = Field(30.0, description="UPSTREAM_TIMEOUT seconds")

    # Metrics / logging
    data_dir: str = Field("data", description="DATA_DIR")
    metrics_file: str = Field("api_log.jsonl", description="METRICS_FILE, relative to DATA_DIR")
    log_level: str = Field("INFO", description="LOG_LEVEL")

    # CORS
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])
