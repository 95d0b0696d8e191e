"""Application configuration loaded from environment variables."""

import os
from typing import Literal

from pydantic import BaseModel


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI transcription API configuration."""

    api_key: str
    base_url: str | None = None
    model: str = "whisper-1"
    response_format: Literal["json", "verbose_json"] = "json"


class ServerConfig(BaseModel, frozen=True):
    """HTTP server and request handling configuration."""

    host: str = "0.0.0.0"
    port: int = 8080
    allowed_origins: tuple[str, ...] = ("*",)
    max_upload_bytes: int = 25 * 1024 * 1024
    temp_dir: str | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    openai: OpenAIConfig
    server: ServerConfig


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(o.strip() for o in raw.split(",") if o.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            base_url=os.getenv("OPENAI_BASE_URL") or None,
            model=os.getenv("TRANSCRIPTION_MODEL", "whisper-1"),
            response_format=os.getenv("TRANSCRIPTION_RESPONSE_FORMAT", "json"),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8080")),
            allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS", "*")),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(25 * 1024 * 1024))),
            temp_dir=os.getenv("AUDIO_TEMP_DIR") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        ),
    )
