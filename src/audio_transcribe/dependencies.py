"""FastAPI dependency injection configuration."""

from functools import lru_cache

from openai import OpenAI

from audio_transcribe.config import AppConfig, load_config
from audio_transcribe.handlers import TranscriptionHandler
from audio_transcribe.infrastructure import OpenAITranscriber
from audio_transcribe.interfaces import TranscriptionService
from audio_transcribe.logging import setup_logging

_config = load_config()

logger = setup_logging(_config.server.log_level)


def get_config() -> AppConfig:
    """Returns the configuration loaded at startup."""
    return _config


@lru_cache(maxsize=1)
def get_transcription_service() -> TranscriptionService:
    """Returns the configured transcription service, built on first use."""
    # Provider failures surface on the first attempt; SDK retries are off.
    client = OpenAI(
        api_key=_config.openai.api_key,
        base_url=_config.openai.base_url,
        max_retries=0,
    )
    logger.info(
        "Transcription client initialized",
        extra={"model": _config.openai.model, "response_format": _config.openai.response_format},
    )
    return OpenAITranscriber(
        client,
        model=_config.openai.model,
        response_format=_config.openai.response_format,
    )


def get_handler() -> TranscriptionHandler:
    """Returns a transcription handler wired to the configured service."""
    return TranscriptionHandler(
        get_transcription_service(),
        max_upload_bytes=_config.server.max_upload_bytes,
        temp_dir=_config.server.temp_dir,
    )
