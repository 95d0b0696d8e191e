from audio_transcribe.config import AppConfig, OpenAIConfig, ServerConfig, load_config
from audio_transcribe.domain import (
    AudioUpload,
    Transcript,
    TranscriptionOptions,
    TranscriptionRequest,
)
from audio_transcribe.exceptions import (
    AudioPersistError,
    EmptyUploadError,
    MissingUploadError,
    TranscriptionError,
    UploadTooLargeError,
)
from audio_transcribe.logging import setup_logging

__all__ = [
    "setup_logging",
    "load_config",
    "AppConfig",
    "OpenAIConfig",
    "ServerConfig",
    "AudioUpload",
    "Transcript",
    "TranscriptionOptions",
    "TranscriptionRequest",
    "AudioPersistError",
    "EmptyUploadError",
    "MissingUploadError",
    "TranscriptionError",
    "UploadTooLargeError",
]
