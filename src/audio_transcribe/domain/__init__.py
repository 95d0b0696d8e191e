"""Domain layer exports."""

from .models import AudioUpload, Transcript, TranscriptionOptions, TranscriptionRequest

__all__ = ["AudioUpload", "Transcript", "TranscriptionOptions", "TranscriptionRequest"]
