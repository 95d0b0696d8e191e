"""Abstract interfaces for infrastructure dependencies."""

from .transcription_service import TranscriptionService

__all__ = ["TranscriptionService"]
