"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from audio_transcribe.domain.models import Transcript, TranscriptionRequest


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, request: TranscriptionRequest) -> Transcript:
        """
        Transcribes the audio file referenced by the request.

        Args:
            request: Path to a complete audio file plus decoding options.

        Returns:
            The transcript text extracted from the provider response.

        Raises:
            AudioPersistError: If the audio file cannot be read locally.
            TranscriptionError: If the provider call fails or returns no text.
        """
        pass
