"""OpenAI implementation of the TranscriptionService interface."""

import logging

from openai import OpenAI

from audio_transcribe.domain.models import Transcript, TranscriptionRequest
from audio_transcribe.exceptions import AudioPersistError, TranscriptionError
from audio_transcribe.interfaces import TranscriptionService

logger = logging.getLogger(__name__)


class OpenAITranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI audio API."""

    def __init__(self, client: OpenAI, model: str, response_format: str = "json"):
        self._client = client
        self._model = model
        self._response_format = response_format

    def transcribe(self, request: TranscriptionRequest) -> Transcript:
        """
        Sends the audio file to OpenAI and returns the transcript text.

        Model and response format are fixed at construction; language and
        temperature come from the request options.

        Raises:
            AudioPersistError: If the local audio file cannot be opened.
            TranscriptionError: If the API call fails or returns no text.
        """
        file_name = request.audio_path.name
        try:
            audio_file = request.audio_path.open("rb")
        except OSError as e:
            logger.exception("Opening audio file failed", extra={"path": str(request.audio_path)})
            raise AudioPersistError(str(request.audio_path), e) from e

        try:
            with audio_file:
                response = self._client.audio.transcriptions.create(
                    model=self._model,
                    file=audio_file,
                    language=request.options.language,
                    temperature=request.options.temperature,
                    response_format=self._response_format,
                )

            text = getattr(response, "text", None)
            if not isinstance(text, str):
                raise TranscriptionError(
                    file_name,
                    Exception("Transcription response contained no text"),
                )

            logger.info(
                "Audio transcription successful",
                extra={"file_name": file_name, "model": self._model, "chars": len(text)},
            )
            return Transcript(text=text)

        except TranscriptionError:
            logger.error("Malformed transcription response", extra={"file_name": file_name})
            raise
        except Exception as e:
            logger.exception("OpenAI transcription failed", extra={"file_name": file_name})
            raise TranscriptionError(file_name, e) from e
