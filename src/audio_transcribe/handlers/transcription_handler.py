"""Handler for turning an uploaded audio file into a transcript."""

import logging
import os
from typing import BinaryIO

from audio_transcribe.domain import (
    AudioUpload,
    Transcript,
    TranscriptionOptions,
    TranscriptionRequest,
)
from audio_transcribe.exceptions import EmptyUploadError, UploadTooLargeError
from audio_transcribe.infrastructure import audio_suffix, temporary_audio_file
from audio_transcribe.interfaces import TranscriptionService

logger = logging.getLogger(__name__)


class TranscriptionHandler:
    """Orchestrates upload-to-transcript operations for a single request."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        max_upload_bytes: int,
        temp_dir: str | None = None,
    ):
        self._transcription_service = transcription_service
        self._max_upload_bytes = max_upload_bytes
        self._temp_dir = temp_dir

    def handle(self, upload: AudioUpload) -> Transcript:
        """
        Transcribes an uploaded audio file.

        The upload is written to a transient file that exists only for the
        duration of the provider call.

        Args:
            upload: The audio file received from the client.

        Returns:
            Transcript extracted from the provider response.

        Raises:
            EmptyUploadError: If the upload has no content.
            UploadTooLargeError: If the upload exceeds the size limit.
            AudioPersistError: If the transient file cannot be written.
            TranscriptionError: If the provider call fails.
        """
        size = _stream_size(upload.data)
        if size == 0:
            raise EmptyUploadError(upload.file_name)
        if size > self._max_upload_bytes:
            raise UploadTooLargeError(upload.file_name, size, self._max_upload_bytes)

        logger.info(
            "Processing upload",
            extra={
                "file_name": upload.file_name,
                "content_type": upload.content_type,
                "size": size,
            },
        )

        with temporary_audio_file(
            upload.data,
            suffix=audio_suffix(upload.file_name),
            directory=self._temp_dir,
        ) as audio_path:
            request = TranscriptionRequest(
                audio_path=audio_path,
                options=TranscriptionOptions(),
            )
            transcript = self._transcription_service.transcribe(request)

        logger.info(
            "Upload transcribed",
            extra={"file_name": upload.file_name, "chars": len(transcript.text)},
        )
        return transcript


def _stream_size(data: BinaryIO) -> int:
    """Measures a seekable stream and rewinds it to the start."""
    data.seek(0, os.SEEK_END)
    size = data.tell()
    data.seek(0)
    return size
