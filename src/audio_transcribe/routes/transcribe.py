"""Audio transcription endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from audio_transcribe.dependencies import get_handler
from audio_transcribe.domain import AudioUpload
from audio_transcribe.exceptions import (
    AudioPersistError,
    EmptyUploadError,
    MissingUploadError,
    TranscriptionError,
    UploadTooLargeError,
)
from audio_transcribe.handlers import TranscriptionHandler
from audio_transcribe.response_models import TranscriptionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/transcribe", tags=["transcription"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_handler)]


def _to_upload(file: UploadFile | str | None) -> AudioUpload:
    # Text parts named `file`, including file parts sent without a filename.
    if file is None or isinstance(file, str):
        raise MissingUploadError("file")
    return AudioUpload(
        data=file.file,
        file_name=file.filename,
        content_type=file.content_type,
    )


@router.post("", response_model=TranscriptionResponse)
def transcribe_audio(
    handler: HandlerDep,
    file: UploadFile | str | None = File(None),
) -> TranscriptionResponse:
    """
    Transcribes an uploaded audio file.

    Runs on the worker thread pool; the thread is held for the full
    provider round trip.
    """
    logger.info(
        "Received transcription request",
        extra={
            "file_name": getattr(file, "filename", None),
            "content_type": getattr(file, "content_type", None),
        },
    )

    try:
        transcript = handler.handle(_to_upload(file))
    except (MissingUploadError, EmptyUploadError) as e:
        logger.warning("Rejected transcription request", extra={"reason": str(e)})
        raise HTTPException(status_code=400, detail=str(e))
    except UploadTooLargeError as e:
        logger.warning("Rejected transcription request", extra={"reason": str(e)})
        raise HTTPException(status_code=413, detail=str(e))
    except AudioPersistError:
        raise HTTPException(status_code=500, detail="Failed to store uploaded audio")
    except TranscriptionError:
        raise HTTPException(status_code=502, detail="Transcription provider failed")

    return TranscriptionResponse(transcript=transcript.text)
