"""Domain models for the transcription service."""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel

DEFAULT_LANGUAGE = "en"
DEFAULT_TEMPERATURE = 0.0


@dataclass(frozen=True)
class AudioUpload:
    """An inbound audio file as received from the client."""

    data: BinaryIO
    file_name: str | None = None
    content_type: str | None = None


class TranscriptionOptions(BaseModel, frozen=True):
    """Per-call decoding options sent with every transcription request."""

    language: str = DEFAULT_LANGUAGE
    temperature: float = DEFAULT_TEMPERATURE


class TranscriptionRequest(BaseModel, frozen=True):
    """Audio location plus the options to transcribe it with."""

    audio_path: Path
    options: TranscriptionOptions = TranscriptionOptions()


class Transcript(BaseModel, frozen=True):
    """Text returned by the transcription provider."""

    text: str
