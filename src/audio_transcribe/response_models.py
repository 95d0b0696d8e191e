"""Response models for the transcription API."""

from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    """Transcript returned after a successful transcription."""

    transcript: str


class HealthResponse(BaseModel):
    status: str = "ok"
