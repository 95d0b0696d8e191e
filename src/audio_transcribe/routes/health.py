"""Liveness endpoint."""

from fastapi import APIRouter

from audio_transcribe.response_models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse()
