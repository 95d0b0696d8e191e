"""Shared fixtures: an in-memory transcription backend and a test app."""
import threading
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from audio_transcribe.dependencies import get_handler
from audio_transcribe.domain import Transcript, TranscriptionRequest
from audio_transcribe.handlers import TranscriptionHandler
from audio_transcribe.interfaces import TranscriptionService
from audio_transcribe.routes import health_router, transcribe_router

MAX_UPLOAD_BYTES = 1024


class FakeTranscriptionService(TranscriptionService):
    """Records every request and what the audio file held at call time."""

    def __init__(self, text: str = "hello world", error: Exception | None = None, echo: bool = False):
        self.text = text
        self.error = error
        self.echo = echo
        self.requests: list[TranscriptionRequest] = []
        self.contents: dict[Path, bytes] = {}
        self._lock = threading.Lock()

    def transcribe(self, request: TranscriptionRequest) -> Transcript:
        content = request.audio_path.read_bytes()
        with self._lock:
            self.requests.append(request)
            self.contents[request.audio_path] = content
        if self.error is not None:
            raise self.error
        if self.echo:
            return Transcript(text=content.decode())
        return Transcript(text=self.text)

    @property
    def paths(self) -> list[Path]:
        return [r.audio_path for r in self.requests]


@pytest.fixture
def temp_dir(tmp_path):
    directory = tmp_path / "audio"
    directory.mkdir()
    return directory


@pytest.fixture
def fake_service():
    return FakeTranscriptionService()


@pytest.fixture
def handler(fake_service, temp_dir):
    return TranscriptionHandler(
        fake_service,
        max_upload_bytes=MAX_UPLOAD_BYTES,
        temp_dir=str(temp_dir),
    )


@pytest.fixture
def app(handler):
    app = FastAPI()
    app.include_router(health_router)
    app.include_router(transcribe_router)
    app.dependency_overrides[get_handler] = lambda: handler
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
