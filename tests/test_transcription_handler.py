"""Tests for TranscriptionHandler: validation, options, temp file lifecycle."""
import io

import pytest

from audio_transcribe.domain import AudioUpload, TranscriptionOptions
from audio_transcribe.exceptions import (
    EmptyUploadError,
    TranscriptionError,
    UploadTooLargeError,
)

from .conftest import MAX_UPLOAD_BYTES


def _upload(payload: bytes = b"audio-bytes", name: str | None = "clip.wav") -> AudioUpload:
    return AudioUpload(data=io.BytesIO(payload), file_name=name, content_type="audio/wav")


def test_handle_returns_transcript(handler):
    transcript = handler.handle(_upload())

    assert transcript.text == "hello world"


@pytest.mark.parametrize(
    "payload,name",
    [
        (b"a", "a.wav"),
        (b"b" * 500, "voice.mp3"),
        (b"\x00\xff" * 10, None),
    ],
)
def test_options_are_always_english_and_deterministic(handler, fake_service, payload, name):
    """Every request carries language=en and temperature=0 whatever the upload."""
    handler.handle(_upload(payload, name))

    (request,) = fake_service.requests
    assert request.options == TranscriptionOptions(language="en", temperature=0.0)


def test_temp_file_holds_full_upload_during_call_and_is_removed(handler, fake_service):
    handler.handle(_upload(b"complete-payload"))

    (path,) = fake_service.paths
    assert fake_service.contents[path] == b"complete-payload"
    assert not path.exists()


def test_temp_file_lives_in_configured_dir(handler, fake_service, temp_dir):
    handler.handle(_upload())

    (path,) = fake_service.paths
    assert path.parent == temp_dir
    assert path.name.startswith("audio")


def test_temp_file_keeps_upload_extension(handler, fake_service):
    handler.handle(_upload(name="memo.MP3"))

    assert fake_service.paths[0].suffix == ".mp3"


def test_temp_file_defaults_to_wav(handler, fake_service):
    handler.handle(_upload(name=None))

    assert fake_service.paths[0].suffix == ".wav"


def test_stream_read_from_start_even_if_consumed(handler, fake_service):
    data = io.BytesIO()
    data.write(b"already-written")
    handler.handle(AudioUpload(data=data, file_name="clip.wav"))

    assert fake_service.contents[fake_service.paths[0]] == b"already-written"


def test_empty_upload_raises_before_any_file(handler, fake_service, temp_dir):
    with pytest.raises(EmptyUploadError):
        handler.handle(_upload(b""))

    assert fake_service.requests == []
    assert list(temp_dir.iterdir()) == []


def test_upload_at_limit_is_accepted(handler):
    assert handler.handle(_upload(b"x" * MAX_UPLOAD_BYTES)).text == "hello world"


def test_upload_over_limit_raises(handler, fake_service, temp_dir):
    with pytest.raises(UploadTooLargeError) as exc_info:
        handler.handle(_upload(b"x" * (MAX_UPLOAD_BYTES + 1)))

    assert exc_info.value.limit == MAX_UPLOAD_BYTES
    assert fake_service.requests == []
    assert list(temp_dir.iterdir()) == []


def test_provider_error_propagates_and_file_is_removed(handler, fake_service, temp_dir):
    fake_service.error = TranscriptionError("clip.wav", Exception("boom"))

    with pytest.raises(TranscriptionError):
        handler.handle(_upload())

    assert not fake_service.paths[0].exists()
    assert list(temp_dir.iterdir()) == []


def test_unexpected_error_still_removes_file(handler, fake_service, temp_dir):
    """Cleanup holds for failures outside the known taxonomy too."""
    fake_service.error = RuntimeError("bug")

    with pytest.raises(RuntimeError, match="bug"):
        handler.handle(_upload())

    assert list(temp_dir.iterdir()) == []
