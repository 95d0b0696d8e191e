"""Scoped transient storage for uploaded audio."""

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from audio_transcribe.exceptions import AudioPersistError

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".wav"


def audio_suffix(file_name: str | None) -> str:
    """Returns the upload's extension, falling back to ``.wav``."""
    suffix = Path(file_name or "").suffix
    return suffix.lower() if suffix else DEFAULT_SUFFIX


@contextmanager
def temporary_audio_file(
    source: BinaryIO,
    suffix: str = DEFAULT_SUFFIX,
    directory: str | None = None,
) -> Iterator[Path]:
    """
    Writes ``source`` to a uniquely named file and yields its path.

    The file is fully written and closed before the path is yielded, and it
    is removed when the block exits, whether it exits normally or by
    exception. A file left partially written by a failed copy is removed too.

    Raises:
        AudioPersistError: If the file cannot be created or written.
    """
    try:
        temp_file = tempfile.NamedTemporaryFile(
            prefix="audio", suffix=suffix, dir=directory, delete=False
        )
    except OSError as e:
        logger.exception("Temp file creation failed", extra={"directory": directory})
        raise AudioPersistError(directory or tempfile.gettempdir(), e) from e

    path = Path(temp_file.name)
    try:
        try:
            with temp_file:
                shutil.copyfileobj(source, temp_file)
        except OSError as e:
            logger.exception("Writing audio to temp file failed", extra={"path": str(path)})
            raise AudioPersistError(str(path), e) from e

        logger.info(
            "Audio written to temp file",
            extra={"path": str(path), "size": path.stat().st_size},
        )
        yield path
    finally:
        path.unlink(missing_ok=True)
        logger.info("Temp file removed", extra={"path": str(path)})
