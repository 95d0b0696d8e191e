"""Custom exceptions for the transcription service."""


class MissingUploadError(Exception):
    """Raised when the request carries no file part under the expected name."""

    def __init__(self, field_name: str = "file"):
        self.field_name = field_name
        super().__init__(f"Required upload field '{field_name}' is missing or not a file")


class EmptyUploadError(Exception):
    """Raised when the uploaded file contains no bytes."""

    def __init__(self, file_name: str | None):
        self.file_name = file_name
        super().__init__(f"Uploaded file '{file_name}' is empty")


class UploadTooLargeError(Exception):
    """Raised when the uploaded file exceeds the configured size limit."""

    def __init__(self, file_name: str | None, size: int, limit: int):
        self.file_name = file_name
        self.size = size
        self.limit = limit
        super().__init__(
            f"Uploaded file '{file_name}' is {size} bytes, limit is {limit} bytes"
        )


class AudioPersistError(Exception):
    """Raised when the upload cannot be written to transient storage."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write audio to '{path}'")


class TranscriptionError(Exception):
    """Raised when the transcription provider call fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")
