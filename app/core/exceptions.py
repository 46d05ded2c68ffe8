"""
app/core/exceptions.py

Custom exception hierarchy for the application.

Every failure the service can report belongs to one ``ErrorKind``.
Raising typed exceptions from services lets controllers catch specific
cases and return the correct HTTP status code without leaking internals:
validation errors carry a message safe to show the client, store and
serialization errors keep their detail for the server log only.
"""

from enum import Enum
from typing import Optional

from app.core.constants import MSG_METHOD_NOT_ALLOWED, MSG_PAYLOAD_TOO_LARGE


class ErrorKind(str, Enum):
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    PAYLOAD_TOO_LARGE = "PayloadTooLarge"
    MISSING_FILE = "MissingFile"
    INVALID_FILE_TYPE = "InvalidFileType"
    FILE_TOO_LARGE = "FileTooLarge"
    READ_FAILURE = "ReadFailure"
    STORE_CONNECT_FAILURE = "StoreConnectFailure"
    STORE_WRITE_FAILURE = "StoreWriteFailure"
    STORE_QUERY_FAILURE = "StoreQueryFailure"
    SERIALIZATION_FAILURE = "SerializationFailure"


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""

    kind: Optional[ErrorKind] = None
    status_code: int = 500

    @property
    def kind_name(self) -> str:
        """Kind for log lines; bare base classes fall back to their class name."""
        return self.kind.value if self.kind is not None else type(self).__name__

    @property
    def client_message(self) -> str:
        """Text that may be returned to the caller."""
        if self.status_code >= 500:
            return "Internal server error"
        return str(self)


# ── Request exceptions ─────────────────────────────────────────────────────────

class MethodNotAllowedError(AppBaseException):
    """Raised when an endpoint is called with the wrong HTTP method."""

    kind = ErrorKind.METHOD_NOT_ALLOWED
    status_code = 405

    @property
    def client_message(self) -> str:
        return MSG_METHOD_NOT_ALLOWED


class PayloadTooLargeError(AppBaseException):
    """Raised when a request body exceeds the configured maximum."""

    kind = ErrorKind.PAYLOAD_TOO_LARGE
    status_code = 413

    @property
    def client_message(self) -> str:
        return MSG_PAYLOAD_TOO_LARGE


# ── Upload exceptions ──────────────────────────────────────────────────────────

class UploadError(AppBaseException):
    """Base for every rejection produced by the upload validator."""

    status_code = 400


class MissingFileError(UploadError):
    """Raised when a required file part is absent from the form."""

    kind = ErrorKind.MISSING_FILE

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required file: {field}")
        self.field = field


class FileTooLargeError(UploadError):
    """Raised when an upload is bigger than the per-file limit."""

    kind = ErrorKind.FILE_TOO_LARGE

    def __init__(self, field: str, limit_bytes: int) -> None:
        limit_mb = limit_bytes // (1024 * 1024)
        super().__init__(f"File size exceeds {limit_mb}MB limit")
        self.field = field
        self.limit_bytes = limit_bytes


class InvalidFileTypeError(UploadError):
    """Raised when an upload's extension is not on the allow-list."""

    kind = ErrorKind.INVALID_FILE_TYPE

    def __init__(self, field: str, extension: str) -> None:
        super().__init__(f"Invalid file type: {extension or '<none>'}")
        self.field = field
        self.extension = extension


class FileReadError(UploadError):
    """Raised when an upload's content cannot be read."""

    kind = ErrorKind.READ_FAILURE

    def __init__(self, field: str) -> None:
        super().__init__(f"Failed to read file: {field}")
        self.field = field


# ── Store exceptions ───────────────────────────────────────────────────────────

class StoreError(AppBaseException):
    """Raised when an interaction with the document store fails."""


class StoreConnectError(StoreError):
    kind = ErrorKind.STORE_CONNECT_FAILURE


class StoreWriteError(StoreError):
    kind = ErrorKind.STORE_WRITE_FAILURE


class StoreQueryError(StoreError):
    kind = ErrorKind.STORE_QUERY_FAILURE


class SerializationError(AppBaseException):
    """Raised when stored documents cannot be decoded or encoded as JSON."""

    kind = ErrorKind.SERIALIZATION_FAILURE
