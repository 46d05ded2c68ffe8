"""
app/services/upload_validator.py

Checks one uploaded file and turns it into the text stored in MongoDB.

    form part
      └─ presence   → MissingFileError
           └─ size      → FileTooLargeError     (declared size)
                └─ type      → InvalidFileTypeError  (extension only)
                     └─ read + Base64 encode → str

The encoded output covers exactly the bytes read from the part, so
decoding it always gives back the original upload.
"""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Iterable, Union

from starlette.datastructures import UploadFile

from app.core.config import settings
from app.core.exceptions import (
    FileReadError,
    FileTooLargeError,
    InvalidFileTypeError,
    MissingFileError,
)
from app.core.logger import get_logger

logger = get_logger(__name__)

FormValue = Union[UploadFile, str, None]


class UploadValidator:
    """
    Validates and encodes a single upload.

    Limits come from settings unless passed explicitly (tests use small
    limits to avoid building multi-megabyte payloads).
    """

    def __init__(
        self,
        max_size: int | None = None,
        allowed_extensions: Iterable[str] | None = None,
    ) -> None:
        self._max_size = max_size if max_size is not None else settings.max_upload_size
        exts = allowed_extensions if allowed_extensions is not None else settings.allowed_extensions
        self._allowed = frozenset(e.lower() for e in exts)

    async def validate(self, field: str, value: FormValue) -> str:
        """
        Run every check on one form part and return its Base64 text.

        Args:
            field : Form field name — used in error messages and logs.
            value : Whatever the multipart parser produced for that field.

        Returns:
            Standard padded Base64 of the file content.

        Raises:
            MissingFileError     : No file was sent for the field.
            FileTooLargeError    : Declared or actual size is over the limit.
            InvalidFileTypeError : Extension not on the allow-list.
            FileReadError        : The content could not be read.
        """
        upload = self._require_file(field, value)

        declared = upload.size
        if declared is not None and declared > self._max_size:
            raise FileTooLargeError(field, self._max_size)

        ext = _extension(upload.filename or "")
        if ext not in self._allowed:
            raise InvalidFileTypeError(field, ext)

        data = await self._read(field, upload)

        if declared is not None and len(data) != declared:
            logger.warning(
                "'%s' — declared %d byte(s) but read %d; encoding what was read.",
                field,
                declared,
                len(data),
            )

        return base64.b64encode(data).decode("ascii")

    # ── Internals ──────────────────────────────────────────────────────────────

    @staticmethod
    def _require_file(field: str, value: FormValue) -> UploadFile:
        # Browsers send an empty-filename part for an untouched file input.
        if not isinstance(value, UploadFile) or not value.filename:
            raise MissingFileError(field)
        return value

    async def _read(self, field: str, upload: UploadFile) -> bytes:
        # One byte past the limit is enough to detect an understated size.
        try:
            await upload.seek(0)
            data = await upload.read(self._max_size + 1)
        except (OSError, ValueError) as exc:
            raise FileReadError(field) from exc

        if len(data) > self._max_size:
            raise FileTooLargeError(field, self._max_size)
        return data


def _extension(filename: str) -> str:
    """Lower-cased text from the last dot of the base name, so '.jpg' counts as '.jpg'."""
    name = Path(filename).name
    dot = name.rfind(".")
    return name[dot:].lower() if dot >= 0 else ""
