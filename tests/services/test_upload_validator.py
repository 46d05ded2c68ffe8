"""
tests/services/test_upload_validator.py

Unit tests for UploadValidator.

Uploads are real Starlette UploadFile objects over in-memory buffers;
a 64-byte limit keeps the size cases small.
"""

from __future__ import annotations

import base64
import io

import pytest
from starlette.datastructures import UploadFile

from app.core.config import settings
from app.core.exceptions import (
    ErrorKind,
    FileReadError,
    FileTooLargeError,
    InvalidFileTypeError,
    MissingFileError,
)
from app.services.upload_validator import UploadValidator

MAX = 64


# ── Helpers ────────────────────────────────────────────────────────────────────

def _upload(filename: str, content: bytes = b"data", size: int | None = -1) -> UploadFile:
    """UploadFile whose declared size defaults to the real content length."""
    declared = len(content) if size == -1 else size
    return UploadFile(file=io.BytesIO(content), filename=filename, size=declared)


class _BrokenFile(io.BytesIO):
    def read(self, *args, **kwargs):
        raise OSError("disk went away")


def _validator() -> UploadValidator:
    return UploadValidator(max_size=MAX, allowed_extensions=[".jpg", ".png", ".pdf"])


# ── Tests ──────────────────────────────────────────────────────────────────────

class TestPresence:

    @pytest.mark.asyncio
    async def test_absent_part_is_missing(self) -> None:
        with pytest.raises(MissingFileError, match="Missing required file: idFront") as info:
            await _validator().validate("idFront", None)
        assert info.value.kind is ErrorKind.MISSING_FILE
        assert info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_text_value_is_missing(self) -> None:
        with pytest.raises(MissingFileError):
            await _validator().validate("idBack", "front.jpg")

    @pytest.mark.asyncio
    async def test_empty_filename_is_missing(self) -> None:
        with pytest.raises(MissingFileError):
            await _validator().validate("idBack", _upload("", b""))


class TestSize:

    @pytest.mark.asyncio
    async def test_declared_size_over_limit(self) -> None:
        upload = _upload("big.jpg", b"tiny", size=MAX + 1)
        with pytest.raises(FileTooLargeError) as info:
            await _validator().validate("idFront", upload)
        assert info.value.kind is ErrorKind.FILE_TOO_LARGE

    @pytest.mark.asyncio
    async def test_size_is_checked_before_type(self) -> None:
        upload = _upload("big.exe", b"tiny", size=MAX + 1)
        with pytest.raises(FileTooLargeError):
            await _validator().validate("idFront", upload)

    @pytest.mark.asyncio
    async def test_understated_size_caught_on_read(self) -> None:
        upload = _upload("liar.png", b"z" * (MAX + 10), size=5)
        with pytest.raises(FileTooLargeError):
            await _validator().validate("idFront", upload)

    @pytest.mark.asyncio
    async def test_exactly_at_limit_is_accepted(self) -> None:
        content = b"q" * MAX
        encoded = await _validator().validate("idFront", _upload("edge.pdf", content))
        assert base64.b64decode(encoded) == content

    def test_default_message_mentions_megabytes(self) -> None:
        assert str(FileTooLargeError("idFront", 5 * 1024 * 1024)) == "File size exceeds 5MB limit"


class TestType:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("filename", ["a.jpg", "b.png", "c.pdf", "D.JPG", "scan.final.Pdf"])
    async def test_allowed_extensions_case_insensitive(self, filename: str) -> None:
        encoded = await _validator().validate("idFront", _upload(filename))
        assert base64.b64decode(encoded) == b"data"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("filename", ["virus.exe", "photo.jpeg", "photo.gif", "archive.pdf.zip"])
    async def test_disallowed_extension(self, filename: str) -> None:
        with pytest.raises(InvalidFileTypeError) as info:
            await _validator().validate("selfieWithId", _upload(filename))
        assert info.value.kind is ErrorKind.INVALID_FILE_TYPE

    @pytest.mark.asyncio
    async def test_bare_extension_filename_is_accepted(self) -> None:
        encoded = await _validator().validate("idFront", _upload(".jpg"))
        assert base64.b64decode(encoded) == b"data"

    @pytest.mark.asyncio
    async def test_dot_in_directory_is_not_an_extension(self) -> None:
        with pytest.raises(InvalidFileTypeError, match="<none>"):
            await _validator().validate("idFront", _upload("scans.pdf/front"))

    @pytest.mark.asyncio
    async def test_no_extension(self) -> None:
        with pytest.raises(InvalidFileTypeError, match="<none>"):
            await _validator().validate("selfieWithId", _upload("README"))

    @pytest.mark.asyncio
    async def test_content_is_not_sniffed(self) -> None:
        """A .png holding PDF bytes is accepted — only the extension counts."""
        encoded = await _validator().validate("idBack", _upload("x.png", b"%PDF-1.7"))
        assert base64.b64decode(encoded) == b"%PDF-1.7"


class TestReadAndEncode:

    @pytest.mark.asyncio
    async def test_round_trip_is_exact(self) -> None:
        content = bytes(range(MAX))
        encoded = await _validator().validate("idFront", _upload("bin.pdf", content))
        assert base64.b64decode(encoded) == content

    @pytest.mark.asyncio
    async def test_short_read_is_not_zero_padded(self) -> None:
        """Declared 40 bytes but only 3 arrive: the output covers the 3 bytes only."""
        upload = _upload("short.jpg", b"abc", size=40)
        encoded = await _validator().validate("idFront", upload)
        assert base64.b64decode(encoded) == b"abc"

    @pytest.mark.asyncio
    async def test_empty_file_encodes_to_empty_string(self) -> None:
        assert await _validator().validate("idFront", _upload("empty.png", b"")) == ""

    @pytest.mark.asyncio
    async def test_read_failure(self) -> None:
        upload = UploadFile(file=_BrokenFile(b"abc"), filename="x.jpg", size=3)
        with pytest.raises(FileReadError, match="Failed to read file: idFront") as info:
            await _validator().validate("idFront", upload)
        assert info.value.kind is ErrorKind.READ_FAILURE

    def test_defaults_come_from_settings(self) -> None:
        validator = UploadValidator()
        assert validator._max_size == settings.max_upload_size
        assert validator._allowed == frozenset(settings.allowed_extensions)
