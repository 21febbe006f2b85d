"""Unit tests for avatar size enforcement in the upload service."""

import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from mtp_admin.core.exceptions import ValidationError
from mtp_admin.services.upload_service import UploadService

ONE_MB = 1024 * 1024


class RecordingFile(io.BytesIO):
    """In-memory file that remembers how much each read asked for."""

    def __init__(self, content: bytes):
        super().__init__(content)
        self.reads = []

    def read(self, size=-1):
        self.reads.append(size)
        return super().read(size)


def _avatar(content: bytes, size=None):
    return UploadFile(
        file=RecordingFile(content),
        size=size,
        filename="avatar.png",
        headers=Headers({"content-type": "image/png"}),
    )


@pytest.mark.asyncio
async def test_declared_size_over_limit_is_rejected_unread(tmp_path):
    upload = _avatar(b"png", size=ONE_MB + 1)

    with pytest.raises(ValidationError) as exc_info:
        await UploadService(root=str(tmp_path)).save_avatar(upload, max_bytes=ONE_MB)

    assert exc_info.value.detail == "File size must be less than 1MB"
    assert upload.file.reads == []
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_undeclared_size_reads_at_most_one_byte_past_limit(tmp_path):
    upload = _avatar(b"0" * (ONE_MB + 4096))

    with pytest.raises(ValidationError) as exc_info:
        await UploadService(root=str(tmp_path)).save_avatar(upload, max_bytes=ONE_MB)

    assert exc_info.value.detail == "File size must be less than 1MB"
    assert upload.file.reads == [ONE_MB + 1]
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_avatar_within_limit_is_stored(tmp_path):
    upload = _avatar(b"png-bytes", size=9)

    path = await UploadService(root=str(tmp_path), url_prefix="/uploads").save_avatar(upload, max_bytes=ONE_MB)

    assert path.startswith("/uploads/")
    assert path.endswith(".png")
    assert (tmp_path / path.removeprefix("/uploads/")).read_bytes() == b"png-bytes"
