"""Storage of uploaded images on local disk."""

import logging
import os
import time
import uuid
from pathlib import Path
from typing import List, Optional

from fastapi import UploadFile

from ..core.config import settings
from ..core.exceptions import ValidationError
from ..core.observability import metrics_collector

logger = logging.getLogger(__name__)


def _sanitize_ext(name: str) -> str:
    ext = os.path.splitext(name or "")[1].lower().strip()
    if ext and len(ext) <= 10:
        return ext
    return ""


def is_image(upload: UploadFile) -> bool:
    return (upload.content_type or "").startswith("image/")


class UploadService:
    """
    Writes uploads below ``root`` and returns their public paths.

    Tour images go to ``<root>/tours/<uuid><ext>``; avatars go to
    ``<root>/<timestamp>-<uuid><ext>``.
    """

    def __init__(self, root: Optional[str] = None, url_prefix: Optional[str] = None):
        self.root = Path(root or settings.upload_dir)
        self.url_prefix = (url_prefix or settings.upload_url_prefix).rstrip("/")

    def _write(self, relative: str, content: bytes) -> str:
        out_path = self.root / relative
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(content)
        return f"{self.url_prefix}/{relative}"

    async def save_tour_images(self, files: List[UploadFile]) -> List[str]:
        """
        Store the image parts of a multipart upload.

        Non-image parts are skipped.

        Returns:
            Public paths of the stored images, empty when no files were sent

        Raises:
            ValidationError: If files were sent but none of them is an image
        """
        if not files:
            return []

        paths = []
        for upload in files:
            if not is_image(upload):
                logger.info(
                    "Skipping non-image upload",
                    extra={"upload_name": upload.filename, "content_type": upload.content_type}
                )
                continue
            name = f"{uuid.uuid4().hex}{_sanitize_ext(upload.filename)}"
            content = await upload.read()
            paths.append(self._write(f"tours/{name}", content))

        if not paths:
            raise ValidationError(detail="No valid images uploaded")

        logger.info("Tour images stored", extra={"image_count": len(paths)})
        metrics_collector.record_upload("tour_image", len(paths))
        return paths

    async def save_avatar(self, upload: UploadFile, max_bytes: Optional[int] = None) -> str:
        """
        Store an admin avatar.

        Raises:
            ValidationError: If the file is not an image or is too large
        """
        max_bytes = max_bytes or settings.max_avatar_bytes
        if not is_image(upload):
            raise ValidationError(detail="Only image files are allowed")

        limit_detail = f"File size must be less than {max_bytes // (1024 * 1024)}MB"
        if upload.size is not None and upload.size > max_bytes:
            raise ValidationError(detail=limit_detail)

        # Never buffer more than one byte past the limit
        content = await upload.read(max_bytes + 1)
        if not content:
            raise ValidationError(detail="No file uploaded")
        if len(content) > max_bytes:
            raise ValidationError(detail=limit_detail)

        name = f"{int(time.time() * 1000)}-{uuid.uuid4().hex}{_sanitize_ext(upload.filename)}"
        path = self._write(name, content)

        logger.info("Avatar stored", extra={"path": path, "size": len(content)})
        metrics_collector.record_upload("avatar")
        return path
