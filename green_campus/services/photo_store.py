"""
Blob storage for tree photos.

Files live flat in ``settings.upload_dir`` under generated names and are
served by the static mount at ``settings.photo_url_prefix``; the database
only keeps the public URL.
"""
from PIL import Image, UnidentifiedImageError
from pathlib import Path
from starlette.concurrency import run_in_threadpool
from typing import Iterable, Optional
import io
import logging
import uuid

from green_campus.config import settings
from green_campus.exceptions import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_FORMATS = {"JPEG", "PNG", "WEBP", "BMP", "GIF"}
EXT_BY_FORMAT = {"JPEG": ".jpg", "PNG": ".png", "WEBP": ".webp", "BMP": ".bmp", "GIF": ".gif"}


class PhotoStore:

    def __init__(self, upload_dir: str = None, url_prefix: str = None, max_bytes: int = None):
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.url_prefix = (url_prefix or settings.photo_url_prefix).rstrip("/")
        self.max_bytes = max_bytes or settings.max_upload_bytes

    def validate(self, contents: bytes, content_type: Optional[str]) -> str:
        """Check the upload is a supported image; returns the file extension to use."""
        if not content_type or not content_type.startswith("image/"):
            raise ValidationError("File must be image")
        if not contents:
            raise ValidationError("No file uploaded")
        if len(contents) > self.max_bytes:
            raise ValidationError(f"File too large. Max size: {self.max_bytes // (1024 * 1024)}MB")

        try:
            image = Image.open(io.BytesIO(contents))
            image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError):
            raise ValidationError("Uploaded file is not a valid image")

        fmt = (image.format or "").upper()
        if fmt not in ALLOWED_FORMATS:
            raise ValidationError(f"Unsupported format: {fmt or 'unknown'}. Allowed: {', '.join(sorted(ALLOWED_FORMATS))}")
        return EXT_BY_FORMAT[fmt]

    def path_for(self, photo_url: str) -> Path:
        # Only the basename is trusted, the URL comes from the database
        return self.upload_dir / Path(photo_url).name

    def _write(self, filename: str, contents: bytes) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        with open(self.upload_dir / filename, "wb") as f:
            f.write(contents)

    def _remove(self, path: Path) -> bool:
        try:
            path.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Failed to delete photo blob {path}: {e}")
            return False

    async def save(self, contents: bytes, content_type: Optional[str]) -> str:
        """Validate and store an upload; returns its public URL."""
        ext = self.validate(contents, content_type)
        filename = f"{uuid.uuid4()}{ext}"
        await run_in_threadpool(self._write, filename, contents)
        logger.info(f"Stored photo blob {filename} ({len(contents)} bytes)")
        return f"{self.url_prefix}/{filename}"

    async def delete(self, photo_url: str) -> bool:
        """Best-effort removal; a missing file is not an error."""
        return await run_in_threadpool(self._remove, self.path_for(photo_url))

    async def delete_many(self, photo_urls: Iterable[str]) -> int:
        removed = 0
        for url in photo_urls:
            if await self.delete(url):
                removed += 1
        return removed


_photo_store = None


def get_photo_store() -> PhotoStore:
    global _photo_store
    if _photo_store is None:
        _photo_store = PhotoStore()
    return _photo_store
