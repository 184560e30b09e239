"""Upload service for product images."""

import logging
import time
from pathlib import Path

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from src.config import Settings, get_settings

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "products"


def build_filename(original_name: str | None, field_name: str = UPLOAD_FIELD) -> str:
    """Name stored files `<field>_<epoch ms><ext>`, keeping the original extension."""
    suffix = Path(original_name or "").suffix
    return f"{field_name}_{int(time.time() * 1000)}{suffix}"


class UploadService:
    """Service for storing uploaded assets on local disk."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.upload_dir = Path(self.settings.upload_dir)

    async def store(self, file: UploadFile) -> str:
        """Write the upload to the upload directory and return its stored filename."""
        filename = build_filename(file.filename)
        content = await file.read()
        await run_in_threadpool(self._write, filename, content)

        logger.info(f"Stored upload {filename} ({len(content)} bytes)")
        return filename

    def _write(self, filename: str, content: bytes) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        (self.upload_dir / filename).write_bytes(content)

    def public_url(self, filename: str) -> str:
        """URL the stored file is served from."""
        return f"{self.settings.image_base_url}/{filename}"
