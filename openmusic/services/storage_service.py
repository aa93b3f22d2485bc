# ============================================================================
# FILE: openmusic/services/storage_service.py
# ============================================================================
import os
import time
from pathlib import Path
from typing import Optional
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool
from openmusic.config import settings
from openmusic.core.exceptions import ClientError, InvariantError
import logging

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {
    "image/apng",
    "image/avif",
    "image/gif",
    "image/jpeg",
    "image/png",
    "image/webp",
}

class StorageService:
    """Stores uploaded album covers on the local filesystem"""

    def __init__(self, folder: Optional[str] = None, max_bytes: Optional[int] = None):
        self.folder = Path(folder or settings.UPLOAD_DIR)
        self.max_bytes = max_bytes or settings.MAX_COVER_BYTES

    def validate_image_headers(self, content_type: Optional[str]) -> None:
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise InvariantError("Cover must be an image")

    async def write_file(self, upload: UploadFile) -> str:
        """Persist an upload and return the stored file name"""
        data = await upload.read(self.max_bytes + 1)
        if len(data) > self.max_bytes:
            raise ClientError("Cover is too large", status_code=413)

        filename = f"{int(time.time() * 1000)}{os.path.basename(upload.filename or 'cover')}"
        path = self.folder / filename
        await run_in_threadpool(self._write, path, data)
        logger.info(f"Cover stored: {path} ({len(data)} bytes)")
        return filename

    def _write(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    async def remove_file(self, filename: str) -> None:
        """Delete a stored file, a missing file is not an error"""
        path = self.file_path(filename)
        await run_in_threadpool(path.unlink, missing_ok=True)
        logger.info(f"Cover removed: {path}")

    def file_path(self, filename: str) -> Path:
        return self.folder / os.path.basename(filename)

    def cover_url(self, filename: str) -> str:
        return f"http://{settings.HOST}:{settings.PORT}/api/v1/albums/images/{filename}"
