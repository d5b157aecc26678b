"""
Supabase Storage uploader for rendered pass images.
"""

import logging
from pathlib import Path

from supabase import Client

from .interfaces import IImageUploader
from .exceptions import UploadError

logger = logging.getLogger(__name__)


class SupabaseStorageUploader(IImageUploader):
    """
    Uploads images to a public Supabase Storage bucket.

    Objects are keyed by the file name, which the renderer makes unique.
    """

    def __init__(self, db: Client, bucket: str):
        self._db = db
        self._bucket = bucket

    def upload(self, path: Path) -> str:
        """Upload path and return its public URL."""
        key = f"passes/{path.name}"
        try:
            storage = self._db.storage.from_(self._bucket)
            storage.upload(key, path.read_bytes(), {"content-type": "image/png"})
            url = storage.get_public_url(key)
        except Exception as e:
            raise UploadError(
                f"Failed to upload pass image: {e}",
                details={"bucket": self._bucket, "key": key},
            ) from e

        logger.debug("Uploaded %s to %s", path.name, url)
        return url
