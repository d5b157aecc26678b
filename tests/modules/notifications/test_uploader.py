"""Tests for the Supabase Storage uploader."""

from unittest.mock import MagicMock

import pytest

from modules.notifications.uploader import SupabaseStorageUploader
from modules.notifications.exceptions import UploadError


class TestSupabaseStorageUploader:

    def test_upload_returns_public_url(self, tmp_path):
        path = tmp_path / "abc.png"
        path.write_bytes(b"\x89PNG")
        mock_db = MagicMock()
        bucket = mock_db.storage.from_.return_value
        bucket.get_public_url.return_value = "https://store/passes/abc.png"

        url = SupabaseStorageUploader(mock_db, "passes").upload(path)

        assert url == "https://store/passes/abc.png"
        mock_db.storage.from_.assert_called_once_with("passes")
        bucket.upload.assert_called_once_with(
            "passes/abc.png", b"\x89PNG", {"content-type": "image/png"}
        )

    def test_upload_failure(self, tmp_path):
        """Storage errors should become UploadError."""
        path = tmp_path / "abc.png"
        path.write_bytes(b"\x89PNG")
        mock_db = MagicMock()
        mock_db.storage.from_.return_value.upload.side_effect = RuntimeError("403")

        with pytest.raises(UploadError) as exc_info:
            SupabaseStorageUploader(mock_db, "passes").upload(path)

        assert exc_info.value.details["bucket"] == "passes"

    def test_missing_file(self, tmp_path):
        with pytest.raises(UploadError):
            SupabaseStorageUploader(MagicMock(), "passes").upload(tmp_path / "gone.png")
