"""
Notifications module exceptions.
"""

from typing import Optional, Any

from shared.exceptions import ExternalServiceError


class UploadError(ExternalServiceError):
    """Raised when a pass image cannot be published to storage."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, service="storage", code="UPLOAD_FAILED", details=details)


class MessagingError(ExternalServiceError):
    """Raised when the messaging channel rejects or fails a send."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, service="whatsapp", code="MESSAGING_FAILED", details=details)
        self.status_code = status_code
