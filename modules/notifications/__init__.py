"""
Notifications module.

Delivers rendered passes to users over WhatsApp, singly or in paced
batches.

Public API:
- IPassDeliveryService: Interface for send operations
- IImageUploader, IMessagingChannel: Collaborator interfaces
- NotificationDispatcher: Render/upload/send pipeline
- DispatchResult
- UploadError, MessagingError
"""

from .interfaces import IPassDeliveryService, IImageUploader, IMessagingChannel
from .models import DispatchResult, DispatchSummary
from .exceptions import UploadError, MessagingError
from .dispatcher import NotificationDispatcher

__all__ = [
    # Interfaces
    "IPassDeliveryService",
    "IImageUploader",
    "IMessagingChannel",
    # Implementation
    "NotificationDispatcher",
    # Models
    "DispatchResult",
    "DispatchSummary",
    # Exceptions
    "UploadError",
    "MessagingError",
]
