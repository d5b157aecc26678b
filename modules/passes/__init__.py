"""
Passes module.

Issues category passes against per-event quotas and manages their status.

Public API:
- IPassService: Interface for pass operations
- Pass, UserPass, PassCategory, PassStatus
- PassNotFoundError, PassQuotaExceededError, DuplicatePassError
"""

from .interfaces import IPassService
from .models import (
    Pass,
    UserPass,
    PassCategory,
    PassStatus,
    IssuePassRequest,
    UpdatePassStatusRequest,
)
from .exceptions import PassNotFoundError, PassQuotaExceededError, DuplicatePassError

__all__ = [
    # Interface
    "IPassService",
    # Models
    "Pass",
    "UserPass",
    "PassCategory",
    "PassStatus",
    "IssuePassRequest",
    "UpdatePassStatusRequest",
    # Exceptions
    "PassNotFoundError",
    "PassQuotaExceededError",
    "DuplicatePassError",
]
