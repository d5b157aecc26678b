"""
Passes module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError, ConflictError

from .models import PassCategory


class PassNotFoundError(NotFoundError):
    """Raised when a pass is missing or not owned by the caller."""

    def __init__(self, pass_id: int):
        super().__init__(
            "Pass not found",
            code="PASS_NOT_FOUND",
            details={"pass_id": pass_id},
        )


class PassQuotaExceededError(ValidationError):
    """Raised when every slot of a category has been issued."""

    def __init__(self, category: PassCategory):
        super().__init__(
            f"No more {category.value} passes available",
            code="PASS_QUOTA_EXCEEDED",
            details={"category": category.value},
        )
        self.category = category


class DuplicatePassError(ConflictError):
    """Raised when one-pass-per-user is enforced and the user already holds one."""

    def __init__(self, event_id: int, user_id: int):
        super().__init__(
            "User already holds a pass for this event",
            code="DUPLICATE_PASS",
            details={"event_id": event_id, "user_id": user_id},
        )
