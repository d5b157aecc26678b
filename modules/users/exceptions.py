"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: int):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class UserAlreadyExistsError(ValidationError):
    """Raised when the phone or email is already registered."""

    def __init__(self):
        super().__init__(
            "Phone or email already exists",
            code="USER_ALREADY_EXISTS",
        )
