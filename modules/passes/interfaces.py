"""
Passes module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Pass, UserPass, PassCategory, PassStatus


@runtime_checkable
class IPassService(Protocol):
    """
    Interface for pass issuance and lifecycle.

    Issuance is atomic per event: concurrent requests never push the
    number of passes in a category past the event's limit.
    """

    async def issue_pass(self, event_id: int, category: PassCategory, user_id: int) -> Pass:
        """
        Issue an Active pass of category for event_id to user_id.

        Raises:
            EventNotFoundError: If the event does not exist
            PassQuotaExceededError: If the category is sold out
            DuplicatePassError: If one-pass-per-user is on and violated
        """
        ...

    async def list_user_passes(self, user_id: int) -> list[UserPass]:
        """List a user's passes with event name and date."""
        ...

    async def get_owned_pass(self, pass_id: int, user_id: int) -> Pass:
        """
        Get a pass held by user_id.

        Raises:
            PassNotFoundError: If missing or held by someone else
        """
        ...

    async def update_pass_status(self, pass_id: int, user_id: int, status: PassStatus) -> Pass:
        """
        Set the status of a pass held by user_id.

        Raises:
            PassNotFoundError: If missing or held by someone else
        """
        ...

    async def list_event_passes(self, event_id: int, organizer_id: int) -> list[Pass]:
        """
        List every pass of an event organized by organizer_id.

        Raises:
            EventNotFoundError: If missing or organized by someone else
        """
        ...
