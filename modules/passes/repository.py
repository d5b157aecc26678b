"""
Pass repository for database access.

Issuance goes through the ``issue_pass`` Postgres function, which locks
the event row, counts the category and inserts in one transaction. The
function reports refusals with its own SQLSTATE codes.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from modules.events.exceptions import EventNotFoundError
from .models import Pass, UserPass, PassCategory, PassStatus
from .exceptions import PassQuotaExceededError, DuplicatePassError

# SQLSTATEs raised by issue_pass (migrations/002_issue_pass_function.sql)
EVENT_MISSING = "PE404"
QUOTA_EXCEEDED = "PQ400"
DUPLICATE_PASS = "PD409"


class PassRepository(BaseRepository[Pass]):
    """Repository for the passes table."""

    def issue(
        self,
        event_id: int,
        user_id: int,
        category: PassCategory,
        one_per_user: bool = False,
    ) -> Pass:
        """
        Atomically check the quota and insert an Active pass.

        Raises:
            EventNotFoundError: No event with event_id
            PassQuotaExceededError: Category limit reached
            DuplicatePassError: one_per_user and the user already holds a pass
        """
        query = self._db.rpc(
            "issue_pass",
            {
                "p_event_id": event_id,
                "p_user_id": user_id,
                "p_category": category.value,
                "p_one_per_user": one_per_user,
            },
        )
        try:
            result = query.execute()
        except APIError as e:
            if e.code == EVENT_MISSING:
                raise EventNotFoundError(event_id) from e
            if e.code == QUOTA_EXCEEDED:
                raise PassQuotaExceededError(category) from e
            if e.code == DUPLICATE_PASS:
                raise DuplicatePassError(event_id, user_id) from e
            raise self._translate_error(e) from e

        return self._map_to_pass(result.data[0])

    def get_owned(self, pass_id: int, user_id: int) -> Optional[Pass]:
        """Get a pass held by user_id, or None."""
        result = self._execute(
            self._db.table("passes")
            .select("*")
            .eq("id", pass_id)
            .eq("user_id", user_id)
        )
        if not result.data:
            return None
        return self._map_to_pass(result.data[0])

    def list_for_user(self, user_id: int) -> list[UserPass]:
        """List a user's passes with the embedded event name and date."""
        result = self._execute(
            self._db.table("passes")
            .select("*, events(name, date)")
            .eq("user_id", user_id)
            .order("id")
        )
        return [self._map_to_user_pass(row) for row in result.data]

    def list_for_event(self, event_id: int) -> list[Pass]:
        """List every pass of an event in issue order."""
        result = self._execute(
            self._db.table("passes")
            .select("*")
            .eq("event_id", event_id)
            .order("id")
        )
        return [self._map_to_pass(row) for row in result.data]

    def update_status_owned(
        self,
        pass_id: int,
        user_id: int,
        status: PassStatus,
    ) -> Optional[Pass]:
        """
        Set the status of a pass held by user_id.

        Returns:
            The updated pass, or None when zero rows matched.
        """
        result = self._execute(
            self._db.table("passes")
            .update({"status": status.value})
            .eq("id", pass_id)
            .eq("user_id", user_id)
        )
        if not result.data:
            return None
        return self._map_to_pass(result.data[0])

    def _map_to_pass(self, data: dict[str, Any]) -> Pass:
        """Map database row to Pass model."""
        return Pass(
            id=data["id"],
            event_id=data["event_id"],
            user_id=data["user_id"],
            category=PassCategory(data["category"]),
            status=PassStatus(data.get("status", PassStatus.ACTIVE.value)),
            created_at=data["created_at"],
        )

    def _map_to_user_pass(self, data: dict[str, Any]) -> UserPass:
        """Map a row with an embedded ``events`` object to UserPass."""
        event = data["events"]
        return UserPass(
            **self._map_to_pass(data).model_dump(),
            event_name=event["name"],
            event_date=event["date"],
        )
