"""
Tests for shared models.
"""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_create_with_required_fields(self):
        """Should create user with only required fields."""
        user = AuthenticatedUser(id=42)
        assert user.id == 42
        assert user.issued_at is None

    def test_coerces_string_subject(self):
        """JWT subjects are strings; the id should be coerced to int."""
        user = AuthenticatedUser(id="42")
        assert user.id == 42

    def test_rejects_non_numeric_id(self):
        """Should reject ids that are not user row ids."""
        with pytest.raises(ValidationError):
            AuthenticatedUser(id="user-abc")

    def test_immutability(self):
        """Should be frozen/immutable."""
        user = AuthenticatedUser(id=1)
        with pytest.raises(ValidationError):
            user.id = 2

    def test_extra_fields_ignored(self):
        """Should ignore extra fields."""
        now = datetime.now(timezone.utc)
        user = AuthenticatedUser(id=1, issued_at=now, extra_field="ignored")  # type: ignore
        assert user.issued_at == now
        assert not hasattr(user, "extra_field")
