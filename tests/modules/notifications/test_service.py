"""Tests for the pass delivery service."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from modules.notifications.service import PassDeliveryService
from modules.notifications.models import DispatchResult
from modules.passes.models import PassCategory, PassStatus
from modules.passes.exceptions import PassNotFoundError
from modules.events.exceptions import EventNotFoundError
from tests.fakes import (
    FakeStore,
    FakeUserRepository,
    FakeEventRepository,
    FakePassRepository,
)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def repos(store):
    return (
        FakeUserRepository(store),
        FakeEventRepository(store),
        FakePassRepository(store),
    )


@pytest.fixture
def dispatcher():
    mock = AsyncMock()
    mock.notify_one.side_effect = lambda user, event, pass_: DispatchResult(
        user_id=user.id, success=True
    )
    mock.notify_many.side_effect = lambda event, users, passes: [
        DispatchResult(user_id=u.id, success=True) for u in users
    ]
    return mock


@pytest.fixture
def service(repos, dispatcher):
    users, events, passes = repos
    return PassDeliveryService(passes=passes, events=events, users=users, dispatcher=dispatcher)


@pytest.fixture
def seeded(repos):
    """Organizer, two attendees, and an event with passes for both."""
    users, events, passes = repos
    organizer = users.create("Org", "5550000", "org@example.com")
    ann = users.create("Ann", "5550001", "ann@example.com")
    bob = users.create("Bob", "5550002", "bob@example.com")
    event = events.create(
        organizer.id,
        {
            "name": "Conf",
            "date": datetime(2025, 12, 31, tzinfo=timezone.utc),
            "location": "Hall A",
            "gold_limit": 5,
            "silver_limit": 5,
        },
    )
    ann_pass = passes.issue(event.id, ann.id, PassCategory.GOLD)
    bob_pass = passes.issue(event.id, bob.id, PassCategory.SILVER)
    passes.issue(event.id, ann.id, PassCategory.SILVER)
    return organizer, ann, bob, event, ann_pass, bob_pass


class TestSendPass:

    @pytest.mark.asyncio
    async def test_send_own_pass(self, service, dispatcher, seeded):
        _, ann, _, event, ann_pass, _ = seeded

        result = await service.send_pass(ann_pass.id, ann.id)

        assert result.success is True
        user, sent_event, sent_pass = dispatcher.notify_one.call_args[0]
        assert user.phone == "5550001"
        assert sent_event.id == event.id
        assert sent_pass.id == ann_pass.id

    @pytest.mark.asyncio
    async def test_send_someone_elses_pass(self, service, dispatcher, seeded):
        _, ann, _, _, _, bob_pass = seeded

        with pytest.raises(PassNotFoundError):
            await service.send_pass(bob_pass.id, ann.id)

        dispatcher.notify_one.assert_not_called()


class TestSendEventPasses:

    @pytest.mark.asyncio
    async def test_sends_to_each_holder_once(self, service, dispatcher, seeded):
        """Holders are ordered by their first pass and listed once."""
        organizer, ann, bob, event, _, _ = seeded

        results = await service.send_event_passes(event.id, organizer.id)

        assert [r.user_id for r in results] == [ann.id, bob.id]
        _, users, passes = dispatcher.notify_many.call_args[0]
        assert [u.id for u in users] == [ann.id, bob.id]
        assert len(passes) == 3

    @pytest.mark.asyncio
    async def test_skips_inactive_passes(self, service, dispatcher, repos, seeded):
        organizer, ann, bob, event, _, bob_pass = seeded
        _, _, passes = repos
        passes.update_status_owned(bob_pass.id, bob.id, PassStatus.USED)

        await service.send_event_passes(event.id, organizer.id)

        _, users, sent_passes = dispatcher.notify_many.call_args[0]
        assert [u.id for u in users] == [ann.id]
        assert all(p.status == PassStatus.ACTIVE for p in sent_passes)

    @pytest.mark.asyncio
    async def test_organizer_only(self, service, dispatcher, seeded):
        _, ann, _, event, _, _ = seeded

        with pytest.raises(EventNotFoundError):
            await service.send_event_passes(event.id, ann.id)

        dispatcher.notify_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_stream_checks_ownership_first(self, service, seeded):
        """A bad event id should fail before any result is produced."""
        _, ann, _, event, _, _ = seeded

        with pytest.raises(EventNotFoundError):
            await service.stream_event_passes(event.id, ann.id)
