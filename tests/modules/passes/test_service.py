"""Tests for the passes service."""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest

from modules.passes.service import PassService
from modules.passes.models import PassCategory, PassStatus
from modules.passes.exceptions import (
    PassNotFoundError,
    PassQuotaExceededError,
    DuplicatePassError,
)
from modules.events.exceptions import EventNotFoundError
from tests.fakes import FakeStore, FakeEventRepository, FakePassRepository

ORGANIZER = 1
ATTENDEE = 2


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def events(store):
    return FakeEventRepository(store)


@pytest.fixture
def passes(store):
    return FakePassRepository(store)


@pytest.fixture
def service(passes, events):
    return PassService(passes=passes, events=events)


def make_event(events, gold=1, silver=1, platinum=0):
    return events.create(
        ORGANIZER,
        {
            "name": "Conf",
            "date": datetime(2025, 12, 31, 18, 0, tzinfo=timezone.utc),
            "location": "Hall A",
            "gold_limit": gold,
            "silver_limit": silver,
            "platinum_limit": platinum,
        },
    )


class TestIssuePass:

    @pytest.mark.asyncio
    async def test_issue_creates_active_pass(self, service, events):
        event = make_event(events)

        pass_ = await service.issue_pass(event.id, PassCategory.GOLD, ATTENDEE)

        assert pass_.event_id == event.id
        assert pass_.user_id == ATTENDEE
        assert pass_.status == PassStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_missing_event(self, service):
        with pytest.raises(EventNotFoundError):
            await service.issue_pass(99, PassCategory.GOLD, ATTENDEE)

    @pytest.mark.asyncio
    async def test_quota_exceeded(self, service, events):
        """The second Gold pass on a limit of one should be refused."""
        event = make_event(events, gold=1)
        await service.issue_pass(event.id, PassCategory.GOLD, ATTENDEE)

        with pytest.raises(PassQuotaExceededError) as exc_info:
            await service.issue_pass(event.id, PassCategory.GOLD, 3)

        assert exc_info.value.message == "No more Gold passes available"

    @pytest.mark.asyncio
    async def test_zero_limit_category(self, service, events):
        event = make_event(events, platinum=0)

        with pytest.raises(PassQuotaExceededError):
            await service.issue_pass(event.id, PassCategory.PLATINUM, ATTENDEE)

    @pytest.mark.asyncio
    async def test_categories_have_separate_quotas(self, service, events):
        event = make_event(events, gold=1, silver=1)
        await service.issue_pass(event.id, PassCategory.GOLD, ATTENDEE)

        silver = await service.issue_pass(event.id, PassCategory.SILVER, ATTENDEE)

        assert silver.category == PassCategory.SILVER

    @pytest.mark.asyncio
    async def test_cancelled_passes_still_count(self, service, events):
        """Cancelling a pass does not free its slot."""
        event = make_event(events, gold=1)
        pass_ = await service.issue_pass(event.id, PassCategory.GOLD, ATTENDEE)
        await service.update_pass_status(pass_.id, ATTENDEE, PassStatus.CANCELLED)

        with pytest.raises(PassQuotaExceededError):
            await service.issue_pass(event.id, PassCategory.GOLD, 3)

    @pytest.mark.asyncio
    async def test_one_pass_per_user(self, passes, events):
        service = PassService(passes=passes, events=events, one_per_user=True)
        event = make_event(events, gold=1, silver=1)
        await service.issue_pass(event.id, PassCategory.GOLD, ATTENDEE)

        with pytest.raises(DuplicatePassError):
            await service.issue_pass(event.id, PassCategory.SILVER, ATTENDEE)

    @pytest.mark.asyncio
    async def test_concurrent_requests_respect_limit(self, service, events, passes):
        """Many simultaneous requests should never exceed the limit."""
        event = make_event(events, gold=5)

        results = await asyncio.gather(
            *(service.issue_pass(event.id, PassCategory.GOLD, 100 + i) for i in range(20)),
            return_exceptions=True,
        )

        issued = [r for r in results if not isinstance(r, Exception)]
        refused = [r for r in results if isinstance(r, PassQuotaExceededError)]
        assert len(issued) == 5
        assert len(refused) == 15
        assert passes.count(event.id, PassCategory.GOLD) == 5

    def test_parallel_threads_respect_limit(self, store, events):
        """Issuance from parallel workers should also stop at the limit."""
        event = make_event(events, gold=3)
        repo = FakePassRepository(store, race_window=0.001)

        def attempt(user_id):
            try:
                return repo.issue(event.id, user_id, PassCategory.GOLD)
            except PassQuotaExceededError:
                return None

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(100, 124)))

        assert sum(1 for r in results if r is not None) == 3
        assert repo.count(event.id, PassCategory.GOLD) == 3


class TestPassLifecycle:

    @pytest.mark.asyncio
    async def test_list_user_passes(self, service, events):
        event = make_event(events)
        await service.issue_pass(event.id, PassCategory.GOLD, ATTENDEE)
        await service.issue_pass(event.id, PassCategory.SILVER, 3)

        mine = await service.list_user_passes(ATTENDEE)

        assert len(mine) == 1
        assert mine[0].event_name == "Conf"

    @pytest.mark.asyncio
    async def test_update_status_by_other_user(self, service, events):
        """Another user's pass should look missing."""
        event = make_event(events)
        pass_ = await service.issue_pass(event.id, PassCategory.GOLD, ATTENDEE)

        with pytest.raises(PassNotFoundError):
            await service.update_pass_status(pass_.id, 3, PassStatus.USED)

    @pytest.mark.asyncio
    async def test_get_owned_pass(self, service, events):
        event = make_event(events)
        pass_ = await service.issue_pass(event.id, PassCategory.GOLD, ATTENDEE)

        assert (await service.get_owned_pass(pass_.id, ATTENDEE)).id == pass_.id
        with pytest.raises(PassNotFoundError):
            await service.get_owned_pass(pass_.id, 3)

    @pytest.mark.asyncio
    async def test_list_event_passes_organizer_only(self, service, events):
        event = make_event(events)
        await service.issue_pass(event.id, PassCategory.GOLD, ATTENDEE)

        assert len(await service.list_event_passes(event.id, ORGANIZER)) == 1
        with pytest.raises(EventNotFoundError):
            await service.list_event_passes(event.id, ATTENDEE)
