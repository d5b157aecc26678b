"""
Tests for event API endpoints.
"""

import pytest
from unittest.mock import AsyncMock
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_event_service, get_pass_service
from modules.events.models import Event
from modules.events.exceptions import EventNotFoundError, EventHasPassesError
from modules.passes.models import Pass, PassCategory
from tests.conftest import create_test_token


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def mock_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_event_service] = lambda: service
    return service


@pytest.fixture
def mock_event() -> Event:
    now = datetime.now(timezone.utc)
    return Event(
        id=1,
        name="Conf",
        date=now,
        location="Hall A",
        organizer_id=1,
        gold_limit=1,
        silver_limit=1,
        created_at=now,
    )


EVENT_BODY = {
    "name": "Conf",
    "date": "2025-12-31T18:00:00Z",
    "location": "Hall A",
    "gold_limit": 1,
    "silver_limit": 1,
}


class TestCreateEvent:
    """Tests for POST /api/events"""

    def test_create_event(self, app, mock_service, mock_event, auth_headers):
        mock_service.create_event.return_value = mock_event

        response = TestClient(app).post("/api/events", json=EVENT_BODY, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["id"] == 1
        organizer_id, request = mock_service.create_event.call_args[0]
        assert organizer_id == 1
        assert request.gold_limit == 1

    def test_create_requires_auth(self, app, mock_service):
        response = TestClient(app).post("/api/events", json=EVENT_BODY)
        assert response.status_code == 401

    def test_negative_limit_rejected(self, app, mock_service, auth_headers):
        """Limits must be non-negative integers."""
        response = TestClient(app).post(
            "/api/events",
            json={**EVENT_BODY, "gold_limit": -1},
            headers=auth_headers,
        )
        assert response.status_code == 400
        mock_service.create_event.assert_not_called()


class TestReadEvents:
    """Tests for GET /api/events and GET /api/events/{id}"""

    def test_list_is_public(self, app, mock_service, mock_event):
        mock_service.list_events.return_value = [mock_event]

        response = TestClient(app).get("/api/events")

        assert response.status_code == 200
        assert [e["name"] for e in response.json()] == ["Conf"]

    def test_get_not_found(self, app, mock_service):
        mock_service.get_event.side_effect = EventNotFoundError(9)

        response = TestClient(app).get("/api/events/9")

        assert response.status_code == 404
        assert response.json()["error"] == "Event not found"


class TestModifyEvent:
    """Tests for PUT and DELETE /api/events/{id}"""

    def test_update(self, app, mock_service, mock_event, auth_headers):
        mock_service.update_event.return_value = mock_event.model_copy(update={"location": "Hall B"})

        response = TestClient(app).put(
            "/api/events/1", json={"location": "Hall B"}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["location"] == "Hall B"

    def test_update_not_owner(self, app, mock_service):
        mock_service.update_event.side_effect = EventNotFoundError(1)
        headers = {"Authorization": f"Bearer {create_test_token(user_id=2)}"}

        response = TestClient(app).put("/api/events/1", json={"name": "x"}, headers=headers)

        assert response.status_code == 404
        assert mock_service.update_event.call_args[0][1] == 2

    def test_delete(self, app, mock_service, auth_headers):
        mock_service.delete_event.return_value = None

        response = TestClient(app).delete("/api/events/1", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Event deleted successfully"}

    def test_delete_with_passes(self, app, mock_service, auth_headers):
        mock_service.delete_event.side_effect = EventHasPassesError(1)

        response = TestClient(app).delete("/api/events/1", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "EVENT_HAS_PASSES"


class TestEventPasses:
    """Tests for GET /api/events/{id}/passes"""

    def test_list_event_passes(self, app, auth_headers):
        pass_service = AsyncMock()
        pass_service.list_event_passes.return_value = [
            Pass(
                id=1,
                event_id=1,
                user_id=2,
                category=PassCategory.GOLD,
                created_at=datetime.now(timezone.utc),
            )
        ]
        app.dependency_overrides[get_pass_service] = lambda: pass_service

        response = TestClient(app).get("/api/events/1/passes", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()[0]["category"] == "Gold"
        assert response.json()[0]["status"] == "Active"
        pass_service.list_event_passes.assert_awaited_once_with(1, 1)
