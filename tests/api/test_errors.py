"""Tests for domain error to HTTP status mapping."""

import pytest

from api.app import status_code_for
from shared.exceptions import PasshubError, StoreError
from modules.auth.exceptions import ExpiredTokenError
from modules.events.exceptions import EventNotFoundError, EventHasPassesError
from modules.passes.exceptions import PassQuotaExceededError, DuplicatePassError
from modules.passes.models import PassCategory
from modules.notifications.exceptions import UploadError
from modules.rendering.exceptions import RenderError


@pytest.mark.parametrize(
    "error,status_code",
    [
        (PassQuotaExceededError(PassCategory.GOLD), 400),
        (EventHasPassesError(1), 400),
        (ExpiredTokenError(), 401),
        (EventNotFoundError(1), 404),
        (DuplicatePassError(1, 2), 409),
        (UploadError("bucket missing"), 502),
        (StoreError("connection failure"), 502),
        (RenderError(), 500),
        (PasshubError("unclassified"), 500),
    ],
)
def test_status_code_for(error, status_code):
    assert status_code_for(error) == status_code
