"""Unit tests for domain error to HTTP status mapping."""

import pytest

from hoard.domain.error import (
    AccessDeniedError,
    ConflictError,
    DomainError,
    ExpiredError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from hoard.interface.api.errors import status_for


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ValidationError("bad role"), 400),
        (NotFoundError("Chest", "c1"), 404),
        (AccessDeniedError("delete the chest", "c1", "u1"), 403),
        (ForbiddenError("c1", "u1"), 403),
        (ConflictError("already invited"), 409),
        (ExpiredError("Invite", "abc..."), 410),
        (DomainError("something else"), 400),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected
