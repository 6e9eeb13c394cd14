"""Unit tests for domain error to HTTP status mapping."""

import pytest

from grifi.domain.error import (
    ConcurrencyConflictError,
    ContactRequiredError,
    DomainError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from grifi.interface.api.app import status_for


class TestStatusFor:
    """Tests for status_for."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (ValidationError("bad"), 400),
            (ContactRequiredError(), 400),
            (ForbiddenError("CollabRequest", "1", None), 403),
            (NotFoundError("CollabRequest", "1"), 404),
            (InvalidTransitionError("CollabRequest", "1", "accepted", "rejected"), 409),
            (ConcurrencyConflictError("CollabRequest", "1"), 409),
            (DomainError("other"), 400),
        ],
    )
    def test_maps_domain_errors(self, error, expected):
        assert status_for(error) == expected
