"""Unit tests for domain error to HTTP mapping."""

import pytest

from canopy.domain.error import (
    AuthenticationRequiredError,
    ForbiddenError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from canopy.interface.error import invalid_request, to_http_exception


class TestToHttpException:
    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (ValidationError("Comment content is required"), 400),
            (AuthenticationRequiredError("create comments"), 401),
            (ForbiddenError("comment", "c1", "bob@example.com"), 403),
            (NotFoundError("Post", "p1"), 404),
            (PersistenceError("connection refused"), 500),
        ],
    )
    def test_status_codes(self, error, status_code):
        assert to_http_exception(error, "do things").status_code == status_code

    def test_persistence_detail_is_generic(self):
        exc = to_http_exception(PersistenceError("password=hunter2"), "save comment")

        assert exc.detail == "Failed to save comment"

    def test_forbidden_detail_hides_identity(self):
        exc = to_http_exception(
            ForbiddenError("comment", "c1", "bob@example.com"), "edit"
        )

        assert "bob@example.com" not in exc.detail

    def test_invalid_request(self):
        assert invalid_request(ValueError("badly formed")).status_code == 400
