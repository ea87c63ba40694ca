"""Unit tests for domain error to HTTP mapping."""

import pytest

from quill.domain.error import (
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    SlugExhaustedError,
    UnauthenticatedError,
    ValidationError,
)
from quill.interface.api.errors import to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    @pytest.mark.parametrize(
        "error, status_code, detail",
        [
            (ValidationError("title: too short"), 400, "title: too short"),
            (InvalidCredentialsError(), 401, "Invalid credentials"),
            (UnauthenticatedError("expired"), 401, "Please authenticate"),
            (
                NotAuthorizedError("update", "post", "p1", "u1"),
                403,
                "Not authorized to update",
            ),
            (NotFoundError("Post", "hello"), 404, "Post not found"),
            (SlugExhaustedError("hello", 100), 409, None),
        ],
    )
    def test_mapping(self, error, status_code, detail):
        exc = to_http_exception(error)

        assert exc.status_code == status_code
        if detail is not None:
            assert exc.detail == detail

    def test_unauthenticated_sets_challenge_header(self):
        exc = to_http_exception(UnauthenticatedError("missing"))

        assert exc.headers == {"WWW-Authenticate": "Bearer"}
