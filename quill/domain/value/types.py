"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from quill.domain.value.common import RootValueObject

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
SLUG_MAX_LENGTH = 100


class UserRole(str, Enum):
    """Role of an account."""

    ADMIN = "admin"
    AUTHOR = "author"
    READER = "reader"


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Lowercase alphanumeric words joined by single hyphens, 1-100 characters.
    Examples: 'hello-world', 'hello-world-1'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > SLUG_MAX_LENGTH:
            raise ValueError(f"Slug must be 1-{SLUG_MAX_LENGTH} characters")
        if not SLUG_PATTERN.match(v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v


class Username(RootValueObject[str]):
    """Login name of a user."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v
