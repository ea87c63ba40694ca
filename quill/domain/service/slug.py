"""Slug derivation from post titles."""

import re
import unicodedata

from quill.domain.value.types import SLUG_MAX_LENGTH

FALLBACK_SLUG = "post"

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9-]+")
_HYPHEN_RUNS = re.compile(r"-{2,}")


def slugify(title: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Convert a title to URL-safe slug format.

    - Folds accented letters to ASCII and lowercases
    - Replaces whitespace and underscores with hyphens
    - Drops every other character outside ``[a-z0-9-]``
    - Collapses consecutive hyphens
    - Strips leading/trailing hyphens and truncates

    Returns:
        Slug candidate (may be empty if the title has no usable characters)
    """
    folded = unicodedata.normalize("NFKD", title)
    folded = folded.encode("ascii", "ignore").decode("ascii").lower().strip()

    slug = _WHITESPACE.sub("-", folded)
    slug = slug.replace("_", "-")
    slug = _DISALLOWED.sub("", slug)
    slug = _HYPHEN_RUNS.sub("-", slug)
    return slug.strip("-")[:max_length].rstrip("-")


def with_suffix(base: str, counter: int, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Append ``-<counter>`` to a base slug, truncating the base to fit."""
    suffix = f"-{counter}"
    return base[: max_length - len(suffix)].rstrip("-") + suffix
