"""Unit tests for slug derivation."""

import pytest

from quill.domain.service.slug import slugify, with_suffix
from quill.domain.value import Slug
from quill.domain.value.types import SLUG_PATTERN


class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        "title, expected",
        [
            ("Hello World", "hello-world"),
            ("  Hello   World  ", "hello-world"),
            ("Hello, World!", "hello-world"),
            ("snake_case_title", "snake-case-title"),
            ("Café Crème", "cafe-creme"),
            ("C++ -- the good parts", "c-the-good-parts"),
            ("2024: A Year in Review", "2024-a-year-in-review"),
        ],
    )
    def test_slugify_examples(self, title, expected):
        """Titles should map to lowercase hyphenated slugs."""
        assert slugify(title) == expected

    def test_slugify_title_without_usable_characters_is_empty(self):
        """Titles with only punctuation produce an empty candidate."""
        assert slugify("!!! ??? ***") == ""

    def test_slugify_truncates_without_trailing_hyphen(self):
        """Truncation should never leave a trailing hyphen."""
        title = "word " * 40

        slug = slugify(title, max_length=22)

        assert len(slug) <= 22
        assert not slug.endswith("-")
        assert SLUG_PATTERN.match(slug)

    def test_slugify_output_is_always_a_valid_slug(self):
        """Any non-empty result should satisfy the Slug value object."""
        for title in ["A", "a--b", "-lead and trail-", "Ünïcödé ßtraße", "x_y z"]:
            candidate = slugify(title)
            assert Slug(candidate).root == candidate


class TestWithSuffix:
    """Tests for with_suffix."""

    def test_appends_counter(self):
        assert with_suffix("hello-world", 1) == "hello-world-1"
        assert with_suffix("hello-world", 12) == "hello-world-12"

    def test_truncates_base_to_fit_suffix(self):
        """The suffixed slug should respect the length limit."""
        result = with_suffix("a" * 100, 7, max_length=100)

        assert len(result) == 100
        assert result.endswith("-7")
