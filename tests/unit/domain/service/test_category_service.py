"""Unit tests for CategoryService."""

from uuid import uuid4

import pytest

from quill.domain.model import TagType
from quill.domain.repository import PostRepository
from quill.domain.service import CategoryService
from quill.domain.value import UserId
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

AUTHOR_ID = UserId(uuid4())


class TestListCategories:
    """Tests for list_categories."""

    @pytest.mark.asyncio
    async def test_counts_sorted_by_count_then_type(self, unit_env):
        category_service = await unit_env.get(CategoryService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(
            make_post(
                AUTHOR_ID,
                "One",
                tags=[("ink", TagType.TATTOO), ("film", TagType.AV)],
            )
        )
        await post_repo.save(
            make_post(AUTHOR_ID, "Two", tags=[("flash", TagType.TATTOO)])
        )
        await post_repo.save(
            make_post(AUTHOR_ID, "Three", tags=[("notes", TagType.ESSAYS)])
        )

        categories = await category_service.list_categories()

        assert [(c.type, c.count) for c in categories] == [
            ("tattoo", 2),
            ("av", 1),
            ("essays", 1),
        ]
        assert categories[1].name == "Audio/Visual"
        assert categories[0].id == "tattoo"

    @pytest.mark.asyncio
    async def test_unpublished_posts_are_ignored(self, unit_env):
        category_service = await unit_env.get(CategoryService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(
            make_post(
                AUTHOR_ID,
                "Draft",
                tags=[("wip", TagType.DESIGN)],
                is_published=False,
            )
        )

        assert await category_service.list_categories() == []
