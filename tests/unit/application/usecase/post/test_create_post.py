"""Unit tests for CreatePostUseCase."""

import pytest

from quill.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    TagInfo,
)
from quill.domain.error import NotAuthorizedError, ValidationError
from quill.domain.model import TagType
from quill.domain.repository import PostRepository, UserRepository
from quill.domain.value import Slug, UserRole
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def make_request(requester_id, **overrides) -> CreatePostRequest:
    fields = {
        "title": "Hello World",
        "content": "Body text",
        "excerpt": "Short summary",
        "tags": [TagInfo(name="flash", type=TagType.TATTOO)],
        "requester_id": str(requester_id),
    }
    fields.update(overrides)
    return CreatePostRequest(**fields)


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_admin_creates_post(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        admin = await user_repo.save(make_user(role=UserRole.ADMIN))

        response = await use_case.execute(make_request(admin.id))

        assert response.slug == "hello-world"
        assert response.view_count == 0
        assert response.is_published is True
        assert response.author.id == str(admin.id)
        assert response.tags == [TagInfo(name="flash", type=TagType.TATTOO)]
        assert response.published_at == response.created_at
        saved = await post_repo.find_by_slug(Slug("hello-world"))
        assert saved is not None and str(saved.id) == response.id

    @pytest.mark.asyncio
    async def test_same_title_gets_suffixed_slugs(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user(role=UserRole.ADMIN))

        slugs = [
            (await use_case.execute(make_request(admin.id))).slug for _ in range(3)
        ]

        assert slugs == ["hello-world", "hello-world-1", "hello-world-2"]

    @pytest.mark.asyncio
    async def test_reader_is_forbidden(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        reader = await user_repo.save(make_user(role=UserRole.READER))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(make_request(reader.id))

    @pytest.mark.asyncio
    async def test_author_is_forbidden_with_default_roles(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user(role=UserRole.AUTHOR))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(make_request(author.id))

    @pytest.mark.asyncio
    async def test_excerpt_too_long_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        admin = await user_repo.save(make_user(role=UserRole.ADMIN))

        with pytest.raises(ValidationError, match="excerpt"):
            await use_case.execute(make_request(admin.id, excerpt="x" * 201))

        assert not await post_repo.slug_exists(Slug("hello-world"))
