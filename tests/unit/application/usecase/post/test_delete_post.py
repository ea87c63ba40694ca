"""Unit tests for DeletePostUseCase."""

import pytest

from quill.application.usecase.post import DeletePostRequest, DeletePostUseCase
from quill.domain.error import NotAuthorizedError
from quill.domain.repository import PostRepository, UserRepository
from quill.domain.value import UserRole
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_owner_deletes_post(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user())
        post = await post_repo.save(make_post(author.id))

        response = await use_case.execute(
            DeletePostRequest(post_id=str(post.id), requester_id=str(author.id))
        )

        assert response.message == "Post deleted successfully"
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_reader_cannot_delete_others_post(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user())
        reader = await user_repo.save(make_user(role=UserRole.READER))
        post = await post_repo.save(make_post(author.id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeletePostRequest(post_id=str(post.id), requester_id=str(reader.id))
            )

        assert await post_repo.find_by_id(post.id) is not None
