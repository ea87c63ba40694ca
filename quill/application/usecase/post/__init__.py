"""Post use cases."""

from .common import AuthorInfo, PostListItem, PostResponse, TagInfo
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_categories import CategoryResponse, ListCategoriesUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import PostChanges, UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "AuthorInfo",
    "CategoryResponse",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListCategoriesUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostChanges",
    "PostListItem",
    "PostResponse",
    "TagInfo",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
