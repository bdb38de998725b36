"""Post use cases."""

from .common import PostResponse
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_my_posts import ListMyPostsRequest, ListMyPostsUseCase
from .list_posts import ListPostsRequest, ListPostsUseCase
from .search_posts import SearchPostsRequest, SearchPostsUseCase
from .suggest_titles import (
    SuggestTitlesRequest,
    SuggestTitlesResponse,
    SuggestTitlesUseCase,
)

__all__ = [
    "PostResponse",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListMyPostsRequest",
    "ListMyPostsUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "SearchPostsRequest",
    "SearchPostsUseCase",
    "SuggestTitlesRequest",
    "SuggestTitlesResponse",
    "SuggestTitlesUseCase",
]
