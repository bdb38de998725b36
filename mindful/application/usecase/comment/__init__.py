"""Comment use cases."""

from .common import CommentResponse
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsUseCase

__all__ = [
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
]
