"""Domain services."""

from .analytics_service import AnalyticsService
from .assistant_service import (
    EMPTY_REPLY,
    FALLBACK_REPLY,
    AssistantClient,
    AssistantError,
    AssistantService,
)
from .base import Service
from .chat_service import ChatService
from .comment_service import CommentService
from .doctor_service import DoctorService
from .jwt_service import JWTService
from .post_service import PostService
from .tag_service import TagService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "EMPTY_REPLY",
    "FALLBACK_REPLY",
    "AnalyticsService",
    "AssistantClient",
    "AssistantError",
    "AssistantService",
    "ChatService",
    "CommentService",
    "DoctorService",
    "JWTService",
    "PostService",
    "Service",
    "TagService",
    "UserService",
    "VoteService",
]
