"""Domain model entities for Mindful."""

from mindful.domain.model.analytics import PostStats, TagUsage, UserStats
from mindful.domain.model.chat_message import ChatMessage
from mindful.domain.model.comment import Comment
from mindful.domain.model.doctor import Doctor, DoctorConnection
from mindful.domain.model.post import Post
from mindful.domain.model.tag import Tag
from mindful.domain.model.user import User
from mindful.domain.model.vote import Vote, VoteAction, VoteTransition, plan_vote

__all__ = [
    "User",
    "Post",
    "Comment",
    "Vote",
    "VoteAction",
    "VoteTransition",
    "plan_vote",
    "Tag",
    "Doctor",
    "DoctorConnection",
    "ChatMessage",
    "PostStats",
    "UserStats",
    "TagUsage",
]
