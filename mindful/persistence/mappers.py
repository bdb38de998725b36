"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from mindful.domain.model import (
    ChatMessage,
    Comment,
    Doctor,
    DoctorConnection,
    Post,
    Tag,
    User,
    Vote,
)
from mindful.domain.value import (
    ChatMessageId,
    CommentId,
    ConnectionStatus,
    DoctorConnectionId,
    DoctorId,
    PostId,
    TagId,
    TagName,
    UserId,
    VoteId,
    VoteType,
)


def _without_id(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop an unassigned ID so the database generates one."""
    if data.get("id") is None:
        data.pop("id", None)
    return data


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        email=row.get("email"),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        profile_image_url=row.get("profile_image_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        excerpt=row.get("excerpt"),
        author_id=UserId(row["author_id"]),
        is_anonymous=row["is_anonymous"],
        votes=row["votes"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return _without_id(post.model_dump())


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return _without_id(comment.model_dump())


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        post_id=PostId(row["post_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = _without_id(vote.model_dump())
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(row["id"]),
        name=TagName(row["name"]),
        color=row["color"],
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    data = _without_id(tag.model_dump())
    data["name"] = tag.name.root
    return data


def row_to_doctor(row: Dict[str, Any]) -> Doctor:
    """Convert database row to Doctor domain model."""
    return Doctor(
        id=DoctorId(row["id"]),
        name=row["name"],
        specialization=row["specialization"],
        experience=row["experience"],
        rating=row["rating"],
        bio=row.get("bio"),
        profile_image_url=row.get("profile_image_url"),
        is_available=row["is_available"],
        next_available=row.get("next_available"),
        created_at=row["created_at"],
    )


def doctor_to_dict(doctor: Doctor) -> Dict[str, Any]:
    """Convert Doctor domain model to database dict."""
    return _without_id(doctor.model_dump())


def row_to_doctor_connection(row: Dict[str, Any]) -> DoctorConnection:
    """Convert database row to DoctorConnection domain model."""
    return DoctorConnection(
        id=DoctorConnectionId(row["id"]),
        user_id=UserId(row["user_id"]),
        doctor_id=DoctorId(row["doctor_id"]),
        status=ConnectionStatus(row["status"]),
        message=row.get("message"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def doctor_connection_to_dict(connection: DoctorConnection) -> Dict[str, Any]:
    """Convert DoctorConnection domain model to database dict."""
    data = _without_id(connection.model_dump())
    data["status"] = connection.status.value
    return data


def row_to_chat_message(row: Dict[str, Any]) -> ChatMessage:
    """Convert database row to ChatMessage domain model."""
    return ChatMessage(
        id=ChatMessageId(row["id"]),
        user_id=UserId(row["user_id"]),
        content=row["content"],
        is_from_user=row["is_from_user"],
        created_at=row["created_at"],
    )


def chat_message_to_dict(message: ChatMessage) -> Dict[str, Any]:
    """Convert ChatMessage domain model to database dict."""
    return _without_id(message.model_dump())
