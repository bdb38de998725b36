"""Domain value objects for Mindful.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from mindful.domain.value.common import RootValueObject, ValueObject


class VoteType(str, Enum):
    """Direction of a vote on a post.

    Each direction carries a unit weight; a post's tally is the sum of the
    weights of the votes standing on it.
    """

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> int:
        """Contribution of one vote of this type to a post's tally."""
        return 1 if self is VoteType.UP else -1


class ConnectionStatus(str, Enum):
    """Lifecycle state of a doctor connection request."""

    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"


class TagName(RootValueObject[str]):
    """Tag name for categorizing posts.

    Surrounding whitespace is stripped; the result must be 1-50 characters.
    Examples: 'anxiety', 'sleep', 'self care'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name length after trimming."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag name must be 1-50 characters")
        return v


class ModerationResult(ValueObject):
    """Outcome of screening user-generated text."""

    flagged: bool
    reason: str | None = None
