"""Vote entity and the vote ledger's transition table.

A user holds at most one standing vote per post. Casting a vote either
creates that vote, retracts it (same direction again) or flips it (opposite
direction). Every transition carries the delta that keeps the post's tally
equal to the sum of the weights of the votes on record.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from mindful.domain.model.common import DomainModel, utcnow
from mindful.domain.value import PostId, UserId, VoteId, VoteType
from mindful.domain.value.common import ValueObject


class Vote(DomainModel):
    """Vote entity.

    Represents one user's current stance on one post.
    Business rules:
    - One vote per user per post (enforced by database unique constraint)
    - Mutated in place on a flip, deleted on a toggle-off
    """

    id: Optional[VoteId] = None  # Assigned by the database on insert
    user_id: UserId
    post_id: PostId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utcnow)


class VoteAction(str, Enum):
    """What a cast vote does to the user's standing vote."""

    CREATE = "create"  # No standing vote: record the new one
    RETRACT = "retract"  # Same direction again: remove the standing vote
    FLIP = "flip"  # Opposite direction: change the standing vote's type


def _weight(vote_type: VoteType | None) -> int:
    return vote_type.weight if vote_type is not None else 0


class VoteTransition(ValueObject):
    """One row of the vote ledger's transition table.

    Attributes:
        action: Tag of the transition
        previous: Standing vote type before the cast (None if absent)
        current: Standing vote type after the cast (None if retracted)
    """

    action: VoteAction
    previous: VoteType | None
    current: VoteType | None

    @property
    def tally_delta(self) -> int:
        """Change to apply to the post's tally.

        Derived as the weight of the new standing vote minus the weight of the
        old one, so a flip removes the old contribution and adds the new one.
        """
        return _weight(self.current) - _weight(self.previous)


def plan_vote(existing: VoteType | None, requested: VoteType) -> VoteTransition:
    """Decide the transition for casting ``requested`` over ``existing``.

    This is a total function over (standing vote or absence, requested type)
    and touches no storage.

    Args:
        existing: Type of the user's standing vote, or None
        requested: Type the user is casting

    Returns:
        The transition to apply
    """
    if existing is None:
        return VoteTransition(
            action=VoteAction.CREATE, previous=None, current=requested
        )
    if existing == requested:
        return VoteTransition(
            action=VoteAction.RETRACT, previous=existing, current=None
        )
    return VoteTransition(action=VoteAction.FLIP, previous=existing, current=requested)
