"""Unit tests for the vote transition table."""

import pytest
from pydantic import ValidationError

from mindful.domain.model.vote import VoteAction, VoteTransition, plan_vote
from mindful.domain.value import VoteType


class TestPlanVote:
    """Tests for plan_vote."""

    @pytest.mark.parametrize(
        "existing, requested, action, current, delta",
        [
            (None, VoteType.UP, VoteAction.CREATE, VoteType.UP, 1),
            (None, VoteType.DOWN, VoteAction.CREATE, VoteType.DOWN, -1),
            (VoteType.UP, VoteType.UP, VoteAction.RETRACT, None, -1),
            (VoteType.DOWN, VoteType.DOWN, VoteAction.RETRACT, None, 1),
            (VoteType.UP, VoteType.DOWN, VoteAction.FLIP, VoteType.DOWN, -2),
            (VoteType.DOWN, VoteType.UP, VoteAction.FLIP, VoteType.UP, 2),
        ],
    )
    def test_transition_table(self, existing, requested, action, current, delta):
        """Every (standing, requested) pair maps to exactly one transition."""
        transition = plan_vote(existing, requested)

        assert transition.action == action
        assert transition.previous == existing
        assert transition.current == current
        assert transition.tally_delta == delta

    def test_flip_delta_is_difference_of_weights(self):
        """A flip removes the old weight and adds the new one."""
        transition = plan_vote(VoteType.UP, VoteType.DOWN)

        assert transition.tally_delta == VoteType.DOWN.weight - VoteType.UP.weight

    def test_flip_is_symmetric(self):
        """Flipping one way and back cancels out."""
        there = plan_vote(VoteType.UP, VoteType.DOWN)
        back = plan_vote(VoteType.DOWN, VoteType.UP)

        assert there.tally_delta + back.tally_delta == 0

    def test_transition_is_immutable(self):
        """Transitions are value objects."""
        transition = plan_vote(None, VoteType.UP)

        with pytest.raises(ValidationError):
            transition.action = VoteAction.FLIP  # type: ignore[misc]

    def test_transitions_compare_by_value(self):
        """Equal inputs plan equal transitions."""
        assert plan_vote(None, VoteType.UP) == VoteTransition(
            action=VoteAction.CREATE, previous=None, current=VoteType.UP
        )


class TestVoteType:
    """Tests for VoteType weights."""

    def test_weights(self):
        assert VoteType.UP.weight == 1
        assert VoteType.DOWN.weight == -1

    def test_parses_wire_values(self):
        assert VoteType("up") is VoteType.UP
        assert VoteType("down") is VoteType.DOWN
