"""Unit tests for VoteService."""

import random

import pytest

from mindful.domain.error import (
    NotFoundError,
    PersistenceConflictError,
    PersistenceError,
)
from mindful.domain.model import Vote
from mindful.domain.model.vote import VoteAction
from mindful.domain.repository import PostRepository, VoteRepository
from mindful.domain.service import VoteService
from mindful.domain.value import PostId, UserId, VoteType
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

ALICE = UserId("alice")
BOB = UserId("bob")


async def _tally(post_repo: PostRepository, post_id: PostId) -> int:
    post = await post_repo.find_by_id(post_id)
    assert post is not None
    return post.votes


async def _weight_sum(vote_repo: VoteRepository, post_id: PostId) -> int:
    return sum(v.vote_type.weight for v in await vote_repo.find_by_post(post_id))


class TestCastVoteScenarios:
    """Behavioural scenarios for cast_vote."""

    @pytest.mark.asyncio
    async def test_first_up_vote_creates_vote_and_increments(self, unit_env):
        """A first up vote records the vote and moves the tally to 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        transition = await vote_service.cast_vote(ALICE, post.id, VoteType.UP)

        # Assert
        assert transition.action == VoteAction.CREATE
        assert await _tally(post_repo, post.id) == 1
        vote = await vote_repo.find_by_user_and_post(ALICE, post.id)
        assert vote is not None
        assert vote.vote_type == VoteType.UP

    @pytest.mark.asyncio
    async def test_same_direction_again_retracts(self, unit_env):
        """Casting up twice leaves no vote and a zero tally."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        await vote_service.cast_vote(ALICE, post.id, VoteType.UP)

        # Act
        transition = await vote_service.cast_vote(ALICE, post.id, VoteType.UP)

        # Assert
        assert transition.action == VoteAction.RETRACT
        assert await _tally(post_repo, post.id) == 0
        assert await vote_repo.find_by_user_and_post(ALICE, post.id) is None

    @pytest.mark.asyncio
    async def test_opposite_direction_flips(self, unit_env):
        """Up then down leaves a single down vote and a tally of -1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        await vote_service.cast_vote(ALICE, post.id, VoteType.UP)
        assert await _tally(post_repo, post.id) == 1

        # Act
        transition = await vote_service.cast_vote(ALICE, post.id, VoteType.DOWN)

        # Assert
        assert transition.action == VoteAction.FLIP
        assert transition.tally_delta == -2
        assert await _tally(post_repo, post.id) == -1
        votes = await vote_repo.find_by_post(post.id)
        assert len(votes) == 1
        assert votes[0].user_id == ALICE
        assert votes[0].vote_type == VoteType.DOWN

    @pytest.mark.asyncio
    async def test_votes_on_other_posts_do_not_interfere(self, unit_env):
        """A down vote on a fresh post is independent of votes elsewhere."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        other = await post_repo.save(make_post(title="Other post"))
        fresh = await post_repo.save(make_post(title="Fresh post"))
        await vote_service.cast_vote(ALICE, other.id, VoteType.UP)

        # Act
        await vote_service.cast_vote(BOB, fresh.id, VoteType.DOWN)

        # Assert
        assert await _tally(post_repo, fresh.id) == -1
        assert await _tally(post_repo, other.id) == 1
        vote = await vote_repo.find_by_user_and_post(BOB, fresh.id)
        assert vote is not None
        assert vote.vote_type == VoteType.DOWN
        assert await vote_repo.find_by_user_and_post(ALICE, fresh.id) is None

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found_without_changes(self, unit_env):
        """Voting on a nonexistent post fails and records nothing."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        missing = PostId(999_999)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(ALICE, missing, VoteType.UP)

        assert await vote_repo.find_by_post(missing) == []


class TestCastVoteInvariants:
    """Ledger invariants over sequences of casts."""

    @pytest.mark.asyncio
    async def test_tally_equals_sum_of_weights_for_any_sequence(self, unit_env):
        """After every cast the tally equals the sum of standing vote weights."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        users = [UserId(f"user-{i}") for i in range(5)]
        rng = random.Random(20240611)

        # Act & Assert
        for _ in range(200):
            user = rng.choice(users)
            vote_type = rng.choice([VoteType.UP, VoteType.DOWN])
            await vote_service.cast_vote(user, post.id, vote_type)

            assert await _tally(post_repo, post.id) == await _weight_sum(
                vote_repo, post.id
            )

        # At most one standing vote per user
        voters = [v.user_id for v in await vote_repo.find_by_post(post.id)]
        assert len(voters) == len(set(voters))

    @pytest.mark.asyncio
    async def test_double_toggle_is_identity(self, unit_env):
        """Casting the same direction twice returns to the starting state."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        await vote_service.cast_vote(BOB, post.id, VoteType.DOWN)
        before_tally = await _tally(post_repo, post.id)
        before_vote = await vote_repo.find_by_user_and_post(ALICE, post.id)

        # Act
        await vote_service.cast_vote(ALICE, post.id, VoteType.DOWN)
        await vote_service.cast_vote(ALICE, post.id, VoteType.DOWN)

        # Assert
        assert await _tally(post_repo, post.id) == before_tally
        assert await vote_repo.find_by_user_and_post(ALICE, post.id) == before_vote

    @pytest.mark.asyncio
    async def test_duplicate_insert_surfaces_as_conflict(self, unit_env):
        """A vote created concurrently between read and insert is a conflict."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        original_find = vote_repo.find_by_user_and_post

        async def stale_find(user_id, post_id):
            # Simulate a racing request that inserted after our read
            vote_repo.find_by_user_and_post = original_find
            await vote_repo.save(
                Vote(user_id=user_id, post_id=post_id, vote_type=VoteType.UP)
            )
            return None

        vote_repo.find_by_user_and_post = stale_find

        # Act & Assert
        with pytest.raises(PersistenceConflictError):
            await vote_service.cast_vote(ALICE, post.id, VoteType.UP)

        # The tally was not moved by the failed cast
        assert await _tally(post_repo, post.id) == 0

    @pytest.mark.asyncio
    async def test_standing_vote_without_id_is_a_persistence_error(self, unit_env):
        """A stored vote read back without an ID cannot be retracted or flipped."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        async def find_without_id(user_id, post_id):
            return Vote(user_id=user_id, post_id=post_id, vote_type=VoteType.UP)

        vote_repo.find_by_user_and_post = find_without_id

        # Act & Assert
        with pytest.raises(PersistenceError):
            await vote_service.cast_vote(ALICE, post.id, VoteType.UP)
        with pytest.raises(PersistenceError):
            await vote_service.cast_vote(ALICE, post.id, VoteType.DOWN)

        assert await _tally(post_repo, post.id) == 0


class TestGetUserVotes:
    """Tests for vote lookups."""

    @pytest.mark.asyncio
    async def test_get_user_vote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        assert await vote_service.get_user_vote(ALICE, post.id) is None

        await vote_service.cast_vote(ALICE, post.id, VoteType.DOWN)

        assert await vote_service.get_user_vote(ALICE, post.id) == VoteType.DOWN

    @pytest.mark.asyncio
    async def test_get_user_votes_for_posts(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        first = await post_repo.save(make_post(title="First"))
        second = await post_repo.save(make_post(title="Second"))
        await vote_service.cast_vote(ALICE, first.id, VoteType.UP)
        await vote_service.cast_vote(BOB, second.id, VoteType.DOWN)

        votes = await vote_service.get_user_votes_for_posts(
            ALICE, [first.id, second.id]
        )

        assert votes == {first.id: VoteType.UP}

    @pytest.mark.asyncio
    async def test_get_user_votes_for_no_posts(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_user_votes_for_posts(ALICE, []) == {}
