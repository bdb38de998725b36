"""In-memory comment repository for testing."""

from typing import Optional

from mindful.domain.model import Comment
from mindful.domain.repository import CommentRepository
from mindful.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find comments on a post, newest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: (c.created_at, c.id or 0), reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        saved = comment.model_copy(update={"id": CommentId(self._store.next_id())})
        self._store.comments[saved.id] = saved
        return saved
