"""In-memory post repository for testing."""

from typing import Optional

from mindful.domain.model import Post
from mindful.domain.model.common import utcnow
from mindful.domain.repository import PostRepository
from mindful.domain.value import PostId, UserId

from .store import InMemoryStore


def _newest_first(posts: list[Post]) -> list[Post]:
    return sorted(posts, key=lambda p: (p.created_at, p.id or 0), reverse=True)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID. Locking is a no-op in memory."""
        return self._store.posts.get(post_id)

    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Post]:
        """Find posts newest first."""
        posts = _newest_first(list(self._store.posts.values()))
        return posts[offset : offset + limit]

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find posts by author."""
        return _newest_first(
            [p for p in self._store.posts.values() if p.author_id == author_id]
        )

    async def search(self, query: str) -> list[Post]:
        """Case-insensitive substring search."""
        needle = query.lower()
        return _newest_first(
            [
                p
                for p in self._store.posts.values()
                if needle in p.title.lower() or needle in p.content.lower()
            ]
        )

    async def save(self, post: Post) -> Post:
        """Save a new post."""
        saved = post.model_copy(update={"id": PostId(self._store.next_id())})
        self._store.posts[saved.id] = saved
        return saved

    async def delete(self, post_id: PostId) -> None:
        """Delete a post and cascade to its votes, comments and tag links."""
        self._store.posts.pop(post_id, None)
        self._store.votes = {
            k: v for k, v in self._store.votes.items() if v.post_id != post_id
        }
        self._store.comments = {
            k: c for k, c in self._store.comments.items() if c.post_id != post_id
        }
        self._store.post_tags = {
            link for link in self._store.post_tags if link[0] != post_id
        }

    async def adjust_votes(self, post_id: PostId, delta: int) -> None:
        """Add delta to the vote tally."""
        post = self._store.posts.get(post_id)
        if post:
            self._store.posts[post_id] = post.model_copy(
                update={"votes": post.votes + delta, "updated_at": utcnow()}
            )

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Increment the comment count."""
        post = self._store.posts.get(post_id)
        if post:
            self._store.posts[post_id] = post.model_copy(
                update={"comment_count": post.comment_count + 1}
            )
