"""Post domain service."""

import logfire

from mindful.domain.error import NotAuthorizedError, NotFoundError
from mindful.domain.model.post import Post
from mindful.domain.repository import PostRepository
from mindful.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a new post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span("post_service.save_post", author_id=str(post.author_id)):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID, failing if it does not exist.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def lock_post(self, post_id: PostId) -> Post:
        """Load a post and lock its row for the rest of the transaction.

        Concurrent writers touching the same post queue behind the lock, so
        whatever they read afterwards reflects this transaction's changes.

        Args:
            post_id: Post ID

        Returns:
            The locked post

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.lock_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id, for_update=True)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(self, limit: int, offset: int) -> list[Post]:
        """List posts newest first."""
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            posts = await self.post_repository.find_all(limit=limit, offset=offset)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def list_posts_by_author(self, author_id: UserId) -> list[Post]:
        """List an author's posts newest first."""
        with logfire.span(
            "post_service.list_posts_by_author", author_id=str(author_id)
        ):
            return await self.post_repository.find_by_author(author_id)

    async def search_posts(self, query: str) -> list[Post]:
        """Search posts by title or content."""
        with logfire.span("post_service.search_posts", query_length=len(query)):
            posts = await self.post_repository.search(query)
            logfire.info("Posts searched", count=len(posts))
            return posts

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post on behalf of its author.

        Args:
            post_id: Post ID
            user_id: User requesting the deletion

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.lock_post(post_id)
            if post.author_id != user_id:
                logfire.warn(
                    "Unauthorized post deletion attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                    author_id=str(post.author_id),
                )
                raise NotAuthorizedError(
                    "post", str(post_id), str(user_id), action="delete"
                )

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def adjust_votes(self, post_id: PostId, delta: int) -> None:
        """Atomically apply a signed change to a post's vote tally.

        Args:
            post_id: Post ID
            delta: Change to apply
        """
        with logfire.span(
            "post_service.adjust_votes", post_id=str(post_id), delta=delta
        ):
            if delta == 0:
                return
            await self.post_repository.adjust_votes(post_id, delta)

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment a post's comment count."""
        with logfire.span("post_service.increment_comment_count", post_id=str(post_id)):
            await self.post_repository.increment_comment_count(post_id)
