"""Post response models shared by the post use cases."""

from datetime import datetime

from mindful.application.usecase.base import ResponseModel
from mindful.application.usecase.tag import TagResponse
from mindful.domain.model import Post
from mindful.domain.service import TagService
from mindful.domain.value import PostId, VoteType


class PostResponse(ResponseModel):
    """Post with its tags.

    ``author_id`` is hidden on anonymous posts unless the viewer is the
    author. ``user_vote`` is only filled for authenticated listings.
    """

    id: int
    title: str
    content: str
    excerpt: str | None
    author_id: str | None
    is_anonymous: bool
    votes: int
    comment_count: int
    created_at: datetime
    updated_at: datetime
    tags: list[TagResponse]
    user_vote: VoteType | None = None


async def build_post_responses(
    posts: list[Post],
    tag_service: TagService,
    user_votes: dict[PostId, VoteType] | None = None,
    reveal_author: bool = False,
) -> list[PostResponse]:
    """Attach tags (and the viewer's votes) to posts.

    Args:
        posts: Posts to render
        tag_service: Tag domain service for the batch tag lookup
        user_votes: Viewer's votes keyed by post ID, if authenticated
        reveal_author: Show the author of anonymous posts

    Returns:
        Rendered posts in the given order
    """
    post_ids = [post.id for post in posts if post.id is not None]
    tags_by_post = await tag_service.get_tags_for_posts(post_ids)
    user_votes = user_votes or {}

    return [
        PostResponse(
            id=post.id,
            title=post.title,
            content=post.content,
            excerpt=post.excerpt,
            author_id=(
                None
                if post.is_anonymous and not reveal_author
                else str(post.author_id)
            ),
            is_anonymous=post.is_anonymous,
            votes=post.votes,
            comment_count=post.comment_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
            tags=[TagResponse.from_tag(tag) for tag in tags_by_post.get(post.id, [])],
            user_vote=user_votes.get(post.id),
        )
        for post in posts
    ]
