"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from mindful.application.usecase.base import BaseUseCase
from mindful.application.usecase.tag import TagResponse
from mindful.config import PostSettings
from mindful.domain.error import PersistenceError
from mindful.domain.model import Post
from mindful.domain.repository import UnitOfWork
from mindful.domain.service import AssistantService, PostService, TagService
from mindful.domain.value import UserId

from .common import PostResponse

FLAGGED_POST_MESSAGE = "Content violates community guidelines"


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    is_anonymous: bool = False
    tag_names: list[str] = Field(default_factory=list)
    author_id: str  # User ID from authenticated user


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        assistant_service: AssistantService,
        unit_of_work: UnitOfWork,
        post_settings: PostSettings,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            assistant_service: Assistant domain service (moderation)
            unit_of_work: Transaction boundary
            post_settings: Post settings
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.assistant_service = assistant_service
        self.unit_of_work = unit_of_work
        self.post_settings = post_settings

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute post creation flow.

        Steps:
        1. Parse the tag names
        2. Screen title and content with the moderation model
        3. Save the post with its excerpt
        4. Get or create each tag and link it to the post
        5. Commit

        Args:
            request: Create post request

        Returns:
            The created post with its tags

        Raises:
            ContentFlaggedError: If moderation flags the post
            ValidationError: If a tag name is too long
        """
        with logfire.span(
            "create_post.execute",
            author_id=request.author_id,
            tag_count=len(request.tag_names),
        ):
            tag_names = self.tag_service.parse_names(request.tag_names)

            await self.assistant_service.ensure_allowed(
                f"{request.title} {request.content}", FLAGGED_POST_MESSAGE
            )

            post = await self.post_service.save_post(
                Post(
                    title=request.title,
                    content=request.content,
                    excerpt=Post.make_excerpt(
                        request.content, self.post_settings.excerpt_length
                    ),
                    author_id=UserId(request.author_id),
                    is_anonymous=request.is_anonymous,
                )
            )
            if post.id is None:
                raise PersistenceError("Saved post has no ID")

            tags = await self.tag_service.tag_post(post.id, tag_names)

            await self.unit_of_work.commit()

            logfire.info("Post created", post_id=str(post.id), tags=len(tags))

            return PostResponse(
                id=post.id,
                title=post.title,
                content=post.content,
                excerpt=post.excerpt,
                author_id=str(post.author_id),
                is_anonymous=post.is_anonymous,
                votes=post.votes,
                comment_count=post.comment_count,
                created_at=post.created_at,
                updated_at=post.updated_at,
                tags=[TagResponse.from_tag(tag) for tag in tags],
            )
