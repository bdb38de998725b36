"""Delete post use case."""

from pydantic import BaseModel

from mindful.application.usecase.base import BaseUseCase, ResponseModel
from mindful.domain.repository import UnitOfWork
from mindful.domain.service import PostService
from mindful.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    user_id: str  # User ID from authenticated user


class DeletePostResponse(ResponseModel):
    """Delete post response."""

    message: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post on behalf of its author."""

    def __init__(self, post_service: PostService, unit_of_work: UnitOfWork) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            unit_of_work: Transaction boundary
        """
        self.post_service = post_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the caller is not the author
        """
        await self.post_service.delete_post(
            PostId(request.post_id), UserId(request.user_id)
        )
        await self.unit_of_work.commit()
        return DeletePostResponse(message="Post deleted successfully")
