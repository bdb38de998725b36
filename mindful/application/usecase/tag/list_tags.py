"""List tags use case."""

import logfire
from datetime import datetime

from mindful.application.usecase.base import ResponseModel
from mindful.domain.model import Tag
from mindful.domain.service import TagService


class TagResponse(ResponseModel):
    """Tag in responses."""

    id: int
    name: str
    color: str
    created_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagResponse":
        return cls(
            id=tag.id,
            name=tag.name.root,
            color=tag.color,
            created_at=tag.created_at,
        )


class ListTagsUseCase:
    """Use case for listing available tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self) -> list[TagResponse]:
        """Execute list tags flow.

        Returns:
            All tags ordered by name
        """
        with logfire.span("list_tags.execute"):
            tags = await self.tag_service.get_all_tags()
            return [TagResponse.from_tag(tag) for tag in tags]
