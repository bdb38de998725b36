"""Tag domain service."""

import logfire

from mindful.domain.error import PersistenceError, ValidationError
from mindful.domain.model.tag import Tag
from mindful.domain.repository import TagRepository
from mindful.domain.value import PostId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_all_tags(self) -> list[Tag]:
        """Get all tags ordered by name."""
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def get_or_create_tag(self, name: TagName) -> Tag:
        """Get a tag by name, creating it if it does not exist yet.

        Args:
            name: Tag name

        Returns:
            The existing or newly created tag
        """
        with logfire.span("tag_service.get_or_create_tag", tag_name=name.root):
            tag = await self.tag_repository.find_by_name(name)
            if tag:
                return tag

            tag = await self.tag_repository.save(Tag(name=name))
            logfire.info("Tag created", tag_name=name.root, tag_id=str(tag.id))
            return tag

    def parse_names(self, raw_names: list[str]) -> list[TagName]:
        """Parse tag names as submitted by the user.

        Names are trimmed; blank names and repeats are skipped.

        Args:
            raw_names: Tag names as submitted by the user

        Returns:
            The distinct tag names, in submission order

        Raises:
            ValidationError: If a trimmed name is longer than 50 characters
        """
        names: list[TagName] = []
        seen: set[str] = set()
        for raw in raw_names:
            if not raw.strip():
                continue
            try:
                name = TagName(raw)
            except ValueError as e:
                raise ValidationError("Tag names must be 1-50 characters") from e
            if name.root in seen:
                continue
            seen.add(name.root)
            names.append(name)
        return names

    async def tag_post(self, post_id: PostId, names: list[TagName]) -> list[Tag]:
        """Link a post to tags by name, creating missing tags.

        Args:
            post_id: Post ID
            names: Parsed tag names, see parse_names

        Returns:
            The tags now linked to the post, in the given order
        """
        with logfire.span("tag_service.tag_post", post_id=str(post_id)):
            tags: list[Tag] = []
            for name in names:
                tag = await self.get_or_create_tag(name)
                if tag.id is None:
                    raise PersistenceError("Saved tag has no ID")
                await self.tag_repository.link_to_post(post_id, tag.id)
                tags.append(tag)

            logfire.info("Post tagged", post_id=str(post_id), count=len(tags))
            return tags

    async def get_tags_for_posts(self, post_ids: list[PostId]) -> dict[PostId, list[Tag]]:
        """Get the tags of several posts at once.

        Args:
            post_ids: Posts to look up

        Returns:
            Mapping of post ID to its tags
        """
        if not post_ids:
            return {}
        return await self.tag_repository.find_by_posts(post_ids)
