"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from mindful.domain.model.tag import Tag
from mindful.domain.value import PostId, TagId, TagName


class TagRepository(ABC):
    """Repository for Tag entity and its links to posts."""

    @abstractmethod
    async def find_all(self) -> List[Tag]:
        """Find all tags ordered by name.

        Returns:
            List of tags
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find a tag by its unique name.

        Args:
            name: Tag name

        Returns:
            The tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Args:
            tag: The tag to save

        Returns:
            The saved tag with its assigned ID
        """
        pass

    @abstractmethod
    async def link_to_post(self, post_id: PostId, tag_id: TagId) -> None:
        """Link a tag to a post. Linking twice is a no-op.

        Args:
            post_id: The post's ID
            tag_id: The tag's ID
        """
        pass

    @abstractmethod
    async def find_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, List[Tag]]:
        """Find the tags linked to each of the given posts (batch query).

        Args:
            post_ids: Posts to look up

        Returns:
            Mapping of post ID to its tags ordered by name. Posts without tags
            map to an empty list.
        """
        pass
