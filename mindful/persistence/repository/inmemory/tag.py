"""In-memory tag repository for testing."""

from typing import Optional, Sequence

from mindful.domain.model import Tag
from mindful.domain.repository import TagRepository
from mindful.domain.value import PostId, TagId, TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        return sorted(self._store.tags.values(), key=lambda t: t.name.root)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find a tag by name."""
        for tag in self._store.tags.values():
            if tag.name == name:
                return tag
        return None

    async def save(self, tag: Tag) -> Tag:
        """Save a new tag."""
        saved = tag.model_copy(update={"id": TagId(self._store.next_id())})
        self._store.tags[saved.id] = saved
        return saved

    async def link_to_post(self, post_id: PostId, tag_id: TagId) -> None:
        """Link a tag to a post."""
        self._store.post_tags.add((post_id, tag_id))

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, list[Tag]]:
        """Find tags for several posts."""
        return {
            post_id: sorted(
                (
                    self._store.tags[tag_id]
                    for linked_post, tag_id in self._store.post_tags
                    if linked_post == post_id
                ),
                key=lambda t: t.name.root,
            )
            for post_id in post_ids
        }
