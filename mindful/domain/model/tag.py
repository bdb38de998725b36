"""Tag entity for categorizing posts."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from mindful.domain.model.common import DomainModel, utcnow
from mindful.domain.value import TagId, TagName

DEFAULT_TAG_COLOR = "#3b82f6"


class Tag(DomainModel):
    """Tag entity for categorizing posts.

    Tags are created on demand the first time a post uses a new name.
    """

    id: Optional[TagId] = None  # Assigned by the database on insert
    name: TagName  # Unique
    color: str = Field(default=DEFAULT_TAG_COLOR, max_length=20)
    created_at: datetime = Field(default_factory=utcnow)
