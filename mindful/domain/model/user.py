"""User aggregate root.

Users are owned by the external identity provider; this service keeps a copy
of their profile, refreshed from token claims whenever they authenticate.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from mindful.domain.model.common import DomainModel, utcnow
from mindful.domain.value import UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
