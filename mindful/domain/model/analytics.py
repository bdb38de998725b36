"""Read models for community analytics."""

from mindful.domain.model.common import DomainModel


def growth_percentage(recent: int, total: int) -> float:
    """Share of ``total`` that is recent, as a percentage to one decimal."""
    if recent <= 0 or total <= 0:
        return 0
    return round(recent / total * 100, 1)


class PostStats(DomainModel):
    """Post volume over the analytics window."""

    total_posts: int
    recent_posts: int

    @property
    def growth(self) -> float:
        return growth_percentage(self.recent_posts, self.total_posts)


class UserStats(DomainModel):
    """User volume and activity over the analytics window."""

    total_users: int
    active_users: int

    @property
    def growth(self) -> float:
        return growth_percentage(self.active_users, self.total_users)


class TagUsage(DomainModel):
    """Number of posts linked to one tag."""

    tag_name: str
    tag_color: str
    count: int
