"""Community analytics use cases."""

import logfire

from mindful.application.usecase.base import ResponseModel
from mindful.config import AnalyticsSettings
from mindful.domain.service import AnalyticsService


class PostAnalyticsResponse(ResponseModel):
    """Post volume summary."""

    total_posts: int
    recent_posts: int
    growth: float


class UserAnalyticsResponse(ResponseModel):
    """User activity summary."""

    total_users: int
    active_users: int
    growth: float


class TagAnalyticsItem(ResponseModel):
    """Usage of one tag."""

    tag_name: str
    tag_color: str
    count: int


class GetAnalyticsUseCase:
    """Use case for the community analytics dashboard.

    Each method backs one dashboard panel.
    """

    def __init__(
        self,
        analytics_service: AnalyticsService,
        analytics_settings: AnalyticsSettings,
    ) -> None:
        """Initialize analytics use case.

        Args:
            analytics_service: Analytics domain service
            analytics_settings: Analytics settings
        """
        self.analytics_service = analytics_service
        self.analytics_settings = analytics_settings

    async def posts(self) -> PostAnalyticsResponse:
        with logfire.span("get_analytics.posts"):
            stats = await self.analytics_service.post_stats(
                self.analytics_settings.window_days
            )
            return PostAnalyticsResponse(
                total_posts=stats.total_posts,
                recent_posts=stats.recent_posts,
                growth=stats.growth,
            )

    async def users(self) -> UserAnalyticsResponse:
        with logfire.span("get_analytics.users"):
            stats = await self.analytics_service.user_stats(
                self.analytics_settings.window_days
            )
            return UserAnalyticsResponse(
                total_users=stats.total_users,
                active_users=stats.active_users,
                growth=stats.growth,
            )

    async def tags(self) -> list[TagAnalyticsItem]:
        with logfire.span("get_analytics.tags"):
            usage = await self.analytics_service.top_tags(
                self.analytics_settings.top_tags_limit
            )
            return [
                TagAnalyticsItem(
                    tag_name=item.tag_name, tag_color=item.tag_color, count=item.count
                )
                for item in usage
            ]
