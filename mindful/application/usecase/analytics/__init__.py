"""Analytics use cases."""

from .get_analytics import (
    GetAnalyticsUseCase,
    PostAnalyticsResponse,
    TagAnalyticsItem,
    UserAnalyticsResponse,
)

__all__ = [
    "GetAnalyticsUseCase",
    "PostAnalyticsResponse",
    "TagAnalyticsItem",
    "UserAnalyticsResponse",
]
