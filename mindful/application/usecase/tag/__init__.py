"""Tag use cases."""

from .list_tags import ListTagsUseCase, TagResponse

__all__ = [
    "ListTagsUseCase",
    "TagResponse",
]
