"""Test configuration and fixtures."""

from mindful.domain.model import Doctor, Post
from mindful.domain.value import UserId


def make_post(
    author_id: str = "author-1",
    title: str = "Finding calm after a long week",
    content: str = "Breathing exercises have really helped me this month.",
    **overrides,
) -> Post:
    """Helper to build an unsaved post for tests.

    Args:
        author_id: Author user ID
        title: Post title
        content: Post body
        **overrides: Any other Post field

    Returns:
        Post without an ID (the repository assigns one on save)
    """
    return Post(
        title=title,
        content=content,
        excerpt=Post.make_excerpt(content),
        author_id=UserId(author_id),
        **overrides,
    )


def make_doctor(
    name: str = "Dr. Sarah Chen",
    specialization: str = "Anxiety & Depression",
    **overrides,
) -> Doctor:
    """Helper to build an unsaved doctor for tests."""
    fields = {"experience": 10, "rating": 48}
    fields.update(overrides)
    return Doctor(name=name, specialization=specialization, **fields)
