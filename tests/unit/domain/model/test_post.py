"""Unit tests for post and analytics domain models."""

import pytest
from pydantic import ValidationError

from mindful.domain.model import Post
from mindful.domain.model.analytics import PostStats, UserStats, growth_percentage
from mindful.domain.value import UserId


class TestMakeExcerpt:
    """Tests for Post.make_excerpt."""

    def test_short_content_is_kept_whole(self):
        assert Post.make_excerpt("Short and sweet") == "Short and sweet"

    def test_content_at_limit_is_not_truncated(self):
        content = "a" * 200

        assert Post.make_excerpt(content) == content

    def test_long_content_is_truncated_with_ellipsis(self):
        content = "b" * 250

        excerpt = Post.make_excerpt(content)

        assert excerpt == "b" * 200 + "..."

    def test_custom_length(self):
        assert Post.make_excerpt("abcdefgh", length=3) == "abc..."


class TestPostValidation:
    """Tests for Post field constraints."""

    def test_votes_may_be_negative(self):
        post = Post(title="t", content="c", author_id=UserId("u"), votes=-3)

        assert post.votes == -3

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            Post(title="", content="c", author_id=UserId("u"))

    def test_title_longer_than_255_rejected(self):
        with pytest.raises(ValidationError):
            Post(title="x" * 256, content="c", author_id=UserId("u"))

    def test_negative_comment_count_rejected(self):
        with pytest.raises(ValidationError):
            Post(title="t", content="c", author_id=UserId("u"), comment_count=-1)


class TestGrowth:
    """Tests for analytics growth percentage."""

    def test_nothing_recent_is_zero(self):
        assert growth_percentage(0, 10) == 0

    def test_empty_total_is_zero(self):
        assert growth_percentage(0, 0) == 0

    def test_rounded_to_one_decimal(self):
        assert growth_percentage(1, 3) == 33.3

    def test_stats_expose_growth(self):
        assert PostStats(total_posts=4, recent_posts=1).growth == 25.0
        assert UserStats(total_users=8, active_users=2).growth == 25.0
