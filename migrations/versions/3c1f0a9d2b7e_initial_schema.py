"""initial_schema

Create the foundational schema for Mindful:
- Users (profiles mirrored from the identity provider)
- Posts with denormalized vote tally and comment count
- Tags and post/tag links
- Comments (optionally replying to another comment)
- Post votes (one standing up/down vote per user per post)
- Doctors and doctor connection requests
- Assistant chat messages

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-09-28 10:12:44.517203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        postgresql.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("email", sa.String(255), nullable=True, unique=True),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("profile_image_url", sa.Text, nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column(
            "author_id",
            sa.String(255),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "is_anonymous", sa.Boolean, nullable=False, server_default=sa.false()
        ),
        sa.Column("votes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer, nullable=False, server_default="0"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.CheckConstraint(
            "comment_count >= 0", name="ck_posts_comment_count_non_negative"
        ),
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False, unique=True),
        sa.Column("color", sa.String(20), nullable=False, server_default="#3b82f6"),
        _timestamp("created_at"),
    )

    op.create_table(
        "post_tags",
        sa.Column(
            "post_id",
            sa.Integer,
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "tag_id",
            sa.Integer,
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index("idx_post_tags_tag_id", "post_tags", ["tag_id"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column(
            "author_id",
            sa.String(255),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "post_id",
            sa.Integer,
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "parent_id",
            sa.Integer,
            sa.ForeignKey("comments.id", ondelete="CASCADE"),
            nullable=True,
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])

    op.create_table(
        "post_votes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.String(255),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "post_id",
            sa.Integer,
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("vote_type", sa.String(10), nullable=False),
        _timestamp("created_at"),
        sa.UniqueConstraint("user_id", "post_id", name="uq_post_votes_user_post"),
        sa.CheckConstraint(
            "vote_type IN ('up', 'down')", name="ck_post_votes_vote_type"
        ),
    )
    op.create_index("idx_post_votes_post_id", "post_votes", ["post_id"])

    op.create_table(
        "doctors",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("specialization", sa.String(255), nullable=False),
        sa.Column("experience", sa.Integer, nullable=False),
        sa.Column("rating", sa.Integer, nullable=False, server_default="0"),
        sa.Column("bio", sa.Text, nullable=True),
        sa.Column("profile_image_url", sa.Text, nullable=True),
        sa.Column(
            "is_available", sa.Boolean, nullable=False, server_default=sa.true()
        ),
        sa.Column("next_available", sa.String(100), nullable=True),
        _timestamp("created_at"),
    )

    op.create_table(
        "doctor_connections",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.String(255),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "doctor_id",
            sa.Integer,
            sa.ForeignKey("doctors.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("message", sa.Text, nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'declined')",
            name="ck_doctor_connections_status",
        ),
    )
    op.create_index(
        "idx_doctor_connections_user_id", "doctor_connections", ["user_id"]
    )

    op.create_table(
        "chat_messages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.String(255),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("is_from_user", sa.Boolean, nullable=False),
        _timestamp("created_at"),
    )
    op.create_index(
        "idx_chat_messages_user_id_created_at",
        "chat_messages",
        ["user_id", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("chat_messages")
    op.drop_table("doctor_connections")
    op.drop_table("doctors")
    op.drop_table("post_votes")
    op.drop_table("comments")
    op.drop_table("post_tags")
    op.drop_table("tags")
    op.drop_table("posts")
    op.drop_table("users")
