"""SQLAlchemy table definitions for Mindful.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (profiles mirrored from the identity provider)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),  # Identity provider subject
    Column("email", String(255), nullable=True, unique=True),
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("profile_image_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", Text, nullable=True),
    Column(
        "author_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    # Net tally: up votes minus down votes (may be negative)
    Column("votes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("comment_count >= 0", name="ck_posts_comment_count_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False, unique=True),
    Column("color", String(20), nullable=False, server_default="#3b82f6"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POST_TAGS TABLE (Many-to-Many)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column(
        "post_id",
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("content", Text, nullable=False),
    Column(
        "author_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "post_id",
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# POST_VOTES TABLE
# ============================================================================
post_votes_table = Table(
    "post_votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "post_id",
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("vote_type", String(10), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per user per post
    UniqueConstraint("user_id", "post_id", name="uq_post_votes_user_post"),
    CheckConstraint("vote_type IN ('up', 'down')", name="ck_post_votes_vote_type"),
)

Index("idx_post_votes_post_id", post_votes_table.c.post_id)

# ============================================================================
# DOCTORS TABLE
# ============================================================================
doctors_table = Table(
    "doctors",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("specialization", String(255), nullable=False),
    Column("experience", Integer, nullable=False),  # Years
    Column("rating", Integer, nullable=False, server_default="0"),  # Tenths of a star
    Column("bio", Text, nullable=True),
    Column("profile_image_url", Text, nullable=True),
    Column("is_available", Boolean, nullable=False, server_default="true"),
    Column("next_available", String(100), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# DOCTOR_CONNECTIONS TABLE
# ============================================================================
doctor_connections_table = Table(
    "doctor_connections",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "doctor_id",
        Integer,
        ForeignKey("doctors.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("message", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('pending', 'approved', 'declined')",
        name="ck_doctor_connections_status",
    ),
)

Index("idx_doctor_connections_user_id", doctor_connections_table.c.user_id)

# ============================================================================
# CHAT_MESSAGES TABLE
# ============================================================================
chat_messages_table = Table(
    "chat_messages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("is_from_user", Boolean, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_chat_messages_user_id_created_at",
    chat_messages_table.c.user_id,
    chat_messages_table.c.created_at,
)
