"""SQLAlchemy table definitions for canopy.

PostgreSQL is used as a document store: a post's whole comment forest is a
single JSONB value. These definitions match the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("author", JSONB, nullable=False),  # Author snapshot
    Column("content", Text, nullable=False),
    Column("comments", JSONB, nullable=False, server_default="[]"),  # Nested forest
    Column("replies", Integer, nullable=False, server_default="0"),  # Top-level only
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("type", String(50), nullable=False),  # 'comment', 'comment_reply', ...
    Column("from_user", JSONB, nullable=False),  # Actor snapshot
    Column("to_identity", String(255), nullable=False),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("comment_id", UUID(as_uuid=True), nullable=True),
    Column("message", Text, nullable=False),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient",
    notifications_table.c.to_identity,
    notifications_table.c.created_at.desc(),
)
