"""SQLAlchemy table definitions for Quill.

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
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from quill.domain.value.types import SLUG_MAX_LENGTH

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="reader"),
    Column("display_name", String(100), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('admin', 'author', 'reader')", name="ck_users_role"),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String(300), nullable=False),
    Column("slug", String(SLUG_MAX_LENGTH), nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", String(200), nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("featured_image", Text, nullable=True),
    Column("is_published", Boolean, nullable=False, server_default="true"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column(
        "published_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("view_count >= 0", name="ck_posts_view_count"),
)

# Slugs are unique across all posts, published or not
Index("uq_posts_slug", posts_table.c.slug, unique=True)
Index(
    "idx_posts_published_at",
    posts_table.c.is_published,
    posts_table.c.published_at.desc(),
)
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# POST TAGS TABLE (ordered, owned by the post)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column(
        "post_id",
        UUID,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("name", String(50), nullable=False),
    Column("type", String(20), nullable=False),
)

Index("idx_post_tags_type", post_tags_table.c.type)

# ============================================================================
# CONTACT MESSAGES TABLE
# ============================================================================
contact_messages_table = Table(
    "contact_messages",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=False),
    Column("subject", String(200), nullable=False),
    Column("message", Text, nullable=False),
    Column("ip_address", String(64), nullable=True),
    Column("user_agent", Text, nullable=True),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("is_replied", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_contact_messages_created_at", contact_messages_table.c.created_at.desc())
Index("idx_contact_messages_is_read", contact_messages_table.c.is_read)
