"""initial_schema

Create the blog schema:
- Users (password login, roles)
- Posts (unique slug, publish state, view counter)
- Post tags (ordered, owned by their post)
- Contact messages (read/replied flags)

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:44.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(), primary_key=True),
        sa.Column("username", sa.String(length=50), nullable=False, unique=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column(
            "role", sa.String(length=20), nullable=False, server_default="reader"
        ),
        sa.Column("display_name", sa.String(length=100), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint(
            "role IN ('admin', 'author', 'reader')", name="ck_users_role"
        ),
    )
    op.create_index("idx_users_email", "users", ["email"])

    op.create_table(
        "posts",
        sa.Column("id", postgresql.UUID(), primary_key=True),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.String(length=200), nullable=False),
        sa.Column(
            "author_id",
            postgresql.UUID(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("featured_image", sa.Text(), nullable=True),
        sa.Column(
            "is_published", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "published_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("view_count >= 0", name="ck_posts_view_count"),
    )
    # Slugs are unique across all posts, published or not
    op.create_index("uq_posts_slug", "posts", ["slug"], unique=True)
    op.create_index(
        "idx_posts_published_at",
        "posts",
        ["is_published", sa.text("published_at DESC")],
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    op.create_table(
        "post_tags",
        sa.Column(
            "post_id",
            postgresql.UUID(),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("position", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
    )
    op.create_index("idx_post_tags_type", "post_tags", ["type"])

    op.create_table(
        "contact_messages",
        sa.Column("id", postgresql.UUID(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("subject", sa.String(length=200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "is_replied", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )
    op.create_index(
        "idx_contact_messages_created_at",
        "contact_messages",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_contact_messages_is_read", "contact_messages", ["is_read"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("contact_messages")
    op.drop_table("post_tags")
    op.drop_table("posts")
    op.drop_table("users")
