"""initial_schema

Create the schema for Hoard:
- Users (mirrored from the identity provider)
- Chests (owned collections)
- Chest permissions (admin/editor/viewer grants; ownership is never a row)
- Chest invites (single-use, time-limited tokens)
- Items (typed chest content)

Every child of a chest references it with ON DELETE CASCADE.

Revision ID: 3c1f6a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f6a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _chest_fk() -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(["chest_id"], ["chests.id"], ondelete="CASCADE")


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE chest_role AS ENUM ('admin', 'editor', 'viewer');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE item_type AS ENUM ('link', 'note', 'todo', 'image', 'file');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    role_enum = postgresql.ENUM(
        "admin", "editor", "viewer", name="chest_role", create_type=False
    )

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _uuid_pk(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ========================================================================
    # CHESTS table
    # ========================================================================
    op.create_table(
        "chests",
        _uuid_pk(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_chests_owner_id", "chests", ["owner_id"])

    # ========================================================================
    # CHEST_PERMISSIONS table
    # ========================================================================
    op.create_table(
        "chest_permissions",
        _uuid_pk(),
        sa.Column("chest_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role", role_enum, nullable=False),
        _timestamp("created_at"),
        _chest_fk(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("chest_id", "user_id", name="uq_chest_permission_user"),
    )
    op.create_index(
        "idx_chest_permissions_user_id", "chest_permissions", ["user_id"]
    )

    # ========================================================================
    # CHEST_INVITES table
    # ========================================================================
    op.create_table(
        "chest_invites",
        _uuid_pk(),
        sa.Column("chest_id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", role_enum, nullable=False),
        sa.Column("invited_by", sa.UUID(), nullable=False),
        sa.Column("token", sa.String(255), nullable=False),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        _timestamp("created_at"),
        _chest_fk(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="uq_chest_invite_token"),
        sa.UniqueConstraint("chest_id", "email", name="uq_chest_invite_email"),
    )
    op.create_index("idx_chest_invites_email", "chest_invites", ["email"])

    # ========================================================================
    # ITEMS table
    # ========================================================================
    op.create_table(
        "items",
        _uuid_pk(),
        sa.Column("chest_id", sa.UUID(), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM(
                "link",
                "note",
                "todo",
                "image",
                "file",
                name="item_type",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.Column("stack_size", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(64)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("date_time", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("label", sa.Text(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=True),
        sa.Column("storage_id", sa.String(255), nullable=True),
        sa.Column("filename", sa.String(255), nullable=True),
        sa.Column("mime_type", sa.String(255), nullable=True),
        sa.Column("file_size", sa.BigInteger(), nullable=True),
        _timestamp("created_at"),
        _chest_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_items_chest_id_created_at",
        "items",
        ["chest_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("items")
    op.drop_table("chest_invites")
    op.drop_table("chest_permissions")
    op.drop_table("chests")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS item_type")
    op.execute("DROP TYPE IF EXISTS chest_role")
