"""SQLAlchemy table definitions for Hoard.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (mirrored from the identity provider)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),  # Case-sensitive
    Column("name", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# CHESTS TABLE
# ============================================================================
chests_table = Table(
    "chests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    # Ownership lives here only; never duplicated into chest_permissions
    Column(
        "owner_id", UUID, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_chests_owner_id", chests_table.c.owner_id)

# ============================================================================
# CHEST_PERMISSIONS TABLE
# ============================================================================
chest_permissions_table = Table(
    "chest_permissions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "chest_id", UUID, ForeignKey("chests.id", ondelete="CASCADE"), nullable=False
    ),
    # No FK to users: rows of deleted users are skipped when listing
    Column("user_id", UUID, nullable=False),
    Column(
        "role",
        Enum("admin", "editor", "viewer", name="chest_role", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("chest_id", "user_id", name="uq_chest_permission_user"),
)

Index("idx_chest_permissions_user_id", chest_permissions_table.c.user_id)

# ============================================================================
# CHEST_INVITES TABLE
# ============================================================================
chest_invites_table = Table(
    "chest_invites",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "chest_id", UUID, ForeignKey("chests.id", ondelete="CASCADE"), nullable=False
    ),
    Column("email", String(255), nullable=False),
    Column(
        "role",
        Enum("admin", "editor", "viewer", name="chest_role", create_type=False),
        nullable=False,
    ),
    Column("invited_by", UUID, nullable=False),
    Column("token", String(255), nullable=False, unique=True),  # URL-safe token
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Expired rows are purged before a new invite for the pair is inserted
    UniqueConstraint("chest_id", "email", name="uq_chest_invite_email"),
)

Index("idx_chest_invites_email", chest_invites_table.c.email)

# ============================================================================
# ITEMS TABLE
# ============================================================================
items_table = Table(
    "items",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "chest_id", UUID, ForeignKey("chests.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "type",
        Enum(
            "link", "note", "todo", "image", "file", name="item_type", create_type=False
        ),
        nullable=False,
    ),
    Column("created_by", UUID, nullable=False),
    Column("stack_size", Integer, nullable=False, server_default="1"),
    Column("tags", ARRAY(String(64)), nullable=False, server_default="{}"),
    Column("date_time", TIMESTAMP(timezone=True), nullable=True),
    # Link fields
    Column("url", Text, nullable=True),
    Column("title", Text, nullable=True),
    # Note fields
    Column("content", Text, nullable=True),
    # Todo fields
    Column("label", Text, nullable=True),
    Column("completed", Boolean, nullable=True),
    # File/Image fields
    Column("storage_id", String(255), nullable=True),
    Column("filename", String(255), nullable=True),
    Column("mime_type", String(255), nullable=True),
    Column("file_size", BigInteger, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_items_chest_id_created_at",
    items_table.c.chest_id,
    items_table.c.created_at.desc(),
)
