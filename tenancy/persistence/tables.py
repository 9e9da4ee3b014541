"""SQLAlchemy table definitions for workspace membership.

These table definitions match the schema defined in Alembic migrations.
Every table carries an integer ``version`` used by conditional updates.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# WORKSPACES TABLE
# ============================================================================
workspaces_table = Table(
    "workspaces",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("owner_id", UUID(as_uuid=True), nullable=False),
    # [{"user_id": ..., "role": ..., "joined_at": ...}]
    Column("members", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("version", Integer, nullable=False, server_default="1"),
)

Index("idx_workspaces_owner_id", workspaces_table.c.owner_id)
# Containment lookups for "workspaces I belong to"
Index(
    "idx_workspaces_members",
    workspaces_table.c.members,
    postgresql_using="gin",
    postgresql_ops={"members": "jsonb_path_ops"},
)

# ============================================================================
# USERS TABLE (workspace memberships only, accounts live with the auth provider)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    # [{"workspace_id": ..., "role": ..., "joined_at": ...}]
    Column("workspaces", JSONB, nullable=False, server_default="[]"),
    Column("current_workspace_id", UUID(as_uuid=True), nullable=True),
    Column("version", Integer, nullable=False, server_default="1"),
)

# ============================================================================
# WORKSPACE INVITES TABLE
# ============================================================================
workspace_invites_table = Table(
    "workspace_invites",
    metadata,
    Column("code", String(32), primary_key=True),
    # No foreign key: invites outlive deleted workspaces for audit
    Column("workspace_id", UUID(as_uuid=True), nullable=False),
    Column("created_by", UUID(as_uuid=True), nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("max_uses", Integer, nullable=True),
    Column("used_count", Integer, nullable=False, server_default="0"),
    Column("used_by", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column("version", Integer, nullable=False, server_default="1"),
    CheckConstraint("used_count >= 0", name="used_count_non_negative"),
    CheckConstraint("max_uses IS NULL OR max_uses >= 1", name="max_uses_positive"),
    CheckConstraint(
        "max_uses IS NULL OR used_count <= max_uses", name="used_count_within_cap"
    ),
    CheckConstraint(
        "used_count = coalesce(cardinality(used_by), 0)", name="used_count_matches"
    ),
)

Index("idx_workspace_invites_workspace_id", workspace_invites_table.c.workspace_id)
