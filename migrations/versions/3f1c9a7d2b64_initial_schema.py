"""initial_schema

Create the schema for workspace membership:
- Workspaces (embedded member list)
- Users (embedded workspace list and current selection)
- Workspace invites (shareable codes with optional usage cap)

Every table has a ``version`` column for conditional updates.

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-19 10:12:44.518302

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # WORKSPACES table
    # ========================================================================
    op.create_table(
        "workspaces",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column(
            "members",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(name) BETWEEN 1 AND 100", name="workspace_name_length"
        ),
    )
    op.create_index("idx_workspaces_owner_id", "workspaces", ["owner_id"])
    op.create_index(
        "idx_workspaces_members",
        "workspaces",
        ["members"],
        postgresql_using="gin",
        postgresql_ops={"members": "jsonb_path_ops"},
    )

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "workspaces",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("current_workspace_id", sa.UUID(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # WORKSPACE_INVITES table
    # ========================================================================
    op.create_table(
        "workspace_invites",
        sa.Column("code", sa.String(32), nullable=False),
        # No foreign key: invites are kept when their workspace is deleted
        sa.Column("workspace_id", sa.UUID(), nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("max_uses", sa.Integer(), nullable=True),
        sa.Column("used_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "used_by",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'::uuid[]"),
        ),
        sa.Column("active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("code"),
        sa.CheckConstraint("used_count >= 0", name="used_count_non_negative"),
        sa.CheckConstraint(
            "max_uses IS NULL OR max_uses >= 1", name="max_uses_positive"
        ),
        sa.CheckConstraint(
            "max_uses IS NULL OR used_count <= max_uses",
            name="used_count_within_cap",
        ),
        sa.CheckConstraint(
            "used_count = coalesce(cardinality(used_by), 0)",
            name="used_count_matches",
        ),
    )
    op.create_index(
        "idx_workspace_invites_workspace_id", "workspace_invites", ["workspace_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("workspace_invites")
    op.drop_table("users")
    op.drop_table("workspaces")
