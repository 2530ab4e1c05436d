"""001_initial_tables

Revision ID: 001
Revises:
Create Date: 2026-10-17 00:00:00.000000

Creates all initial tables for TeamDesk:
  - teams
  - users
  - team_members
  - documents
  - tasks
  - meetings
  - email_archives
  - activity_logs
"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | None = None
depends_on: str | None = None

ENUMS: dict[str, tuple[str, ...]] = {
    "user_role_enum": ("member", "admin"),
    "team_member_role_enum": ("member", "admin"),
    "document_status_enum": ("pending", "approved", "rejected"),
    "task_status_enum": ("pending", "in_progress", "completed"),
    "task_priority_enum": ("low", "medium", "high"),
    "meeting_status_enum": ("scheduled", "completed", "cancelled"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def _timestamps(*, updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    ]
    if updated:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                nullable=False,
                server_default=sa.text("now()"),
            )
        )
    return columns


def _team_fk(table: str) -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(
        ["team_id"], ["teams.id"],
        name=f"fk_{table}_team_id_teams",
        ondelete="CASCADE",
    )


def upgrade() -> None:
    # ── Enums ─────────────────────────────────────────────────────────────────
    for name in ENUMS:
        _enum(name).create(op.get_bind(), checkfirst=True)

    # ── teams ─────────────────────────────────────────────────────────────────
    op.create_table(
        "teams",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_teams"),
    )
    op.create_index("ix_teams_name", "teams", ["name"])

    # ── users ─────────────────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("profile_image_url", sa.String(500), nullable=True),
        sa.Column("current_team_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column(
            "role",
            _enum("user_role_enum"),
            nullable=False,
            server_default="member",
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["current_team_id"], ["teams.id"],
            name="fk_users_current_team_id_teams",
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"])
    op.create_index("ix_users_role", "users", ["role"])

    # ── team_members ──────────────────────────────────────────────────────────
    op.create_table(
        "team_members",
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "role",
            _enum("team_member_role_enum"),
            nullable=False,
            server_default="member",
        ),
        sa.Column(
            "joined_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        _team_fk("team_members"),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"],
            name="fk_team_members_user_id_users",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("team_id", "user_id", name="pk_team_members"),
    )
    op.create_index("ix_team_members_user_id", "team_members", ["user_id"])
    op.create_index("ix_team_members_team_id", "team_members", ["team_id"])

    # ── documents ─────────────────────────────────────────────────────────────
    op.create_table(
        "documents",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(500), nullable=False),
        sa.Column("file_path", sa.String(2000), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False),
        sa.Column("mime_type", sa.String(200), nullable=False),
        sa.Column("category", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("document_status_enum"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("uploaded_by", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["uploaded_by"], ["users.id"],
            name="fk_documents_uploaded_by_users",
            ondelete="CASCADE",
        ),
        _team_fk("documents"),
        sa.PrimaryKeyConstraint("id", name="pk_documents"),
    )
    op.create_index("ix_documents_team_id_created_at", "documents", ["team_id", "created_at"])
    op.create_index("ix_documents_team_id_status", "documents", ["team_id", "status"])

    # ── tasks ─────────────────────────────────────────────────────────────────
    op.create_table(
        "tasks",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("task_status_enum"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "priority",
            _enum("task_priority_enum"),
            nullable=False,
            server_default="medium",
        ),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("assigned_to", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["created_by"], ["users.id"],
            name="fk_tasks_created_by_users",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["assigned_to"], ["users.id"],
            name="fk_tasks_assigned_to_users",
            ondelete="SET NULL",
        ),
        _team_fk("tasks"),
        sa.PrimaryKeyConstraint("id", name="pk_tasks"),
    )
    op.create_index("ix_tasks_team_id_created_at", "tasks", ["team_id", "created_at"])
    op.create_index("ix_tasks_team_id_status", "tasks", ["team_id", "status"])
    op.create_index("ix_tasks_assigned_to", "tasks", ["assigned_to"])

    # ── meetings ──────────────────────────────────────────────────────────────
    op.create_table(
        "meetings",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("location", sa.String(500), nullable=True),
        sa.Column("meeting_link", sa.String(2000), nullable=True),
        sa.Column(
            "status",
            _enum("meeting_status_enum"),
            nullable=False,
            server_default="scheduled",
        ),
        sa.Column("organizer", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["organizer"], ["users.id"],
            name="fk_meetings_organizer_users",
            ondelete="CASCADE",
        ),
        _team_fk("meetings"),
        sa.PrimaryKeyConstraint("id", name="pk_meetings"),
    )
    op.create_index("ix_meetings_team_id_start_time", "meetings", ["team_id", "start_time"])

    # ── email_archives ────────────────────────────────────────────────────────
    op.create_table(
        "email_archives",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("subject", sa.String(1000), nullable=False),
        sa.Column("sender", sa.String(500), nullable=False),
        sa.Column("recipient", sa.String(2000), nullable=False),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("attachments", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("email_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("category", sa.String(200), nullable=True),
        sa.Column("tags", postgresql.ARRAY(sa.String(100)), nullable=True),
        sa.Column("archived_by", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        *_timestamps(updated=False),
        sa.ForeignKeyConstraint(
            ["archived_by"], ["users.id"],
            name="fk_email_archives_archived_by_users",
            ondelete="CASCADE",
        ),
        _team_fk("email_archives"),
        sa.PrimaryKeyConstraint("id", name="pk_email_archives"),
    )
    op.create_index(
        "ix_email_archives_team_id_email_date", "email_archives", ["team_id", "email_date"]
    )

    # ── activity_logs ─────────────────────────────────────────────────────────
    op.create_table(
        "activity_logs",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("team_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("action", sa.String(50), nullable=False),
        sa.Column("entity_type", sa.String(50), nullable=False),
        sa.Column("entity_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        *_timestamps(updated=False),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"],
            name="fk_activity_logs_user_id_users",
            ondelete="CASCADE",
        ),
        _team_fk("activity_logs"),
        sa.PrimaryKeyConstraint("id", name="pk_activity_logs"),
    )
    op.create_index(
        "ix_activity_logs_team_id_created_at", "activity_logs", ["team_id", "created_at"]
    )
    op.create_index(
        "ix_activity_logs_entity_type_id", "activity_logs", ["entity_type", "entity_id"]
    )
    op.create_index("ix_activity_logs_user_id", "activity_logs", ["user_id"])


def downgrade() -> None:
    # Drop tables in reverse dependency order
    op.drop_table("activity_logs")
    op.drop_table("email_archives")
    op.drop_table("meetings")
    op.drop_table("tasks")
    op.drop_table("documents")
    op.drop_table("team_members")
    op.drop_table("users")
    op.drop_table("teams")

    # Drop enums
    for enum_name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {enum_name}")
