"""create users and events

Revision ID: 4f1c2a9d7e31
Revises:
Create Date: 2026-10-18 10:02:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7e31'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

app_role = sa.Enum("admin", "supervisor", "coordenador", name="app_role")
auth_type = sa.Enum("local", "google", name="auth_type")
event_type = sa.Enum(
    "Evento",
    "Ação Pontual",
    "Projeto Institucional",
    "Projeto Pedagógico",
    "Expedição Pedagógica",
    "Formação",
    "Festa",
    name="event_type",
)
event_status = sa.Enum("pending", "approved", "rejected", name="event_status")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=True),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("auth_type", auth_type, nullable=False, server_default="local"),
        sa.Column("role", app_role, nullable=False, server_default="coordenador"),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=True),
        sa.Column("end_time", sa.Time(), nullable=True),
        sa.Column("all_day", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("event_type", event_type, nullable=False),
        sa.Column("status", event_status, nullable=False, server_default="pending"),
        sa.Column("created_by", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("approved_by", sa.Integer(), sa.ForeignKey("users.id", ondelete="RESTRICT"), nullable=True),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("google_calendar_event_id", sa.String(length=255), nullable=True),
        sa.CheckConstraint("end_date >= start_date", name="valid_dates"),
    )
    op.create_index("ix_events_created_by", "events", ["created_by"])
    op.create_index("ix_events_status", "events", ["status"])
    op.create_index("ix_events_start_date", "events", ["start_date"])
    op.create_index("ix_events_approved_by", "events", ["approved_by"])


def downgrade() -> None:
    op.drop_index("ix_events_approved_by", table_name="events")
    op.drop_index("ix_events_start_date", table_name="events")
    op.drop_index("ix_events_status", table_name="events")
    op.drop_index("ix_events_created_by", table_name="events")
    op.drop_table("events")

    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")

    bind = op.get_bind()
    event_status.drop(bind, checkfirst=True)
    event_type.drop(bind, checkfirst=True)
    app_role.drop(bind, checkfirst=True)
    auth_type.drop(bind, checkfirst=True)
