"""Create sessions, chats, responses and contexts.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "sessions",
        sa.Column("uuid", sa.String(36), primary_key=True),
        sa.Column("rules", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        "chats",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "session_uuid",
            sa.String(36),
            sa.ForeignKey("sessions.uuid", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("chat", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_chats_session_uuid", "chats", ["session_uuid"])
    op.create_table(
        "responses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "chat_id",
            sa.Integer(),
            sa.ForeignKey("chats.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("response", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_responses_chat_id", "responses", ["chat_id"])
    op.create_table(
        "contexts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "session_uuid",
            sa.String(36),
            sa.ForeignKey("sessions.uuid", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("context", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_contexts_session_uuid", "contexts", ["session_uuid"])


def downgrade() -> None:
    op.drop_index("ix_contexts_session_uuid", table_name="contexts")
    op.drop_table("contexts")
    op.drop_index("ix_responses_chat_id", table_name="responses")
    op.drop_table("responses")
    op.drop_index("ix_chats_session_uuid", table_name="chats")
    op.drop_table("chats")
    op.drop_table("sessions")
