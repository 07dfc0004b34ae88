"""Create usuarios, tickets and solicitudes tables

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return (
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )


def upgrade() -> None:
    op.create_table(
        "usuarios",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("username", name="uq_usuarios_username"),
    )
    op.create_index("ix_usuarios_created_at", "usuarios", ["created_at"])

    op.create_table(
        "tickets",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nombre", sa.String(length=255), nullable=False),
        sa.Column("fecha", sa.Date(), nullable=False),
        sa.Column("hora", sa.String(length=255), nullable=False),
        sa.Column("dni", sa.String(length=255), nullable=False),
        sa.Column("mensaje", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_tickets_dni", "tickets", ["dni"])
    op.create_index("ix_tickets_created_at", "tickets", ["created_at"])

    op.create_table(
        "solicitudes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nombre", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("mensaje", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_solicitudes_created_at", "solicitudes", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_solicitudes_created_at", table_name="solicitudes")
    op.drop_table("solicitudes")
    op.drop_index("ix_tickets_created_at", table_name="tickets")
    op.drop_index("ix_tickets_dni", table_name="tickets")
    op.drop_table("tickets")
    op.drop_index("ix_usuarios_created_at", table_name="usuarios")
    op.drop_table("usuarios")
