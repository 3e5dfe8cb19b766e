"""Initial reservation schema.

Revision ID: 0001
Revises:
Create Date: 2025-03-01
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(length=320), nullable=False, unique=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("display_name", sa.String(length=120), nullable=False, server_default=""),
        sa.Column("role", sa.Enum("ADMIN", "USER", name="userrole"), nullable=False),
        sa.Column(
            "status", sa.Enum("ACTIVE", "SUSPENDED", name="userstatus"), nullable=False
        ),
        *_timestamps(),
    )

    op.create_table(
        "recurring_closed_days",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("reason", sa.String(length=255)),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint(
            "day_of_week >= 0 AND day_of_week <= 6", name="ck_recurring_day_of_week"
        ),
    )

    op.create_table(
        "period_closures",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("reason", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint("end_date >= start_date", name="ck_period_closure_range"),
    )

    op.create_table(
        "blocked_dates",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("blocked_date", sa.Date(), nullable=False, unique=True),
        sa.Column("reason", sa.String(length=255)),
        *_timestamps(),
    )

    op.create_table(
        "reservations",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("customer_name", sa.String(length=255), nullable=False),
        sa.Column("customer_email", sa.String(length=320), nullable=False),
        sa.Column("customer_phone", sa.String(length=32)),
        sa.Column("reservation_date", sa.Date(), nullable=False),
        sa.Column("reservation_time", sa.String(length=5), nullable=False),
        sa.Column("party_size", sa.Integer(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("PENDING", "APPROVED", "CANCELLED", name="reservationstatus"),
            nullable=False,
        ),
        sa.Column("special_requests", sa.String(length=1024)),
        *_timestamps(),
        sa.CheckConstraint("party_size > 0", name="ck_reservation_party_size"),
    )
    op.create_index(
        "ix_reservations_reservation_date", "reservations", ["reservation_date"]
    )


def downgrade() -> None:
    op.drop_index("ix_reservations_reservation_date", table_name="reservations")
    op.drop_table("reservations")
    op.drop_table("blocked_dates")
    op.drop_table("period_closures")
    op.drop_table("recurring_closed_days")
    op.drop_table("users")
    sa.Enum(name="reservationstatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="userstatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="userrole").drop(op.get_bind(), checkfirst=True)
