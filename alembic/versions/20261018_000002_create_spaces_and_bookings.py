"""Create advertising_spaces and bookings tables

Revision ID: 20261018_000002
Revises: 20261018_000001
Create Date: 2026-10-18

Listings owned by profiles, and the bookings brands make against them.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261018_000002"
down_revision: Union[str, None] = "20261018_000001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "advertising_spaces",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("space_type", sa.String(20), nullable=False),
        sa.Column("price_per_month", sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column("dimensions", sa.String(100), nullable=True),
        sa.Column("images", sa.JSON(), nullable=True),
        sa.Column("amenities", sa.JSON(), nullable=True),
        sa.Column("availability_status", sa.String(50), nullable=False, server_default="available"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["owner_id"],
            ["profiles.user_id"],
            name="fk_advertising_spaces_owner_id",
            ondelete="CASCADE",
        ),
        sa.CheckConstraint("price_per_month IS NULL OR price_per_month >= 0", name="ck_spaces_price_non_negative"),
    )
    op.create_index("ix_advertising_spaces_owner_id", "advertising_spaces", ["owner_id"])
    op.create_index("ix_advertising_spaces_location", "advertising_spaces", ["location"])
    op.create_index("ix_advertising_spaces_space_type", "advertising_spaces", ["space_type"])
    op.create_index("ix_advertising_spaces_availability_status", "advertising_spaces", ["availability_status"])
    op.create_index("ix_advertising_spaces_created_at", "advertising_spaces", ["created_at"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("space_id", sa.Integer(), nullable=False),
        sa.Column("advertiser_id", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("total_amount", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("campaign_details", sa.JSON(), nullable=True),
        sa.Column(
            "booking_status",
            sa.Enum("pending", "confirmed", "cancelled", name="booking_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "payment_status",
            sa.Enum("unpaid", "paid", name="payment_status"),
            nullable=False,
            server_default="unpaid",
        ),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["space_id"],
            ["advertising_spaces.id"],
            name="fk_bookings_space_id",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["advertiser_id"],
            ["profiles.user_id"],
            name="fk_bookings_advertiser_id",
            ondelete="NO ACTION",
        ),
        sa.CheckConstraint("total_amount >= 0", name="ck_bookings_amount_non_negative"),
        sa.CheckConstraint("end_date >= start_date", name="ck_bookings_date_range"),
    )
    op.create_index("ix_bookings_space_id", "bookings", ["space_id"])
    op.create_index("ix_bookings_advertiser_id", "bookings", ["advertiser_id"])
    op.create_index("ix_bookings_booking_status", "bookings", ["booking_status"])


def downgrade() -> None:
    op.drop_index("ix_bookings_booking_status", table_name="bookings")
    op.drop_index("ix_bookings_advertiser_id", table_name="bookings")
    op.drop_index("ix_bookings_space_id", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_advertising_spaces_created_at", table_name="advertising_spaces")
    op.drop_index("ix_advertising_spaces_availability_status", table_name="advertising_spaces")
    op.drop_index("ix_advertising_spaces_space_type", table_name="advertising_spaces")
    op.drop_index("ix_advertising_spaces_location", table_name="advertising_spaces")
    op.drop_index("ix_advertising_spaces_owner_id", table_name="advertising_spaces")
    op.drop_table("advertising_spaces")
