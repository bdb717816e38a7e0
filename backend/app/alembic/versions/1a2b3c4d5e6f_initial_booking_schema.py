"""Initial booking schema.

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

import sqlalchemy as sa
import sqlmodel.sql.sqltypes
from alembic import op

# revision identifiers, used by Alembic.
revision = "1a2b3c4d5e6f"
down_revision = None
branch_labels = None
depends_on = None

ROLE_VALUES = ("admin", "staff", "customer")
SHOWTIME_STATUS_VALUES = ("scheduled", "canceled", "completed")
BOOKING_STATUS_VALUES = ("pending", "confirmed", "cancelled", "completed")
PAYMENT_METHOD_VALUES = ("cash", "credit_card", "momo", "zalopay", "banking")
PAYMENT_STATUS_VALUES = ("pending", "paid", "failed")


def _enum(name: str, values: tuple[str, ...]) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, length=32)


def _money() -> sa.Numeric:
    return sa.Numeric(precision=10, scale=2)


def upgrade():
    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(
            "phone_number", sqlmodel.sql.sqltypes.AutoString(length=15), nullable=False
        ),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("hashed_password", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("role", _enum("role", ROLE_VALUES), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index(op.f("ix_user_phone_number"), "user", ["phone_number"], unique=True)

    op.create_table(
        "customer",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("full_name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column(
            "phone_number", sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True
        ),
        sa.Column("account_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["account_id"], ["user.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("account_id"),
    )
    op.create_index(
        op.f("ix_customer_phone_number"), "customer", ["phone_number"], unique=False
    )

    op.create_table(
        "movie",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("duration_min", sa.Integer(), nullable=True),
        sa.Column("age_rating", sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "cinemaroom",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("rows", sa.Integer(), nullable=False),
        sa.Column("columns", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "seattype",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column("price", _money(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "seat",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("cinema_room_id", sa.Integer(), nullable=False),
        sa.Column("seat_type_id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.Column("row", sqlmodel.sql.sqltypes.AutoString(length=5), nullable=False),
        sa.Column("column", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["cinema_room_id"], ["cinemaroom.id"]),
        sa.ForeignKeyConstraint(["seat_type_id"], ["seattype.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("cinema_room_id", "name", name="uq_seat_room_name"),
    )
    op.create_index(
        op.f("ix_seat_cinema_room_id"), "seat", ["cinema_room_id"], unique=False
    )

    op.create_table(
        "showtime",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("movie_id", sa.Integer(), nullable=False),
        sa.Column("cinema_room_id", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=False),
        sa.Column("price", _money(), nullable=False),
        sa.Column("status", _enum("showtimestatus", SHOWTIME_STATUS_VALUES), nullable=False),
        sa.ForeignKeyConstraint(["cinema_room_id"], ["cinemaroom.id"]),
        sa.ForeignKeyConstraint(["movie_id"], ["movie.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_showtime_start_time"), "showtime", ["start_time"], unique=False
    )

    op.create_table(
        "food",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("price", _money(), nullable=False),
        sa.Column("category", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column("is_available", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "ticketbooking",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(
            "booking_code", sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False
        ),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("showtime_id", sa.Integer(), nullable=False),
        sa.Column("booking_date", sa.DateTime(), nullable=False),
        sa.Column("status", _enum("bookingstatus", BOOKING_STATUS_VALUES), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["customer_id"], ["customer.id"]),
        sa.ForeignKeyConstraint(["showtime_id"], ["showtime.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_ticketbooking_booking_code"),
        "ticketbooking",
        ["booking_code"],
        unique=True,
    )
    op.create_index(
        op.f("ix_ticketbooking_customer_id"), "ticketbooking", ["customer_id"], unique=False
    )
    op.create_index(
        op.f("ix_ticketbooking_showtime_id"), "ticketbooking", ["showtime_id"], unique=False
    )
    op.create_index(
        op.f("ix_ticketbooking_status"), "ticketbooking", ["status"], unique=False
    )

    op.create_table(
        "ticket",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("ticket_booking_id", sa.Integer(), nullable=False),
        sa.Column("seat_id", sa.Integer(), nullable=False),
        sa.Column("price", _money(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["seat_id"], ["seat.id"]),
        sa.ForeignKeyConstraint(["ticket_booking_id"], ["ticketbooking.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "ticket_booking_id", "seat_id", name="uq_ticket_booking_seat"
        ),
    )
    op.create_index(
        op.f("ix_ticket_ticket_booking_id"), "ticket", ["ticket_booking_id"], unique=False
    )
    op.create_index(op.f("ix_ticket_seat_id"), "ticket", ["seat_id"], unique=False)

    op.create_table(
        "foodorder",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("ticket_booking_id", sa.Integer(), nullable=False),
        sa.Column("food_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", _money(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["food_id"], ["food.id"]),
        sa.ForeignKeyConstraint(["ticket_booking_id"], ["ticketbooking.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_foodorder_ticket_booking_id"),
        "foodorder",
        ["ticket_booking_id"],
        unique=False,
    )

    op.create_table(
        "invoice",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("ticket_booking_id", sa.Integer(), nullable=False),
        sa.Column(
            "payment_method", _enum("paymentmethod", PAYMENT_METHOD_VALUES), nullable=False
        ),
        sa.Column(
            "payment_status", _enum("paymentstatus", PAYMENT_STATUS_VALUES), nullable=False
        ),
        sa.Column("amount", _money(), nullable=False),
        sa.Column("payment_date", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["ticket_booking_id"], ["ticketbooking.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("ticket_booking_id"),
    )


def downgrade():
    op.drop_table("invoice")
    op.drop_index(op.f("ix_foodorder_ticket_booking_id"), table_name="foodorder")
    op.drop_table("foodorder")
    op.drop_index(op.f("ix_ticket_seat_id"), table_name="ticket")
    op.drop_index(op.f("ix_ticket_ticket_booking_id"), table_name="ticket")
    op.drop_table("ticket")
    op.drop_index(op.f("ix_ticketbooking_status"), table_name="ticketbooking")
    op.drop_index(op.f("ix_ticketbooking_showtime_id"), table_name="ticketbooking")
    op.drop_index(op.f("ix_ticketbooking_customer_id"), table_name="ticketbooking")
    op.drop_index(op.f("ix_ticketbooking_booking_code"), table_name="ticketbooking")
    op.drop_table("ticketbooking")
    op.drop_table("food")
    op.drop_index(op.f("ix_showtime_start_time"), table_name="showtime")
    op.drop_table("showtime")
    op.drop_index(op.f("ix_seat_cinema_room_id"), table_name="seat")
    op.drop_table("seat")
    op.drop_table("seattype")
    op.drop_table("cinemaroom")
    op.drop_table("movie")
    op.drop_index(op.f("ix_customer_phone_number"), table_name="customer")
    op.drop_table("customer")
    op.drop_index(op.f("ix_user_phone_number"), table_name="user")
    op.drop_table("user")
