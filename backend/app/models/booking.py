from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

from app.core.enums import BookingStatus, PaymentMethod, PaymentStatus
from app.models.utils import enum_column
from app.utils import now_local_naive

if TYPE_CHECKING:
    from .customer import Customer
    from .food import Food
    from .seat import Seat
    from .showtime import Showtime

__all__ = [
    "TicketBooking",
    "Ticket",
    "FoodOrder",
    "Invoice",
]


class TicketBooking(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    booking_code: str = Field(unique=True, index=True, max_length=20)
    customer_id: int = Field(foreign_key="customer.id", index=True)
    showtime_id: int = Field(foreign_key="showtime.id", index=True)
    booking_date: datetime = Field(default_factory=now_local_naive, sa_type=DateTime)
    status: BookingStatus = Field(
        default=BookingStatus.PENDING, sa_column=enum_column(BookingStatus, index=True)
    )
    created_at: datetime = Field(default_factory=now_local_naive, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=now_local_naive, sa_type=DateTime)

    customer: "Customer" = Relationship(sa_relationship_kwargs={"lazy": "joined"})
    showtime: "Showtime" = Relationship(sa_relationship_kwargs={"lazy": "joined"})
    tickets: list["Ticket"] = Relationship(
        back_populates="booking",
        sa_relationship_kwargs={"order_by": "Ticket.id"},
    )
    food_orders: list["FoodOrder"] = Relationship(
        back_populates="booking",
        sa_relationship_kwargs={"order_by": "FoodOrder.id"},
    )
    invoice: Optional["Invoice"] = Relationship(
        back_populates="booking",
        sa_relationship_kwargs={"uselist": False},
    )


class Ticket(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("ticket_booking_id", "seat_id", name="uq_ticket_booking_seat"),
    )
    id: int | None = Field(default=None, primary_key=True)
    ticket_booking_id: int = Field(foreign_key="ticketbooking.id", index=True)
    seat_id: int = Field(foreign_key="seat.id", index=True)
    # Snapshot of the showtime price at booking time
    price: Decimal = Field(max_digits=10, decimal_places=2)
    created_at: datetime = Field(default_factory=now_local_naive, sa_type=DateTime)

    booking: TicketBooking = Relationship(back_populates="tickets")
    seat: "Seat" = Relationship(sa_relationship_kwargs={"lazy": "joined"})


class FoodOrder(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    ticket_booking_id: int = Field(foreign_key="ticketbooking.id", index=True)
    food_id: int = Field(foreign_key="food.id")
    quantity: int = Field(default=1)
    # Line total: unit price * quantity
    price: Decimal = Field(max_digits=10, decimal_places=2)
    created_at: datetime = Field(default_factory=now_local_naive, sa_type=DateTime)

    booking: TicketBooking = Relationship(back_populates="food_orders")
    food: "Food" = Relationship(sa_relationship_kwargs={"lazy": "joined"})


class Invoice(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    ticket_booking_id: int = Field(foreign_key="ticketbooking.id", unique=True)
    payment_method: PaymentMethod = Field(
        default=PaymentMethod.CASH, sa_column=enum_column(PaymentMethod)
    )
    payment_status: PaymentStatus = Field(
        default=PaymentStatus.PENDING, sa_column=enum_column(PaymentStatus)
    )
    amount: Decimal = Field(max_digits=10, decimal_places=2)
    payment_date: datetime | None = Field(default=None, sa_type=DateTime)
    created_at: datetime = Field(default_factory=now_local_naive, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=now_local_naive, sa_type=DateTime)

    booking: TicketBooking = Relationship(back_populates="invoice")
