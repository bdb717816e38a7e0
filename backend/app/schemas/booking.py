from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from app.core.enums import BookingStatus, PaymentMethod, PaymentStatus
from app.schemas.common import PageMetadata

__all__ = [
    "TicketPublic",
    "FoodOrderPublic",
    "InvoicePublic",
    "BookingSummary",
    "BookingPublic",
    "BookingsPage",
    "CleanupResult",
]


class TicketPublic(BaseModel):
    id: int
    seat_id: int
    price: Decimal
    row: str
    column: int
    seat_name: str
    seat_type_name: str
    seat_type_price: Decimal


class FoodOrderPublic(BaseModel):
    id: int
    food_id: int
    quantity: int
    price: Decimal
    food_name: str
    food_unit_price: Decimal


class InvoicePublic(BaseModel):
    id: int
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    amount: Decimal
    payment_date: datetime | None


# Row shape used in listings
class BookingSummary(BaseModel):
    id: int
    booking_code: str
    customer_id: int
    showtime_id: int
    booking_date: datetime
    status: BookingStatus
    created_at: datetime
    updated_at: datetime
    customer_name: str
    customer_phone: str | None
    movie_title: str
    room_name: str
    start_time: datetime
    end_time: datetime


class BookingPublic(BookingSummary):
    movie_duration: int | None
    movie_rating: str | None
    base_price: Decimal
    tickets: Sequence[TicketPublic]
    food_orders: Sequence[FoodOrderPublic]
    invoice: InvoicePublic | None


class BookingsPage(BaseModel):
    bookings: Sequence[BookingSummary]
    metadata: PageMetadata


class CleanupResult(BaseModel):
    cleaned_count: int
