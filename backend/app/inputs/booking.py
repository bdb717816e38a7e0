# app/inputs/booking.py

from datetime import date
from decimal import Decimal
from typing import Annotated

from fastapi import Query
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.config import settings
from app.core.enums import BookingStatus, PaymentMethod, PaymentStatus


class FoodItemInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    food_id: int = Field(gt=0)
    quantity: int = Field(gt=0, le=settings.MAX_FOOD_QUANTITY)


class BookingCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    showtime_id: int = Field(gt=0)
    seats: list[Annotated[int, Field(gt=0)]] = Field(
        min_length=1, max_length=settings.MAX_SEATS_PER_BOOKING
    )
    food_items: list[FoodItemInput] | None = None
    # Lets staff book on behalf of a registered customer
    customer_phone: str | None = Field(default=None, min_length=10, max_length=15)

    @field_validator("seats")
    @classmethod
    def seats_must_be_unique(cls, value: list[int]) -> list[int]:
        if len(set(value)) != len(value):
            raise ValueError("Seat ids must not contain duplicates")
        return value


class BookingUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: BookingStatus | None = None
    payment_method: PaymentMethod | None = None
    payment_status: PaymentStatus | None = None


class PaymentDetails(BaseModel):
    amount: Decimal | None = Field(default=None, gt=0)
    transaction_id: str | None = None
    payment_gateway: str | None = None


class BookingConfirm(BaseModel):
    model_config = ConfigDict(extra="forbid")

    payment_method: PaymentMethod
    payment_details: PaymentDetails | None = None


# Request bodies wrap the payload in an "input" object
class BookingCreateRequest(BaseModel):
    input: BookingCreate


class BookingUpdateRequest(BaseModel):
    input: BookingUpdate


class BookingConfirmRequest(BaseModel):
    input: BookingConfirm


class BookingFilters(BaseModel):
    page: int = 1
    limit: int = 10
    status: BookingStatus | None = None
    customer_id: int | None = None
    showtime_id: int | None = None
    booking_date: date | None = None


def get_booking_filters(
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    status: Annotated[BookingStatus | None, Query()] = None,
    customer_id: Annotated[
        int | None,
        Query(gt=0, description="Only honoured for staff and admins"),
    ] = None,
    showtime_id: Annotated[int | None, Query(gt=0)] = None,
    booking_date: Annotated[
        date | None,
        Query(description="Calendar day the booking was made (YYYY-MM-DD)"),
    ] = None,
) -> BookingFilters:
    return BookingFilters(
        page=page,
        limit=limit,
        status=status,
        customer_id=customer_id,
        showtime_id=showtime_id,
        booking_date=booking_date,
    )
