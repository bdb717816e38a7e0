from collections.abc import Iterable

from fastapi import status

from .base import AppError


def _format_ids(ids: Iterable[int]) -> str:
    return ", ".join(str(i) for i in sorted(ids))


class BookingNotFound(AppError):
    """
    Raised for a missing booking *and* for a booking the caller may not
    see, so that existence is never revealed to non-owners.
    """

    status_code = status.HTTP_404_NOT_FOUND
    openapi_description = "Returned when the booking does not exist or is not yours."

    def __init__(self, booking_id: int | str):
        self.booking_id = booking_id
        detail = f"Booking {booking_id} not found."
        super().__init__(detail)


class SeatsAlreadyBooked(AppError):
    status_code = status.HTTP_409_CONFLICT
    openapi_description = "Returned when requested seats are held by another booking."
    openapi_example = {"status": "fail", "message": "Seats already booked: 7, 8."}

    def __init__(self, seat_ids: Iterable[int]):
        self.seat_ids = sorted(seat_ids)
        detail = f"Seats already booked: {_format_ids(self.seat_ids)}."
        super().__init__(detail)


class SeatsNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    openapi_description = "Returned when requested seats are not in the showtime's room."

    def __init__(self, seat_ids: Iterable[int]):
        self.seat_ids = sorted(seat_ids)
        detail = f"Seats not found in this showtime's room: {_format_ids(self.seat_ids)}."
        super().__init__(detail)


class FoodUnavailable(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    openapi_description = "Returned when a food item does not exist or is not on sale."

    def __init__(self, food_id: int):
        self.food_id = food_id
        detail = f"Food with ID {food_id} does not exist or is not available."
        super().__init__(detail)


class InvalidBookingState(AppError):
    status_code = status.HTTP_409_CONFLICT
    openapi_description = "Returned when confirming a booking that is not pending."

    def __init__(self, booking_id: int, current_status: str, expected_status: str):
        self.booking_id = booking_id
        self.current_status = current_status
        detail = (
            f"Booking {booking_id} is {current_status}; "
            f"only {expected_status} bookings can be confirmed."
        )
        super().__init__(detail)


class BookingConflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    openapi_description = "Returned when a concurrent request saved a clashing record first."
    openapi_example = {
        "status": "fail",
        "message": "The booking clashed with a concurrent request, please retry.",
    }
    detail = "The booking clashed with a concurrent request, please retry."
