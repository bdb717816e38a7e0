from datetime import datetime

from fastapi import status

from .base import AppError


class ShowtimeNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    openapi_description = "Returned when the requested showtime does not exist."
    openapi_example = {"status": "fail", "message": "Showtime with ID 123 not found."}

    def __init__(self, showtime_id: int):
        self.showtime_id = showtime_id
        detail = f"Showtime with ID {showtime_id} not found."
        super().__init__(detail)


class ShowtimeAlreadyStarted(AppError):
    status_code = status.HTTP_409_CONFLICT
    openapi_description = "Returned when booking a showtime that has already started."

    def __init__(self, showtime_id: int, start_time: datetime):
        self.showtime_id = showtime_id
        self.start_time = start_time
        detail = (
            f"Showtime with ID {showtime_id} started at {start_time.isoformat()} "
            "and can no longer be booked."
        )
        super().__init__(detail)
