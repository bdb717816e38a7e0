from fastapi import APIRouter

from app.api.deps import SessionDep
from app.exceptions.base import error_responses
from app.exceptions.showtime_exceptions import ShowtimeNotFound
from app.schemas.common import SuccessResponse
from app.schemas.showtime import SeatMap
from app.services import showtimes as showtimes_service

router = APIRouter(prefix="/showtimes", tags=["showtimes"])


# Public: seat maps can be browsed before logging in
@router.get(
    "/{showtime_id}/seats",
    response_model=SuccessResponse[SeatMap],
    responses=error_responses(ShowtimeNotFound),
)
def get_seat_map(*, session: SessionDep, showtime_id: int) -> SuccessResponse[SeatMap]:
    seat_map = showtimes_service.get_seat_map(session=session, showtime_id=showtime_id)
    return SuccessResponse(data=seat_map)
