from sqlmodel import Session

from app.converters import showtime as showtime_converters
from app.crud import seat as seats_crud
from app.crud import showtime as showtimes_crud
from app.exceptions.showtime_exceptions import ShowtimeNotFound
from app.schemas.showtime import SeatMap


def get_seat_map(
    *,
    session: Session,
    showtime_id: int,
) -> SeatMap:
    """
    Get the seat map of a showtime's room with every seat marked booked or
    available. Occupancy is derived from the tickets of active bookings at
    the moment of the call; nothing is written.

    Parameters:
        session (Session): Database session.
        showtime_id (int): ID of the showtime.
    Returns:
        SeatMap: The room and its seats, ordered by row and column.
    Raises:
        ShowtimeNotFound: If the showtime does not exist.
    """
    showtime = showtimes_crud.get_showtime_by_id(
        session=session,
        showtime_id=showtime_id,
    )
    if showtime is None:
        raise ShowtimeNotFound(showtime_id)

    seats = seats_crud.get_seats_for_room(
        session=session,
        cinema_room_id=showtime.cinema_room_id,
    )
    booked_seat_ids = showtimes_crud.get_booked_seat_ids(
        session=session,
        showtime_id=showtime_id,
    )
    return showtime_converters.to_seat_map(
        showtime,
        seats=seats,
        booked_seat_ids=booked_seat_ids,
    )
