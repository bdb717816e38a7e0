from collections.abc import Iterable, Set

from app.core.enums import SeatStatus
from app.models.seat import Seat
from app.models.showtime import Showtime
from app.schemas.showtime import RoomPublic, SeatMap, SeatWithStatus


def to_seat_with_status(seat: Seat, *, booked: bool) -> SeatWithStatus:
    return SeatWithStatus(
        id=seat.id,
        name=seat.name,
        row=seat.row,
        column=seat.column,
        type=seat.seat_type.name,
        surcharge=seat.seat_type.price,
        status=SeatStatus.BOOKED if booked else SeatStatus.AVAILABLE,
    )


def to_seat_map(
    showtime: Showtime,
    *,
    seats: Iterable[Seat],
    booked_seat_ids: Set[int],
) -> SeatMap:
    """
    Converts a showtime and its room's seats to a seat map, marking every
    seat in `booked_seat_ids` as booked and the rest as available.

    Parameters:
        showtime (Showtime): The showtime the map is for.
        seats (Iterable[Seat]): All seats of the showtime's room, in display order.
        booked_seat_ids (Set[int]): Seats held by active bookings.
    Returns:
        SeatMap: The room and its annotated seats.
    """
    room = showtime.cinema_room
    return SeatMap(
        room=RoomPublic(
            id=room.id,
            name=room.name,
            rows=room.rows,
            columns=room.columns,
        ),
        seats=[
            to_seat_with_status(seat, booked=seat.id in booked_seat_ids)
            for seat in seats
        ],
    )
