from decimal import Decimal

from app.converters import showtime as showtime_converters
from app.core.enums import SeatStatus
from app.schemas.showtime import SeatMap


def test_to_seat_map_marks_booked_seats(
    *,
    showtime_factory,
    seat_factory,
    seat_type_factory,
):
    showtime = showtime_factory()
    vip = seat_type_factory(name="VIP", price=Decimal("20000.00"))
    free_seat = seat_factory(cinema_room=showtime.cinema_room, row="A", column=1)
    taken_seat = seat_factory(
        cinema_room=showtime.cinema_room, row="A", column=2, seat_type=vip
    )

    seat_map = showtime_converters.to_seat_map(
        showtime,
        seats=[free_seat, taken_seat],
        booked_seat_ids={taken_seat.id},
    )

    assert isinstance(seat_map, SeatMap)
    assert seat_map.room.id == showtime.cinema_room_id
    assert seat_map.room.rows == showtime.cinema_room.rows
    assert [seat.id for seat in seat_map.seats] == [free_seat.id, taken_seat.id]
    assert seat_map.seats[0].status == SeatStatus.AVAILABLE
    assert seat_map.seats[1].status == SeatStatus.BOOKED
    assert seat_map.seats[1].type == "VIP"
    assert seat_map.seats[1].surcharge == Decimal("20000.00")


def test_to_seat_map_without_seats(*, showtime_factory):
    showtime = showtime_factory()

    seat_map = showtime_converters.to_seat_map(showtime, seats=[], booked_seat_ids=set())

    assert seat_map.seats == []
    assert seat_map.room.name == showtime.cinema_room.name
