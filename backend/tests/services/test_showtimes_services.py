import pytest
from pytest_mock import MockerFixture

from app.exceptions.showtime_exceptions import ShowtimeNotFound
from app.services import showtimes as showtime_services


def test_get_seat_map_success(mocker: MockerFixture):
    mock_showtime = mocker.patch("app.crud.showtime.get_showtime_by_id")
    mock_showtime.return_value.cinema_room_id = 3
    mock_seats = mocker.patch("app.crud.seat.get_seats_for_room")
    mock_booked = mocker.patch("app.crud.showtime.get_booked_seat_ids")
    mock_converter = mocker.patch("app.converters.showtime.to_seat_map")
    mock_session = mocker.MagicMock()

    seat_map = showtime_services.get_seat_map(session=mock_session, showtime_id=10)

    mock_showtime.assert_called_once_with(session=mock_session, showtime_id=10)
    mock_seats.assert_called_once_with(session=mock_session, cinema_room_id=3)
    mock_booked.assert_called_once_with(session=mock_session, showtime_id=10)
    mock_converter.assert_called_once_with(
        mock_showtime.return_value,
        seats=mock_seats.return_value,
        booked_seat_ids=mock_booked.return_value,
    )
    assert seat_map == mock_converter.return_value


def test_get_seat_map_showtime_not_found(mocker: MockerFixture):
    mocker.patch("app.crud.showtime.get_showtime_by_id", return_value=None)
    mock_seats = mocker.patch("app.crud.seat.get_seats_for_room")

    with pytest.raises(ShowtimeNotFound) as exc_info:
        showtime_services.get_seat_map(session=mocker.MagicMock(), showtime_id=10)

    assert exc_info.value.status_code == 404
    mock_seats.assert_not_called()
