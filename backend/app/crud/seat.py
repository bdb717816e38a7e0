from collections.abc import Iterable

from sqlmodel import Session, col, select

from app.models.seat import Seat


def get_seats_for_room(
    *,
    session: Session,
    cinema_room_id: int,
) -> list[Seat]:
    """
    Get every seat of a cinema room, ordered by row and then column.
    """
    stmt = (
        select(Seat)
        .where(Seat.cinema_room_id == cinema_room_id)
        .order_by(col(Seat.row), col(Seat.column))
    )
    return list(session.exec(stmt).all())


def get_seats_in_room(
    *,
    session: Session,
    cinema_room_id: int,
    seat_ids: Iterable[int],
) -> list[Seat]:
    """
    Resolve seat ids within one room. Ids that do not exist, or belong to
    another room, are silently absent from the result.
    """
    stmt = (
        select(Seat)
        .where(
            Seat.cinema_room_id == cinema_room_id,
            col(Seat.id).in_(list(seat_ids)),
        )
        .order_by(col(Seat.id))
    )
    return list(session.exec(stmt).all())
