from collections.abc import Iterable

from sqlmodel import Session, col, select

from app.core.enums import ACTIVE_BOOKING_STATUSES
from app.models.booking import Ticket, TicketBooking
from app.models.showtime import Showtime


def get_showtime_by_id(
    *,
    session: Session,
    showtime_id: int,
) -> Showtime | None:
    """
    Get a showtime by its ID.

    Parameters:
        session (Session): The SQLAlchemy session to use.
        showtime_id (int): The ID of the showtime to retrieve.
    Returns:
        Showtime | None: The Showtime object if found, otherwise None.
    """
    return session.get(Showtime, showtime_id)


def get_showtime_for_update(
    *,
    session: Session,
    showtime_id: int,
) -> Showtime | None:
    """
    Get a showtime and take a row lock on it for the rest of the transaction.
    Bookings for the same showtime serialize on this lock, so the seat
    conflict check and the ticket inserts cannot interleave.

    Parameters:
        session (Session): The SQLAlchemy session to use.
        showtime_id (int): The ID of the showtime to lock.
    Returns:
        Showtime | None: The locked Showtime, or None if it does not exist.
    """
    stmt = (
        select(Showtime)
        .where(Showtime.id == showtime_id)
        # OF showtime: the eager-loaded movie/room are outer joined
        .with_for_update(of=Showtime)
    )
    return session.exec(stmt).first()


def get_booked_seat_ids(
    *,
    session: Session,
    showtime_id: int,
    seat_ids: Iterable[int] | None = None,
) -> set[int]:
    """
    Get the ids of seats held by an active booking for a showtime.

    Parameters:
        session (Session): The SQLAlchemy session to use.
        showtime_id (int): The showtime to inspect.
        seat_ids (Iterable[int] | None): Restrict the check to these seats.
    Returns:
        set[int]: Seat ids ticketed under a pending, confirmed or completed booking.
    """
    stmt = (
        select(Ticket.seat_id)
        .join(TicketBooking, col(Ticket.ticket_booking_id) == TicketBooking.id)
        .where(
            TicketBooking.showtime_id == showtime_id,
            col(TicketBooking.status).in_(ACTIVE_BOOKING_STATUSES),
        )
    )
    if seat_ids is not None:
        stmt = stmt.where(col(Ticket.seat_id).in_(list(seat_ids)))
    return set(session.exec(stmt).all())
