from decimal import Decimal

from sqlmodel import Session

from app.converters import booking as booking_converters
from app.core.enums import BookingStatus, PaymentStatus
from app.crud import booking as bookings_crud
from app.schemas.booking import BookingPublic, BookingSummary
from app.utils import now_local_naive


def _create_booking(session: Session, *, customer, showtime, seats, food=None):
    now = now_local_naive()
    booking = bookings_crud.create_booking(
        session=session,
        booking_code="BK20250101ABC123",
        customer_id=customer.id,
        showtime_id=showtime.id,
        booked_at=now,
    )
    bookings_crud.create_tickets(
        session=session, booking_id=booking.id, seats=seats, price=showtime.price
    )
    if food is not None:
        bookings_crud.create_food_orders(
            session=session, booking_id=booking.id, lines=[(food, 2)]
        )
    bookings_crud.create_invoice(
        session=session, booking_id=booking.id, amount=Decimal("170000.00"), created_at=now
    )
    session.commit()
    return booking


def test_to_public_hydrates_booking(
    *,
    db_transaction: Session,
    customer_factory,
    showtime_factory,
    seat_factory,
    food_factory,
):
    customer = customer_factory(full_name="Nguyen Van A", phone_number="0901234567")
    showtime = showtime_factory()
    seat = seat_factory(cinema_room=showtime.cinema_room, row="B", column=3)
    food = food_factory(name="Popcorn")

    booking = _create_booking(
        db_transaction, customer=customer, showtime=showtime, seats=[seat], food=food
    )
    booking = bookings_crud.get_booking_by_id(session=db_transaction, booking_id=booking.id)

    booking_public = booking_converters.to_public(booking)

    assert isinstance(booking_public, BookingPublic)
    assert booking_public.status == BookingStatus.PENDING
    assert booking_public.customer_name == "Nguyen Van A"
    assert booking_public.customer_phone == "0901234567"
    assert booking_public.movie_title == showtime.movie.title
    assert booking_public.room_name == showtime.cinema_room.name
    assert booking_public.base_price == showtime.price

    assert len(booking_public.tickets) == 1
    ticket = booking_public.tickets[0]
    assert ticket.seat_id == seat.id
    assert ticket.seat_name == "B3"
    assert ticket.row == "B"
    assert ticket.column == 3
    assert ticket.price == showtime.price

    assert len(booking_public.food_orders) == 1
    food_order = booking_public.food_orders[0]
    assert food_order.food_name == "Popcorn"
    assert food_order.quantity == 2
    assert food_order.price == Decimal("90000.00")
    assert food_order.food_unit_price == Decimal("45000.00")

    assert booking_public.invoice is not None
    assert booking_public.invoice.payment_status == PaymentStatus.PENDING
    assert booking_public.invoice.payment_date is None


def test_to_summary_has_no_nested_rows(
    *,
    db_transaction: Session,
    customer_factory,
    showtime_factory,
    seat_factory,
):
    customer = customer_factory()
    showtime = showtime_factory()
    seat = seat_factory(cinema_room=showtime.cinema_room)

    booking = _create_booking(db_transaction, customer=customer, showtime=showtime, seats=[seat])

    summary = booking_converters.to_summary(booking)

    assert isinstance(summary, BookingSummary)
    assert summary.booking_code == "BK20250101ABC123"
    assert summary.start_time == showtime.start_time
    assert "tickets" not in summary.model_dump()
