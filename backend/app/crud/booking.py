from collections.abc import Iterable, Sequence
from datetime import datetime, time, timedelta
from decimal import Decimal

from sqlalchemy import delete, func, update
from sqlmodel import Session, col, select

from app.core.enums import BookingStatus, PaymentMethod, PaymentStatus
from app.inputs.booking import BookingFilters
from app.models.booking import FoodOrder, Invoice, Ticket, TicketBooking
from app.models.customer import Customer
from app.models.food import Food
from app.models.seat import Seat


def booking_code_exists(*, session: Session, booking_code: str) -> bool:
    stmt = select(TicketBooking.id).where(TicketBooking.booking_code == booking_code)
    return session.exec(stmt).first() is not None


def create_booking(
    *,
    session: Session,
    booking_code: str,
    customer_id: int,
    showtime_id: int,
    booked_at: datetime,
) -> TicketBooking:
    """
    Insert a pending booking and flush so that its id is available to the
    child rows.

    Raises:
        IntegrityError: If the customer or showtime does not exist, or the
        booking code is taken.
    """
    db_obj = TicketBooking(
        booking_code=booking_code,
        customer_id=customer_id,
        showtime_id=showtime_id,
        booking_date=booked_at,
        status=BookingStatus.PENDING,
        created_at=booked_at,
        updated_at=booked_at,
    )
    session.add(db_obj)
    session.flush()
    return db_obj


def create_tickets(
    *,
    session: Session,
    booking_id: int,
    seats: Sequence[Seat],
    price: Decimal,
) -> list[Ticket]:
    tickets = [
        Ticket(ticket_booking_id=booking_id, seat_id=seat.id, price=price)
        for seat in seats
    ]
    session.add_all(tickets)
    session.flush()
    return tickets


def create_food_orders(
    *,
    session: Session,
    booking_id: int,
    lines: Iterable[tuple[Food, int]],
) -> list[FoodOrder]:
    """
    Insert one food order per (food, quantity) line. The stored price is the
    line total, unit price times quantity.
    """
    food_orders = [
        FoodOrder(
            ticket_booking_id=booking_id,
            food_id=food.id,
            quantity=quantity,
            price=food.price * quantity,
        )
        for food, quantity in lines
    ]
    session.add_all(food_orders)
    session.flush()
    return food_orders


def create_invoice(
    *,
    session: Session,
    booking_id: int,
    amount: Decimal,
    created_at: datetime,
) -> Invoice:
    db_obj = Invoice(
        ticket_booking_id=booking_id,
        payment_method=PaymentMethod.CASH,
        payment_status=PaymentStatus.PENDING,
        amount=amount,
        created_at=created_at,
        updated_at=created_at,
    )
    session.add(db_obj)
    session.flush()
    return db_obj


def get_booking_by_id(*, session: Session, booking_id: int) -> TicketBooking | None:
    return session.get(TicketBooking, booking_id)


def get_booking_by_code(*, session: Session, booking_code: str) -> TicketBooking | None:
    stmt = select(TicketBooking).where(TicketBooking.booking_code == booking_code)
    return session.exec(stmt).first()


def get_bookings(
    *,
    session: Session,
    filters: BookingFilters,
    owner_account_id: int | None = None,
) -> tuple[list[TicketBooking], int]:
    """
    Get a page of bookings, newest first, together with the total number of
    bookings matching the filters.

    Parameters:
        session (Session): The database session.
        filters (BookingFilters): Pagination and filter values.
        owner_account_id (int | None): When set, only bookings of the customer
            linked to this account are returned and `filters.customer_id` is
            ignored.
    Returns:
        tuple[list[TicketBooking], int]: The page and the total record count.
    """
    conditions = []
    if owner_account_id is not None:
        conditions.append(Customer.account_id == owner_account_id)
    elif filters.customer_id is not None:
        conditions.append(TicketBooking.customer_id == filters.customer_id)
    if filters.status is not None:
        conditions.append(TicketBooking.status == filters.status)
    if filters.showtime_id is not None:
        conditions.append(TicketBooking.showtime_id == filters.showtime_id)
    if filters.booking_date is not None:
        day_start = datetime.combine(filters.booking_date, time.min)
        conditions.append(col(TicketBooking.booking_date) >= day_start)
        conditions.append(col(TicketBooking.booking_date) < day_start + timedelta(days=1))

    count_stmt = (
        select(func.count(col(TicketBooking.id)))
        .join(Customer, col(TicketBooking.customer_id) == Customer.id)
        .where(*conditions)
    )
    total = session.exec(count_stmt).one()

    stmt = (
        select(TicketBooking)
        .join(Customer, col(TicketBooking.customer_id) == Customer.id)
        .where(*conditions)
        .order_by(col(TicketBooking.created_at).desc(), col(TicketBooking.id).desc())
        .limit(filters.limit)
        .offset((filters.page - 1) * filters.limit)
    )
    bookings = list(session.exec(stmt).unique().all())
    return bookings, total


def update_booking_status(
    *,
    session: Session,
    booking: TicketBooking,
    status: BookingStatus,
    updated_at: datetime,
) -> TicketBooking:
    booking.status = status
    booking.updated_at = updated_at
    session.add(booking)
    session.flush()
    return booking


def update_invoice(
    *,
    session: Session,
    invoice: Invoice,
    updated_at: datetime,
    payment_method: PaymentMethod | None = None,
    payment_status: PaymentStatus | None = None,
) -> Invoice:
    """
    Update the payment fields of an invoice. Marking it paid stamps the
    payment date.
    """
    if payment_method is not None:
        invoice.payment_method = payment_method
    if payment_status is not None:
        invoice.payment_status = payment_status
        if payment_status == PaymentStatus.PAID:
            invoice.payment_date = updated_at
    invoice.updated_at = updated_at
    session.add(invoice)
    session.flush()
    return invoice


def delete_booking(*, session: Session, booking_id: int) -> None:
    """
    Delete a booking and its children. Children go first so the foreign
    keys are satisfied at every step.
    """
    session.execute(delete(FoodOrder).where(col(FoodOrder.ticket_booking_id) == booking_id))
    session.execute(delete(Ticket).where(col(Ticket.ticket_booking_id) == booking_id))
    session.execute(delete(Invoice).where(col(Invoice.ticket_booking_id) == booking_id))
    session.execute(delete(TicketBooking).where(col(TicketBooking.id) == booking_id))
    session.flush()


def get_expired_pending_booking_ids(
    *,
    session: Session,
    cutoff: datetime,
) -> list[int]:
    stmt = select(TicketBooking.id).where(
        TicketBooking.status == BookingStatus.PENDING,
        col(TicketBooking.booking_date) < cutoff,
    )
    return list(session.exec(stmt).all())


def cancel_bookings(
    *,
    session: Session,
    booking_ids: Sequence[int],
    updated_at: datetime,
) -> int:
    """
    Cancel the given pending bookings and fail their pending invoices.
    Cancelled bookings no longer count towards seat occupancy.

    Returns:
        int: The number of bookings cancelled.
    """
    if not booking_ids:
        return 0
    result = session.execute(
        update(TicketBooking)
        .where(
            col(TicketBooking.id).in_(booking_ids),
            col(TicketBooking.status) == BookingStatus.PENDING,
        )
        .values(status=BookingStatus.CANCELLED, updated_at=updated_at)
        .execution_options(synchronize_session="fetch")
    )
    session.execute(
        update(Invoice)
        .where(
            col(Invoice.ticket_booking_id).in_(booking_ids),
            col(Invoice.payment_status) == PaymentStatus.PENDING,
        )
        .values(payment_status=PaymentStatus.FAILED, updated_at=updated_at)
        .execution_options(synchronize_session="fetch")
    )
    session.flush()
    return result.rowcount
