import math
import secrets
import string
from datetime import datetime, timedelta
from decimal import Decimal
from logging import getLogger

from psycopg.errors import UniqueViolation
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.converters import booking as booking_converters
from app.core.config import settings
from app.core.enums import ACTIVE_BOOKING_STATUSES, BookingStatus, PaymentStatus
from app.core.permissions import Capability, can_access_booking, has_capability
from app.crud import booking as bookings_crud
from app.crud import customer as customers_crud
from app.crud import food as foods_crud
from app.crud import seat as seats_crud
from app.crud import showtime as showtimes_crud
from app.exceptions.base import AppError, InsufficientRole
from app.exceptions.booking_exceptions import (
    BookingConflict,
    BookingNotFound,
    FoodUnavailable,
    InvalidBookingState,
    SeatsAlreadyBooked,
    SeatsNotFound,
)
from app.exceptions.customer_exceptions import CustomerNotFound
from app.exceptions.showtime_exceptions import ShowtimeAlreadyStarted, ShowtimeNotFound
from app.inputs.booking import BookingConfirm, BookingCreate, BookingFilters, BookingUpdate
from app.models.booking import TicketBooking
from app.models.food import Food
from app.models.user import User
from app.schemas.booking import BookingPublic, BookingsPage
from app.schemas.common import PageMetadata
from app.utils import now_local_naive

logger = getLogger(__name__)

BOOKING_CODE_PREFIX = "BK"
BOOKING_CODE_SUFFIX_LENGTH = 6
_BOOKING_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_booking_code(*, session: Session, now: datetime) -> str:
    """
    Generate an unused booking code of the form BK<YYYYMMDD><6 chars>.
    """
    while True:
        suffix = "".join(
            secrets.choice(_BOOKING_CODE_ALPHABET)
            for _ in range(BOOKING_CODE_SUFFIX_LENGTH)
        )
        code = f"{BOOKING_CODE_PREFIX}{now:%Y%m%d}{suffix}"
        if not bookings_crud.booking_code_exists(session=session, booking_code=code):
            return code


def resolve_customer_id(
    *,
    session: Session,
    current_user: User,
    customer_phone: str | None,
) -> int:
    """
    Decide which customer a new booking belongs to. Staff and admins may
    book for a registered customer by phone number; without one the booking
    is a walk-in sale on the staff account's own profile, created on first
    use. Everyone else books for their own customer profile.

    Raises:
        CustomerNotFound: If no customer matches the phone number, or a
        customer account has no customer profile.
    """
    books_for_others = has_capability(current_user.role, Capability.BOOK_FOR_CUSTOMER)
    if customer_phone and books_for_others:
        customer = customers_crud.get_customer_by_phone(
            session=session,
            phone_number=customer_phone,
        )
        if customer is None:
            raise CustomerNotFound.by_phone(customer_phone)
        return customer.id

    customer = customers_crud.get_customer_by_account_id(
        session=session,
        account_id=current_user.id,
    )
    if customer is None:
        if not books_for_others:
            raise CustomerNotFound.for_account(current_user.id)
        customer = customers_crud.create_walk_in_customer(
            session=session,
            account_id=current_user.id,
            full_name=f"Walk-in ({current_user.phone_number})",
        )
        logger.info("Created walk-in customer profile for account %s", current_user.id)
    return customer.id


def _price_food_items(
    *,
    session: Session,
    booking_in: BookingCreate,
) -> tuple[list[tuple[Food, int]], Decimal]:
    if not booking_in.food_items:
        return [], Decimal(0)

    foods = foods_crud.get_available_foods(
        session=session,
        food_ids={item.food_id for item in booking_in.food_items},
    )
    lines: list[tuple[Food, int]] = []
    food_total = Decimal(0)
    for item in booking_in.food_items:
        food = foods.get(item.food_id)
        if food is None:
            raise FoodUnavailable(item.food_id)
        lines.append((food, item.quantity))
        food_total += food.price * item.quantity
    return lines, food_total


def _create_booking_rows(
    *,
    session: Session,
    booking_in: BookingCreate,
    current_user: User,
    now: datetime,
) -> int:
    # Locks the showtime row until commit/rollback
    showtime = showtimes_crud.get_showtime_for_update(
        session=session,
        showtime_id=booking_in.showtime_id,
    )
    if showtime is None:
        raise ShowtimeNotFound(booking_in.showtime_id)
    if showtime.start_time <= now:
        raise ShowtimeAlreadyStarted(showtime.id, showtime.start_time)

    customer_id = resolve_customer_id(
        session=session,
        current_user=current_user,
        customer_phone=booking_in.customer_phone,
    )

    conflicting = showtimes_crud.get_booked_seat_ids(
        session=session,
        showtime_id=showtime.id,
        seat_ids=booking_in.seats,
    )
    if conflicting:
        raise SeatsAlreadyBooked(conflicting)

    seats = seats_crud.get_seats_in_room(
        session=session,
        cinema_room_id=showtime.cinema_room_id,
        seat_ids=booking_in.seats,
    )
    if len(seats) != len(booking_in.seats):
        raise SeatsNotFound(set(booking_in.seats) - {seat.id for seat in seats})

    # Every ticket costs the showtime's flat price, whatever the seat type
    ticket_price = showtime.price
    ticket_total = ticket_price * len(seats)
    food_lines, food_total = _price_food_items(session=session, booking_in=booking_in)
    total_amount = ticket_total + food_total

    booking = bookings_crud.create_booking(
        session=session,
        booking_code=generate_booking_code(session=session, now=now),
        customer_id=customer_id,
        showtime_id=showtime.id,
        booked_at=now,
    )
    bookings_crud.create_tickets(
        session=session,
        booking_id=booking.id,
        seats=seats,
        price=ticket_price,
    )
    if food_lines:
        bookings_crud.create_food_orders(
            session=session,
            booking_id=booking.id,
            lines=food_lines,
        )
    bookings_crud.create_invoice(
        session=session,
        booking_id=booking.id,
        amount=total_amount,
        created_at=now,
    )
    logger.info(
        "Created booking %s (%s) for customer %s by user %s: %d seats, total %s",
        booking.id,
        booking.booking_code,
        customer_id,
        current_user.id,
        len(seats),
        total_amount,
    )
    return booking.id


def create_booking(
    *,
    session: Session,
    booking_in: BookingCreate,
    current_user: User,
) -> BookingPublic:
    """
    Create a pending booking with its tickets, food orders and invoice in
    one transaction.

    Validation runs in this order and stops at the first failure: the
    showtime exists, it has not started, the customer resolves, none of the
    seats is held by an active booking, all seats exist in the showtime's
    room, all food is available. Nothing is persisted when any step fails.

    Parameters:
        session (Session): Database session.
        booking_in (BookingCreate): Showtime, seats, food and optional customer phone.
        current_user (User): The account making the booking.
    Returns:
        BookingPublic: The hydrated booking, read back after commit.
    Raises:
        ShowtimeNotFound: If the showtime does not exist.
        ShowtimeAlreadyStarted: If the showtime has already started.
        CustomerNotFound: If the customer cannot be resolved.
        SeatsAlreadyBooked: If any seat is held by an active booking.
        SeatsNotFound: If any seat does not exist in the showtime's room.
        FoodUnavailable: If a food item does not exist or is not on sale.
        AppError: For other unexpected errors.
    """
    try:
        booking_id = _create_booking_rows(
            session=session,
            booking_in=booking_in,
            current_user=current_user,
            now=now_local_naive(),
        )
        session.commit()
    except AppError:
        session.rollback()
        raise
    except IntegrityError as e:
        session.rollback()
        # Booking code or walk-in profile taken by a concurrent request
        if isinstance(e.orig, UniqueViolation):
            raise BookingConflict() from e
        raise AppError from e
    except Exception as e:
        session.rollback()
        raise AppError from e

    return get_booking(session=session, booking_id=booking_id, current_user=current_user)


def _get_accessible_booking(
    *,
    session: Session,
    booking_id: int,
    current_user: User,
) -> TicketBooking:
    booking = bookings_crud.get_booking_by_id(session=session, booking_id=booking_id)
    # A denied check looks exactly like a missing booking
    if booking is None or not can_access_booking(current_user, booking):
        raise BookingNotFound(booking_id)
    return booking


def get_booking(
    *,
    session: Session,
    booking_id: int,
    current_user: User,
) -> BookingPublic:
    """
    Get a hydrated booking by id.

    Raises:
        BookingNotFound: If the booking does not exist or is not visible to the user.
    """
    booking = _get_accessible_booking(
        session=session,
        booking_id=booking_id,
        current_user=current_user,
    )
    return booking_converters.to_public(booking)


def get_booking_by_code(
    *,
    session: Session,
    booking_code: str,
) -> BookingPublic:
    booking = bookings_crud.get_booking_by_code(session=session, booking_code=booking_code)
    if booking is None:
        raise BookingNotFound(booking_code)
    return booking_converters.to_public(booking)


def get_bookings(
    *,
    session: Session,
    filters: BookingFilters,
    current_user: User,
) -> BookingsPage:
    """
    Get a page of bookings. Customers only ever see their own bookings,
    whatever customer_id they ask for.

    Parameters:
        session (Session): Database session.
        filters (BookingFilters): Pagination and filters.
        current_user (User): The account asking.
    Returns:
        BookingsPage: The bookings of the page and pagination metadata.
    """
    owner_account_id = (
        None
        if has_capability(current_user.role, Capability.VIEW_ALL_BOOKINGS)
        else current_user.id
    )
    bookings, total = bookings_crud.get_bookings(
        session=session,
        filters=filters,
        owner_account_id=owner_account_id,
    )
    return BookingsPage(
        bookings=[booking_converters.to_summary(booking) for booking in bookings],
        metadata=PageMetadata(
            total_records=total,
            first_page=1,
            last_page=math.ceil(total / filters.limit),
            page=filters.page,
            limit=filters.limit,
        ),
    )


def confirm_booking(
    *,
    session: Session,
    booking_id: int,
    confirm_in: BookingConfirm,
    current_user: User,
) -> BookingPublic:
    """
    Confirm a pending booking and mark its invoice paid. Payment is taken to
    have been collected by the caller; no gateway is contacted.

    Parameters:
        session (Session): Database session.
        booking_id (int): ID of the booking to confirm.
        confirm_in (BookingConfirm): Payment method and optional payment details.
        current_user (User): The account confirming.
    Returns:
        BookingPublic: The refreshed booking.
    Raises:
        BookingNotFound: If the booking does not exist or is not visible to the user.
        InvalidBookingState: If the booking is not pending.
        AppError: For other unexpected errors.
    """
    booking = _get_accessible_booking(
        session=session,
        booking_id=booking_id,
        current_user=current_user,
    )
    if booking.status != BookingStatus.PENDING:
        raise InvalidBookingState(
            booking_id, booking.status.value, BookingStatus.PENDING.value
        )

    details = confirm_in.payment_details
    if details is not None and details.amount is not None and booking.invoice is not None:
        if details.amount != booking.invoice.amount:
            logger.warning(
                "Booking %s confirmed with reported amount %s, invoice amount is %s",
                booking_id,
                details.amount,
                booking.invoice.amount,
            )

    try:
        now = now_local_naive()
        bookings_crud.update_booking_status(
            session=session,
            booking=booking,
            status=BookingStatus.CONFIRMED,
            updated_at=now,
        )
        if booking.invoice is not None:
            bookings_crud.update_invoice(
                session=session,
                invoice=booking.invoice,
                payment_method=confirm_in.payment_method,
                payment_status=PaymentStatus.PAID,
                updated_at=now,
            )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    logger.info(
        "Confirmed booking %s by user %s via %s (transaction %s)",
        booking_id,
        current_user.id,
        confirm_in.payment_method.value,
        details.transaction_id if details else None,
    )
    return get_booking(session=session, booking_id=booking_id, current_user=current_user)


def _ensure_seats_still_free(*, session: Session, booking: TicketBooking) -> None:
    # Locks the showtime row until commit/rollback
    showtime = showtimes_crud.get_showtime_for_update(
        session=session,
        showtime_id=booking.showtime_id,
    )
    if showtime is None:
        raise ShowtimeNotFound(booking.showtime_id)
    conflicting = showtimes_crud.get_booked_seat_ids(
        session=session,
        showtime_id=showtime.id,
        seat_ids=[ticket.seat_id for ticket in booking.tickets],
    )
    if conflicting:
        raise SeatsAlreadyBooked(conflicting)


def update_booking(
    *,
    session: Session,
    booking_id: int,
    booking_in: BookingUpdate,
    current_user: User,
) -> BookingPublic:
    """
    Update a booking's status and its invoice's payment fields in one
    transaction. Values are only checked for enum membership. Customers may
    only cancel their own bookings; any other change needs staff rights.
    Bringing a cancelled booking back to an active status rechecks its
    seats under the showtime lock, as creation does.

    Raises:
        BookingNotFound: If the booking does not exist or is not visible to the user.
        InsufficientRole: If a customer tries anything other than cancelling.
        SeatsAlreadyBooked: If a reactivated booking's seats were taken meanwhile.
        AppError: For other unexpected errors.
    """
    booking = _get_accessible_booking(
        session=session,
        booking_id=booking_id,
        current_user=current_user,
    )
    changes = booking_in.model_dump(exclude_none=True)
    if not has_capability(current_user.role, Capability.MANAGE_BOOKINGS):
        if changes != {"status": BookingStatus.CANCELLED}:
            raise InsufficientRole("Customers can only cancel their bookings.")

    try:
        now = now_local_naive()
        reactivating = (
            booking.status == BookingStatus.CANCELLED
            and booking_in.status in ACTIVE_BOOKING_STATUSES
        )
        if reactivating:
            _ensure_seats_still_free(session=session, booking=booking)
        if booking_in.status is not None:
            bookings_crud.update_booking_status(
                session=session,
                booking=booking,
                status=booking_in.status,
                updated_at=now,
            )
        has_invoice_changes = (
            booking_in.payment_method is not None or booking_in.payment_status is not None
        )
        if has_invoice_changes and booking.invoice is not None:
            bookings_crud.update_invoice(
                session=session,
                invoice=booking.invoice,
                payment_method=booking_in.payment_method,
                payment_status=booking_in.payment_status,
                updated_at=now,
            )
        session.commit()
    except AppError:
        session.rollback()
        raise
    except Exception as e:
        session.rollback()
        raise AppError from e

    logger.info("Updated booking %s by user %s: %s", booking_id, current_user.id, changes)
    return get_booking(session=session, booking_id=booking_id, current_user=current_user)


def delete_booking(
    *,
    session: Session,
    booking_id: int,
    current_user: User,
) -> None:
    """
    Delete a booking with its food orders, tickets and invoice.

    Raises:
        BookingNotFound: If the booking does not exist.
        AppError: For other unexpected errors.
    """
    booking = bookings_crud.get_booking_by_id(session=session, booking_id=booking_id)
    if booking is None:
        raise BookingNotFound(booking_id)

    try:
        bookings_crud.delete_booking(session=session, booking_id=booking_id)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    logger.info("Deleted booking %s by user %s", booking_id, current_user.id)


def cleanup_expired_bookings(
    *,
    session: Session,
    now: datetime | None = None,
    expiry: timedelta | None = None,
) -> int:
    """
    Cancel pending bookings older than the configured expiry window, which
    releases their seats.

    Parameters:
        session (Session): Database session.
        now (datetime | None): Reference time, defaults to the current local time.
        expiry (timedelta | None): Age after which a pending booking expires,
            defaults to BOOKING_PENDING_EXPIRY_MINUTES.
    Returns:
        int: The number of bookings cancelled.
    Raises:
        AppError: If the sweep fails; nothing is cancelled in that case.
    """
    now = now or now_local_naive()
    if expiry is None:
        expiry = timedelta(minutes=settings.BOOKING_PENDING_EXPIRY_MINUTES)
    try:
        booking_ids = bookings_crud.get_expired_pending_booking_ids(
            session=session,
            cutoff=now - expiry,
        )
        cleaned_count = bookings_crud.cancel_bookings(
            session=session,
            booking_ids=booking_ids,
            updated_at=now,
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    logger.info("Cancelled %d expired pending bookings", cleaned_count)
    return cleaned_count
