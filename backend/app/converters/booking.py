from app.models.booking import FoodOrder, Invoice, Ticket, TicketBooking
from app.schemas.booking import (
    BookingPublic,
    BookingSummary,
    FoodOrderPublic,
    InvoicePublic,
    TicketPublic,
)


def to_ticket_public(ticket: Ticket) -> TicketPublic:
    seat = ticket.seat
    return TicketPublic(
        id=ticket.id,
        seat_id=ticket.seat_id,
        price=ticket.price,
        row=seat.row,
        column=seat.column,
        seat_name=seat.name,
        seat_type_name=seat.seat_type.name,
        seat_type_price=seat.seat_type.price,
    )


def to_food_order_public(food_order: FoodOrder) -> FoodOrderPublic:
    return FoodOrderPublic(
        id=food_order.id,
        food_id=food_order.food_id,
        quantity=food_order.quantity,
        price=food_order.price,
        food_name=food_order.food.name,
        food_unit_price=food_order.food.price,
    )


def to_invoice_public(invoice: Invoice) -> InvoicePublic:
    return InvoicePublic(
        id=invoice.id,
        payment_method=invoice.payment_method,
        payment_status=invoice.payment_status,
        amount=invoice.amount,
        payment_date=invoice.payment_date,
    )


def to_summary(booking: TicketBooking) -> BookingSummary:
    """
    Converts a TicketBooking to the flat row shown in booking listings,
    joined with customer, movie, room and showtime details.

    Parameters:
        booking (TicketBooking): The booking to convert.
    Returns:
        BookingSummary: The listing row.
    """
    showtime = booking.showtime
    return BookingSummary(
        id=booking.id,
        booking_code=booking.booking_code,
        customer_id=booking.customer_id,
        showtime_id=booking.showtime_id,
        booking_date=booking.booking_date,
        status=booking.status,
        created_at=booking.created_at,
        updated_at=booking.updated_at,
        customer_name=booking.customer.full_name,
        customer_phone=booking.customer.phone_number,
        movie_title=showtime.movie.title,
        room_name=showtime.cinema_room.name,
        start_time=showtime.start_time,
        end_time=showtime.end_time,
    )


def to_public(booking: TicketBooking) -> BookingPublic:
    """
    Converts a TicketBooking to the fully hydrated booking: its tickets with
    seat details, its food orders, and its invoice.

    Parameters:
        booking (TicketBooking): The booking to convert.
    Returns:
        BookingPublic: The hydrated booking.
    """
    showtime = booking.showtime
    summary = to_summary(booking)
    return BookingPublic(
        **summary.model_dump(),
        movie_duration=showtime.movie.duration_min,
        movie_rating=showtime.movie.age_rating,
        base_price=showtime.price,
        tickets=[to_ticket_public(ticket) for ticket in booking.tickets],
        food_orders=[to_food_order_public(order) for order in booking.food_orders],
        invoice=to_invoice_public(booking.invoice) if booking.invoice else None,
    )
