from .user import User, UserBase
from .customer import Customer, CustomerBase
from .movie import Movie
from .cinema_room import CinemaRoom
from .seat import Seat, SeatType
from .showtime import Showtime
from .food import Food
from .booking import FoodOrder, Invoice, Ticket, TicketBooking
from .auth_schemas import Token, TokenPayload

__all__ = [
    "User",
    "UserBase",
    "Customer",
    "CustomerBase",
    "Movie",
    "CinemaRoom",
    "Seat",
    "SeatType",
    "Showtime",
    "Food",
    "TicketBooking",
    "Ticket",
    "FoodOrder",
    "Invoice",
    "Token",
    "TokenPayload",
]
