from enum import Enum, unique
from typing import TYPE_CHECKING

from app.core.enums import Role

if TYPE_CHECKING:
    from app.models.booking import TicketBooking
    from app.models.user import User

__all__ = [
    "Capability",
    "has_capability",
    "can_access_booking",
]


@unique
class Capability(str, Enum):
    VIEW_ALL_BOOKINGS = "view_all_bookings"
    MANAGE_BOOKINGS = "manage_bookings"
    BOOK_FOR_CUSTOMER = "book_for_customer"
    LOOKUP_BOOKING_BY_CODE = "lookup_booking_by_code"
    DELETE_BOOKINGS = "delete_bookings"
    CLEANUP_BOOKINGS = "cleanup_bookings"


_STAFF_CAPABILITIES = frozenset(
    {
        Capability.VIEW_ALL_BOOKINGS,
        Capability.MANAGE_BOOKINGS,
        Capability.BOOK_FOR_CUSTOMER,
        Capability.LOOKUP_BOOKING_BY_CODE,
    }
)

ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.ADMIN: frozenset(Capability),
    Role.STAFF: _STAFF_CAPABILITIES,
    Role.CUSTOMER: frozenset(),
}


def has_capability(role: Role, capability: Capability) -> bool:
    return capability in ROLE_CAPABILITIES.get(role, frozenset())


def can_access_booking(user: "User", booking: "TicketBooking") -> bool:
    """
    Staff and admins can access every booking, customers only their own.
    Callers must treat a denial exactly like a missing booking.
    """
    if has_capability(user.role, Capability.VIEW_ALL_BOOKINGS):
        return True
    customer = booking.customer
    return customer is not None and customer.account_id == user.id
