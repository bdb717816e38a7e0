from types import SimpleNamespace

import pytest

from app.core.enums import Role
from app.core.permissions import Capability, can_access_booking, has_capability


@pytest.mark.parametrize("capability", list(Capability))
def test_admin_has_every_capability(capability: Capability):
    assert has_capability(Role.ADMIN, capability)


def test_staff_capabilities():
    assert has_capability(Role.STAFF, Capability.VIEW_ALL_BOOKINGS)
    assert has_capability(Role.STAFF, Capability.MANAGE_BOOKINGS)
    assert has_capability(Role.STAFF, Capability.BOOK_FOR_CUSTOMER)
    assert has_capability(Role.STAFF, Capability.LOOKUP_BOOKING_BY_CODE)
    assert not has_capability(Role.STAFF, Capability.DELETE_BOOKINGS)
    assert not has_capability(Role.STAFF, Capability.CLEANUP_BOOKINGS)


@pytest.mark.parametrize("capability", list(Capability))
def test_customer_has_no_capability(capability: Capability):
    assert not has_capability(Role.CUSTOMER, capability)


def _booking_for_account(account_id: int | None):
    return SimpleNamespace(customer=SimpleNamespace(account_id=account_id))


@pytest.mark.parametrize("role", [Role.ADMIN, Role.STAFF])
def test_staff_and_admin_access_any_booking(role: Role):
    user = SimpleNamespace(id=1, role=role)
    assert can_access_booking(user, _booking_for_account(99))  # type: ignore[arg-type]


def test_customer_accesses_own_booking():
    user = SimpleNamespace(id=5, role=Role.CUSTOMER)
    assert can_access_booking(user, _booking_for_account(5))  # type: ignore[arg-type]


def test_customer_denied_other_booking():
    user = SimpleNamespace(id=5, role=Role.CUSTOMER)
    assert not can_access_booking(user, _booking_for_account(6))  # type: ignore[arg-type]


def test_customer_denied_walk_in_booking():
    user = SimpleNamespace(id=5, role=Role.CUSTOMER)
    assert not can_access_booking(user, _booking_for_account(None))  # type: ignore[arg-type]
