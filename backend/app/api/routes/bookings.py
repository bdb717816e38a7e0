from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import CurrentUser, SessionDep, require_capability
from app.core.permissions import Capability
from app.exceptions.base import InsufficientRole, error_responses
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
from app.inputs.booking import (
    BookingConfirmRequest,
    BookingCreateRequest,
    BookingFilters,
    BookingUpdateRequest,
    get_booking_filters,
)
from app.models.user import User
from app.schemas.booking import BookingPublic, BookingsPage, CleanupResult
from app.schemas.common import SuccessResponse
from app.services import bookings as bookings_service

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post(
    "/",
    response_model=SuccessResponse[BookingPublic],
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(
        ShowtimeNotFound,
        ShowtimeAlreadyStarted,
        CustomerNotFound,
        SeatsAlreadyBooked,
        SeatsNotFound,
        FoodUnavailable,
        BookingConflict,
    ),
)
def create_booking(
    *,
    session: SessionDep,
    current_user: CurrentUser,
    body: BookingCreateRequest,
) -> SuccessResponse[BookingPublic]:
    booking = bookings_service.create_booking(
        session=session,
        booking_in=body.input,
        current_user=current_user,
    )
    return SuccessResponse(data=booking)


@router.get("/", response_model=SuccessResponse[BookingsPage])
def get_bookings(
    *,
    session: SessionDep,
    current_user: CurrentUser,
    filters: Annotated[BookingFilters, Depends(get_booking_filters)],
) -> SuccessResponse[BookingsPage]:
    page = bookings_service.get_bookings(
        session=session,
        filters=filters,
        current_user=current_user,
    )
    return SuccessResponse(data=page)


@router.post(
    "/cleanup",
    response_model=SuccessResponse[CleanupResult],
    responses=error_responses(InsufficientRole),
)
def cleanup_expired_bookings(
    *,
    session: SessionDep,
    _: Annotated[User, Depends(require_capability(Capability.CLEANUP_BOOKINGS))],
) -> SuccessResponse[CleanupResult]:
    cleaned_count = bookings_service.cleanup_expired_bookings(session=session)
    return SuccessResponse(data=CleanupResult(cleaned_count=cleaned_count))


@router.get(
    "/code/{booking_code}",
    response_model=SuccessResponse[BookingPublic],
    responses=error_responses(InsufficientRole, BookingNotFound),
)
def get_booking_by_code(
    *,
    session: SessionDep,
    booking_code: str,
    _: Annotated[
        User, Depends(require_capability(Capability.LOOKUP_BOOKING_BY_CODE))
    ],
) -> SuccessResponse[BookingPublic]:
    booking = bookings_service.get_booking_by_code(
        session=session,
        booking_code=booking_code,
    )
    return SuccessResponse(data=booking)


@router.get(
    "/{booking_id}",
    response_model=SuccessResponse[BookingPublic],
    responses=error_responses(BookingNotFound),
)
def get_booking(
    *,
    session: SessionDep,
    current_user: CurrentUser,
    booking_id: int,
) -> SuccessResponse[BookingPublic]:
    booking = bookings_service.get_booking(
        session=session,
        booking_id=booking_id,
        current_user=current_user,
    )
    return SuccessResponse(data=booking)


@router.put(
    "/{booking_id}",
    response_model=SuccessResponse[BookingPublic],
    responses=error_responses(BookingNotFound, InsufficientRole, SeatsAlreadyBooked),
)
def update_booking(
    *,
    session: SessionDep,
    current_user: CurrentUser,
    booking_id: int,
    body: BookingUpdateRequest,
) -> SuccessResponse[BookingPublic]:
    booking = bookings_service.update_booking(
        session=session,
        booking_id=booking_id,
        booking_in=body.input,
        current_user=current_user,
    )
    return SuccessResponse(data=booking)


@router.post(
    "/{booking_id}/confirm",
    response_model=SuccessResponse[BookingPublic],
    responses=error_responses(BookingNotFound, InvalidBookingState),
)
def confirm_booking(
    *,
    session: SessionDep,
    current_user: CurrentUser,
    booking_id: int,
    body: BookingConfirmRequest,
) -> SuccessResponse[BookingPublic]:
    booking = bookings_service.confirm_booking(
        session=session,
        booking_id=booking_id,
        confirm_in=body.input,
        current_user=current_user,
    )
    return SuccessResponse(data=booking)


@router.delete(
    "/{booking_id}",
    response_model=SuccessResponse[None],
    responses=error_responses(InsufficientRole, BookingNotFound),
)
def delete_booking(
    *,
    session: SessionDep,
    booking_id: int,
    current_user: Annotated[
        User, Depends(require_capability(Capability.DELETE_BOOKINGS))
    ],
) -> SuccessResponse[None]:
    bookings_service.delete_booking(
        session=session,
        booking_id=booking_id,
        current_user=current_user,
    )
    return SuccessResponse(data=None)
