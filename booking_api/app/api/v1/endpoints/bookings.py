"""
Booking endpoints for API v1.

These routes expose the CRUD operations of ``BookingService``.  The
service returns ``Result`` values; ``_unwrap`` converts a ``Failure``
into the matching HTTP error so that each error kind maps to exactly
one status code.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from booking_api.app.core.db import SQLITE_MAX_INTEGER
from booking_api.app.core.security import Actor, get_current_user
from booking_api.app.schemas.booking import (
    BookingCreate,
    BookingFilter,
    BookingRead,
    BookingUpdate,
    PageRead,
    PageRequest,
)
from booking_api.app.services.booking_service import BookingService
from booking_api.app.services.results import ErrorKind, Failure, Result


router = APIRouter()


ERROR_STATUS = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorKind.FORMAT_ERROR: status.HTTP_400_BAD_REQUEST,
}


def _unwrap(result: Result):
    if isinstance(result, Failure):
        raise HTTPException(status_code=ERROR_STATUS[result.kind], detail=result.detail)
    return result.value


@router.post(
    "/bookings",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a booking",
)
async def create_booking(
    booking: BookingCreate,
    current_user: Actor = Depends(get_current_user),
) -> BookingRead:
    """Create a booking owned by the current user.

    Administrators may pass ``owner_id`` to book on behalf of another
    user; a 404 error is returned if that user does not exist.
    """
    return _unwrap(await BookingService.create_booking(booking, current_user))


@router.get(
    "/bookings",
    response_model=PageRead,
    summary="List bookings",
)
async def list_bookings(
    filters: BookingFilter = Depends(),
    page: PageRequest = Depends(),
    current_user: Actor = Depends(get_current_user),
) -> PageRead:
    """List bookings with optional filtering and pagination.

    Regular users see their own bookings, administrators see all of
    them.  Date filters use the ``dd-MM-yyyy`` format; a malformed date
    results in a 400 error.  Pagination applies only when both
    ``page_size`` and ``page_number`` are given.
    """
    return _unwrap(await BookingService.list_bookings(filters, page, current_user))


@router.get(
    "/bookings/{booking_id}",
    response_model=BookingRead,
    summary="Get a single booking",
)
async def get_booking(
    booking_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER, description="ID of the booking"),
    current_user: Actor = Depends(get_current_user),
) -> BookingRead:
    """Retrieve a single booking by its ID.

    Users may only access their own bookings unless they are
    administrators (403 otherwise).  A missing booking yields 404.
    """
    return _unwrap(await BookingService.get_booking(booking_id, current_user))


@router.put(
    "/bookings/{booking_id}",
    response_model=BookingRead,
    summary="Update an existing booking",
)
async def update_booking(
    update: BookingUpdate,
    booking_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER, description="ID of the booking"),
    current_user: Actor = Depends(get_current_user),
) -> BookingRead:
    """Modify an existing booking.

    Only the fields present in the body are changed.  The same
    ownership rules as for reading apply.
    """
    return _unwrap(await BookingService.update_booking(booking_id, update, current_user))


@router.delete(
    "/bookings/{booking_id}",
    summary="Delete a booking",
)
async def delete_booking(
    booking_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER, description="ID of the booking"),
    current_user: Actor = Depends(get_current_user),
) -> dict:
    """Delete a booking.  The same ownership rules as for reading apply."""
    return {"detail": _unwrap(await BookingService.delete_booking(booking_id, current_user))}
