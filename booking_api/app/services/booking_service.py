"""
Business logic for bookings.

``BookingService`` implements creating, listing, reading, updating and
deleting bookings on behalf of an authenticated ``Actor``.  Regular
users (``Role.USER``) are limited to their own bookings; administrators
may access all of them.

Every operation returns a ``Result``: ``Success`` with the value, or a
``Failure`` whose ``ErrorKind`` tells the caller what went wrong
(missing booking, foreign booking, malformed filter date).
"""

import logging
from typing import Any, Dict, List, Optional

from booking_api.app.core.security import Actor
from booking_api.app.repositories.booking_repository import BookingRepository
from booking_api.app.repositories.user_repository import UserRepository
from booking_api.app.schemas.booking import (
    BookingCreate,
    BookingFilter,
    BookingRead,
    BookingUpdate,
    PageRead,
    PageRequest,
)

from .booking_filter import compile_filter, filter_bookings, paginate
from .results import ErrorKind, Failure, Result, Success
from .user_service import UserService


logger = logging.getLogger(__name__)


class BookingService:
    """Service for managing bookings."""

    @classmethod
    def _to_read(cls, row: Dict[str, Any], usernames: Optional[Dict[int, Optional[str]]] = None) -> BookingRead:
        owner_id = row["owner_id"]
        if usernames is None:
            username = UserService.get_username(owner_id)
        else:
            if owner_id not in usernames:
                usernames[owner_id] = UserService.get_username(owner_id)
            username = usernames[owner_id]
        return BookingRead(username=username, **row)

    @classmethod
    def _load_authorized(cls, booking_id: int, actor: Actor) -> Result[Dict[str, Any]]:
        """Fetch a booking row, checking that ``actor`` may access it."""
        row = BookingRepository.find_by_id(booking_id)
        if row is None:
            return Failure(ErrorKind.NOT_FOUND, f"Booking {booking_id} not found")
        if actor.is_restricted and actor.user_id != row["owner_id"]:
            logger.warning("User %s denied access to booking %s", actor.user_id, booking_id)
            return Failure(
                ErrorKind.ACCESS_DENIED,
                f"This user does not have access to this booking: {booking_id}",
            )
        return Success(row)

    @classmethod
    async def create_booking(cls, booking: BookingCreate, actor: Actor) -> Result[BookingRead]:
        """Create a booking.

        Administrators may create a booking for another user by setting
        ``owner_id``; for everyone else the owner is the actor.
        """
        owner_id = actor.user_id
        if not actor.is_restricted and booking.owner_id is not None:
            owner_id = booking.owner_id
            if UserRepository.find_by_id(owner_id) is None:
                return Failure(ErrorKind.NOT_FOUND, f"User {owner_id} not found")
        record = booking.model_dump(exclude={"owner_id"})
        record["owner_id"] = owner_id
        row = BookingRepository.save(record)
        logger.info("Booking %s created for user %s", row["id"], owner_id)
        return Success(cls._to_read(row))

    @classmethod
    async def list_bookings(cls, filters: BookingFilter, page: PageRequest, actor: Actor) -> Result[PageRead]:
        """List the bookings visible to ``actor``.

        Regular users only see bookings they own.  The filters are
        compiled before anything is fetched, so a malformed date yields
        ``ErrorKind.FORMAT_ERROR`` without partial results.
        """
        compiled = compile_filter(filters)
        if isinstance(compiled, Failure):
            logger.warning("Rejected booking filter: %s", compiled.detail)
            return compiled

        if actor.is_restricted:
            rows = BookingRepository.find_by_owner(actor.user_id)
        else:
            rows = BookingRepository.find_all()

        # Resolve each owner's name once per request.
        usernames: Dict[int, Optional[str]] = {}
        bookings: List[BookingRead] = [cls._to_read(row, usernames) for row in rows]

        matching = filter_bookings(bookings, compiled.value)
        result = paginate(matching, page.page_size, page.page_number)
        logger.debug(
            "Listed %s of %s bookings for user %s (page_count=%s)",
            len(result.items), len(bookings), actor.user_id, result.page_count,
        )
        return Success(PageRead(items=result.items, page_count=result.page_count, has_next=result.has_next))

    @classmethod
    async def get_booking(cls, booking_id: int, actor: Actor) -> Result[BookingRead]:
        loaded = cls._load_authorized(booking_id, actor)
        if isinstance(loaded, Failure):
            return loaded
        return Success(cls._to_read(loaded.value))

    @classmethod
    async def update_booking(cls, booking_id: int, update: BookingUpdate, actor: Actor) -> Result[BookingRead]:
        """Apply a partial update.

        Only fields present in ``update`` change.  Reassigning the owner
        is honoured for administrators only.
        """
        loaded = cls._load_authorized(booking_id, actor)
        if isinstance(loaded, Failure):
            return loaded
        changes = update.model_dump(exclude_none=True)
        if actor.is_restricted:
            changes.pop("owner_id", None)
        elif "owner_id" in changes and UserRepository.find_by_id(changes["owner_id"]) is None:
            return Failure(ErrorKind.NOT_FOUND, f"User {changes['owner_id']} not found")

        record = BookingRead(**loaded.value).model_dump(exclude={"username"})
        record.update(changes)
        row = BookingRepository.save(record)
        logger.info("Booking %s updated by user %s", booking_id, actor.user_id)
        return Success(cls._to_read(row))

    @classmethod
    async def delete_booking(cls, booking_id: int, actor: Actor) -> Result[str]:
        loaded = cls._load_authorized(booking_id, actor)
        if isinstance(loaded, Failure):
            return loaded
        BookingRepository.delete(booking_id)
        logger.info("Booking %s deleted by user %s", booking_id, actor.user_id)
        return Success("Booking deleted")
