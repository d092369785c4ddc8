"""
Pydantic models for bookings.

These schemas define the request and response bodies of the booking
endpoints, the query parameters accepted when listing bookings
(``BookingFilter`` and ``PageRequest``) and the paginated listing
response (``PageRead``).
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from booking_api.app.core.db import SQLITE_MAX_INTEGER


class BookingBase(BaseModel):
    start_date: date = Field(..., examples=["2024-05-01"])
    end_date: date = Field(..., examples=["2024-05-07"])
    cost_per_day: float = Field(..., ge=0, examples=[120.0])
    post_code: str = Field(..., examples=["00-950"])
    city: str = Field(..., examples=["Warsaw"])
    street: str = Field(..., examples=["Marszalkowska"])


class BookingCreate(BookingBase):
    """Schema for creating a booking.

    ``owner_id`` is honoured only for administrators; regular users
    always create bookings for themselves.
    """

    owner_id: Optional[int] = Field(default=None, ge=1, le=SQLITE_MAX_INTEGER)


class BookingUpdate(BaseModel):
    """Partial update of a booking.

    Fields left out (or ``None``) keep their stored value.  Changing
    ``owner_id`` is reserved for administrators.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    cost_per_day: Optional[float] = Field(default=None, ge=0)
    post_code: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None
    owner_id: Optional[int] = Field(default=None, ge=1, le=SQLITE_MAX_INTEGER)


class BookingRead(BookingBase):
    id: int
    owner_id: int
    # Display name of the owner, resolved at read time.
    username: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class BookingFilter(BaseModel):
    """Optional constraints applied when listing bookings.

    Dates are given as ``dd-MM-yyyy`` strings and bounds are inclusive.
    Empty strings and non-positive cost bounds mean "no constraint".
    """

    start_date_from: Optional[str] = Field(default=None, description="Earliest start date (dd-MM-yyyy)")
    start_date_to: Optional[str] = Field(default=None, description="Latest start date (dd-MM-yyyy)")
    end_date_from: Optional[str] = Field(default=None, description="Earliest end date (dd-MM-yyyy)")
    end_date_to: Optional[str] = Field(default=None, description="Latest end date (dd-MM-yyyy)")
    cost_up: Optional[float] = Field(default=None, description="Maximum cost per day")
    cost_down: Optional[float] = Field(default=None, description="Minimum cost per day")
    post_code: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None
    username: Optional[str] = None


class PageRequest(BaseModel):
    """Page selection.  Pagination only applies when both values are non-zero."""

    page_size: Optional[int] = None
    page_number: Optional[int] = Field(default=None, description="1-based page number")


class PageRead(BaseModel):
    items: list[BookingRead]
    page_count: int
    has_next: bool
