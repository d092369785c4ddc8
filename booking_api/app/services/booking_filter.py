"""
Filtering and pagination of booking listings.

Both steps are pure functions over an in-memory sequence of
``BookingRead`` objects:

* ``compile_filter`` turns a ``BookingFilter`` into a list of
  independent predicates.  Date strings are parsed up front, so a
  malformed date fails the whole listing before any record is looked
  at.
* ``filter_bookings`` keeps the records that satisfy every predicate,
  preserving their relative order.
* ``paginate`` slices one page out of the filtered sequence and
  computes the page count and whether a next page exists.
"""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Optional, Sequence

from booking_api.app.schemas.booking import BookingFilter, BookingRead

from .results import ErrorKind, Failure, Result, Success


DATE_FORMAT = "%d-%m-%Y"
# strptime alone accepts single-digit days and months and non-ASCII digits.
_DATE_PATTERN = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")

Predicate = Callable[[BookingRead], bool]


def parse_filter_date(value: str) -> Optional[date]:
    """Parse a ``dd-MM-yyyy`` string, returning ``None`` if it is not a valid date."""
    if not _DATE_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def _is_set(value: Optional[str]) -> bool:
    return value is not None and value != ""


def _equals(attribute: str, expected: str) -> Predicate:
    return lambda booking: getattr(booking, attribute) == expected


def compile_filter(filters: BookingFilter) -> Result[List[Predicate]]:
    """Build the predicates described by ``filters``.

    Returns a ``Failure`` with ``ErrorKind.FORMAT_ERROR`` naming the
    offending field if any date bound cannot be parsed.
    """
    predicates: List[Predicate] = []

    date_bounds = (
        ("start_date_from", "start_date", lambda bound, value: bound <= value),
        ("start_date_to", "start_date", lambda bound, value: value <= bound),
        ("end_date_from", "end_date", lambda bound, value: bound <= value),
        ("end_date_to", "end_date", lambda bound, value: value <= bound),
    )
    for field, attribute, compare in date_bounds:
        raw = getattr(filters, field)
        if not _is_set(raw):
            continue
        bound = parse_filter_date(raw)
        if bound is None:
            return Failure(ErrorKind.FORMAT_ERROR, f"{field}: '{raw}' is not a valid dd-MM-yyyy date")
        predicates.append(
            lambda booking, bound=bound, attribute=attribute, compare=compare: compare(bound, getattr(booking, attribute))
        )

    # A cost bound of zero or less is treated as absent.
    if filters.cost_up is not None and filters.cost_up > 0:
        cost_up = filters.cost_up
        predicates.append(lambda booking: booking.cost_per_day <= cost_up)
    if filters.cost_down is not None and filters.cost_down > 0:
        cost_down = filters.cost_down
        predicates.append(lambda booking: booking.cost_per_day >= cost_down)

    for attribute in ("post_code", "city", "street", "username"):
        expected = getattr(filters, attribute)
        if _is_set(expected):
            predicates.append(_equals(attribute, expected))

    return Success(predicates)


def filter_bookings(bookings: Sequence[BookingRead], predicates: Sequence[Predicate]) -> List[BookingRead]:
    """Return the bookings matching every predicate, in their original order."""
    return [booking for booking in bookings if all(predicate(booking) for predicate in predicates)]


@dataclass(frozen=True)
class Page:
    items: List[BookingRead]
    page_count: int
    has_next: bool


def paginate(items: Sequence[BookingRead], page_size: Optional[int], page_number: Optional[int]) -> Page:
    """Cut page ``page_number`` (1-based) of ``page_size`` records out of ``items``.

    Rules:

    * without a page size or page number (``None`` or ``0``) the whole
      sequence is returned with ``page_count=0``;
    * a page size that is negative or larger than the number of items
      yields an empty page with ``page_count=0``;
    * a page number outside ``[1, page_count]`` yields an empty page
      that still reports ``page_count``.

    ``items`` is never modified.
    """
    total = len(items)
    if not page_size or not page_number:
        return Page(items=list(items), page_count=0, has_next=False)
    if page_size < 0 or page_size > total:
        return Page(items=[], page_count=0, has_next=False)

    page_count = math.ceil(total / page_size)
    if not 1 <= page_number <= page_count:
        return Page(items=[], page_count=page_count, has_next=False)

    start = (page_number - 1) * page_size
    end = min(page_number * page_size, total)
    return Page(items=list(items[start:end]), page_count=page_count, has_next=page_number != page_count)
