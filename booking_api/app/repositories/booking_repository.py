"""
Data access for bookings.

``BookingRepository`` is the only place that issues SQL against the
``bookings`` table.  Services decide *which* lookup to use (all
bookings for administrators, owned bookings for regular users); the
repository just runs it.  Results preserve insertion order (``id``
ascending) so listings are stable between requests.
"""

from typing import Any, Dict, List, Optional

from booking_api.app.core.db import get_connection


_COLUMNS = "id, owner_id, start_date, end_date, cost_per_day, post_code, city, street"

# Columns a caller may write through ``save``.
WRITABLE_FIELDS = ("owner_id", "start_date", "end_date", "cost_per_day", "post_code", "city", "street")


class BookingRepository:
    """SQLite queries against the ``bookings`` table."""

    @classmethod
    def find_all(cls) -> List[Dict[str, Any]]:
        conn = get_connection()
        try:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM bookings ORDER BY id").fetchall()
            return [dict(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    def find_by_owner(cls, owner_id: int) -> List[Dict[str, Any]]:
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM bookings WHERE owner_id = ? ORDER BY id",
                (owner_id,),
            ).fetchall()
            return [dict(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    def find_by_id(cls, booking_id: int) -> Optional[Dict[str, Any]]:
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM bookings WHERE id = ?",
                (booking_id,),
            ).fetchone()
            return dict(row) if row else None
        finally:
            conn.close()

    @classmethod
    def save(cls, record: Dict[str, Any]) -> Dict[str, Any]:
        """Insert or update a booking and return the stored row.

        A record without an ``id`` is inserted; otherwise the existing
        row is overwritten with the writable fields of ``record``.
        Dates are stored as ISO strings.
        """
        values = {field: record[field] for field in WRITABLE_FIELDS}
        for field in ("start_date", "end_date"):
            values[field] = values[field].isoformat()
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if record.get("id") is None:
                cursor.execute(
                    f"INSERT INTO bookings ({', '.join(WRITABLE_FIELDS)}) "
                    f"VALUES ({', '.join('?' for _ in WRITABLE_FIELDS)})",
                    tuple(values.values()),
                )
                booking_id = cursor.lastrowid
            else:
                booking_id = record["id"]
                set_stmt = ", ".join(f"{field} = ?" for field in WRITABLE_FIELDS)
                cursor.execute(
                    f"UPDATE bookings SET {set_stmt}, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    (*values.values(), booking_id),
                )
            conn.commit()
            row = cursor.execute(f"SELECT {_COLUMNS} FROM bookings WHERE id = ?", (booking_id,)).fetchone()
            return dict(row)
        finally:
            conn.close()

    @classmethod
    def delete(cls, booking_id: int) -> None:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM bookings WHERE id = ?", (booking_id,))
            conn.commit()
        finally:
            conn.close()
