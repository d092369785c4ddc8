"""
Data access for user accounts.

Every method opens its own connection and closes it before returning,
so repositories hold no state between calls.  Rows are returned as
plain dictionaries.
"""

from typing import Any, Dict, List, Optional

from booking_api.app.core.db import get_connection


class UserRepository:
    """SQLite queries against the ``users`` table."""

    @classmethod
    def count(cls) -> int:
        conn = get_connection()
        try:
            row = conn.execute("SELECT COUNT(*) AS count FROM users").fetchone()
            return row["count"]
        finally:
            conn.close()

    @classmethod
    def find_by_id(cls, user_id: int) -> Optional[Dict[str, Any]]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, username, password, role FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
            return dict(row) if row else None
        finally:
            conn.close()

    @classmethod
    def find_by_username(cls, username: str) -> Optional[Dict[str, Any]]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, username, password, role FROM users WHERE username = ?",
                (username,),
            ).fetchone()
            return dict(row) if row else None
        finally:
            conn.close()

    @classmethod
    def find_all(cls) -> List[Dict[str, Any]]:
        conn = get_connection()
        try:
            rows = conn.execute("SELECT id, username, role FROM users ORDER BY id").fetchall()
            return [dict(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    def create(cls, username: str, password_hash: str, role: str) -> int:
        """Insert a user and return its identifier.

        Raises ``sqlite3.IntegrityError`` if the username is taken.
        """
        conn = get_connection()
        try:
            cursor = conn.execute(
                "INSERT INTO users (username, password, role) VALUES (?, ?, ?)",
                (username, password_hash, role),
            )
            conn.commit()
            return cursor.lastrowid
        finally:
            conn.close()

    @classmethod
    def update_role(cls, user_id: int, role: str) -> bool:
        """Change a user's role.  Returns ``False`` if no such user exists."""
        conn = get_connection()
        try:
            cursor = conn.execute("UPDATE users SET role = ? WHERE id = ?", (role, user_id))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()
