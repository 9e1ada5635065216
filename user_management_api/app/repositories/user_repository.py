"""
SQLite access for the ``users`` table.

``UserRepository`` wraps a single ``sqlite3.Connection``; it never
commits or closes it.  All queries use parameterized statements.  The
only identifiers interpolated into SQL are sort columns, which are
checked against ``SORTABLE_COLUMNS`` first.
"""

import logging
import sqlite3
from typing import List, Optional, Sequence, Tuple

from ..core.exceptions import InvalidSortPropertyError, UserAlreadyExistsError
from ..models.user import User

logger = logging.getLogger(__name__)

# Ordered for error messages.  ``password`` is deliberately absent.
SORTABLE_COLUMNS = ["id", "email", "name"]

# SQLite INTEGER is a signed 64-bit value; binding anything wider raises
# OverflowError.  No row can have an id or offset outside this range.
SQLITE_INTEGER_MIN = -(2 ** 63)
SQLITE_INTEGER_MAX = 2 ** 63 - 1


def fits_sqlite_integer(value: int) -> bool:
    return SQLITE_INTEGER_MIN <= value <= SQLITE_INTEGER_MAX


class UserRepository:
    """CRUD queries against ``users`` on a caller-supplied connection."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def find_page(
        self,
        page_number: int,
        page_size: int,
        orders: Sequence[Tuple[str, str]],
    ) -> Tuple[List[User], int]:
        """Return one page of users and the total number of users.

        ``orders`` is a sequence of ``(column, direction)`` pairs where
        direction is ``"ASC"`` or ``"DESC"``.
        """
        clauses = []
        for column, direction in orders:
            if column not in SORTABLE_COLUMNS:
                raise InvalidSortPropertyError(column, SORTABLE_COLUMNS)
            clauses.append(f"{column} {'DESC' if direction == 'DESC' else 'ASC'}")
        order_by = ", ".join(clauses) or "id ASC"
        cursor = self.conn.cursor()
        total = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()["count"]
        offset = page_number * page_size
        if not fits_sqlite_integer(offset):
            return [], total
        rows = cursor.execute(
            f"SELECT id, email, password, name FROM users ORDER BY {order_by} LIMIT ? OFFSET ?",
            (page_size, offset),
        ).fetchall()
        return [User.from_row(row) for row in rows], total

    def find_by_id(self, user_id: int) -> Optional[User]:
        if not fits_sqlite_integer(user_id):
            return None
        row = self.conn.execute(
            "SELECT id, email, password, name FROM users WHERE id = ?",
            (user_id,),
        ).fetchone()
        return User.from_row(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        row = self.conn.execute(
            "SELECT id, email, password, name FROM users WHERE email = ?",
            (email,),
        ).fetchone()
        return User.from_row(row) if row else None

    def exists_by_email(self, email: str) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM users WHERE email = ? LIMIT 1", (email,)
        ).fetchone()
        return row is not None

    def exists_by_id(self, user_id: int) -> bool:
        if not fits_sqlite_integer(user_id):
            return False
        row = self.conn.execute(
            "SELECT 1 FROM users WHERE id = ? LIMIT 1", (user_id,)
        ).fetchone()
        return row is not None

    def insert(self, user: User) -> User:
        """Insert ``user`` and return a copy carrying the assigned id.

        A concurrent writer may have taken the email after the caller's
        existence check; the UNIQUE constraint catches that case and it
        is reported as ``UserAlreadyExistsError``.
        """
        try:
            cursor = self.conn.execute(
                "INSERT INTO users (email, password, name) VALUES (?, ?, ?)",
                (user.email, user.password, user.name),
            )
        except sqlite3.IntegrityError as exc:
            self._raise_if_duplicate_email(exc, user.email)
            raise
        return User(id=cursor.lastrowid, email=user.email, password=user.password, name=user.name)

    def update(self, user: User) -> User:
        try:
            self.conn.execute(
                "UPDATE users SET email = ?, password = ?, name = ?, "
                "updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (user.email, user.password, user.name, user.id),
            )
        except sqlite3.IntegrityError as exc:
            self._raise_if_duplicate_email(exc, user.email)
            raise
        return user

    def delete_by_id(self, user_id: int) -> None:
        if not fits_sqlite_integer(user_id):
            return
        self.conn.execute("DELETE FROM users WHERE id = ?", (user_id,))

    @staticmethod
    def _raise_if_duplicate_email(exc: sqlite3.IntegrityError, email: str) -> None:
        if "users.email" in str(exc):
            logger.warning("Unique constraint rejected email %s", email)
            raise UserAlreadyExistsError(email) from exc
