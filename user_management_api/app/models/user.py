"""The user entity as stored in the ``users`` table."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """A stored user.  ``id`` is ``None`` until the row is inserted."""

    email: str
    password: str
    name: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> User:
        return cls(
            id=row["id"],
            email=row["email"],
            password=row["password"],
            name=row["name"],
        )


__all__ = ["User"]
