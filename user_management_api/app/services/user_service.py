"""
Business logic for users.

``UserService`` validates requests, enforces email uniqueness,
sanitises paging and sorting, and maps stored ``User`` entities to
``UserRead`` responses.  Every operation runs as one unit of work:
one connection, at most one commit, nothing cached between calls.

Passwords are stored exactly as submitted.  Hashing is not
implemented yet.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from ..core.config import settings
from ..core.db import get_connection
from ..core.exceptions import (
    InvalidSortPropertyError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationFailedError,
)
from ..models.user import User
from ..repositories.user_repository import SORTABLE_COLUMNS, UserRepository
from ..schemas.user import UserCreate, UserPage, UserRead, UserUpdate
from ..validators.user_validator import validate_create_request, validate_update_request

logger = logging.getLogger(__name__)

DEFAULT_ORDER: List[Tuple[str, str]] = [("id", "ASC")]
SORT_DIRECTIONS = {"asc": "ASC", "desc": "DESC"}


@contextmanager
def unit_of_work() -> Iterator[UserRepository]:
    """Yield a repository bound to a fresh connection.

    Commits when the block completes, rolls back when it raises and
    always closes the connection.
    """
    conn = get_connection()
    try:
        yield UserRepository(conn)
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def parse_sort(sort: Optional[List[str]]) -> List[Tuple[str, str]]:
    """Turn ``["name,desc", "id"]`` style parameters into ``(column, direction)`` pairs.

    Each entry is ``property[,property...][,direction]``.  A property
    outside ``SORTABLE_COLUMNS`` (including ``password``) or an
    unrecognised direction makes the whole sort invalid: the result is
    ``id`` ascending, or ``InvalidSortPropertyError`` when
    ``settings.strict_sort`` is on.
    """
    orders: List[Tuple[str, str]] = []
    for entry in sort or []:
        tokens = [token.strip() for token in entry.split(",") if token.strip()]
        direction = "ASC"
        if len(tokens) > 1 and tokens[-1].lower() in SORT_DIRECTIONS:
            direction = SORT_DIRECTIONS[tokens.pop().lower()]
        for prop in tokens:
            if prop not in SORTABLE_COLUMNS:
                if settings.strict_sort:
                    raise InvalidSortPropertyError(prop, SORTABLE_COLUMNS)
                logger.info("Ignoring sort %s: invalid property %r", sort, prop)
                return list(DEFAULT_ORDER)
            orders.append((prop, direction))
    return orders or list(DEFAULT_ORDER)


class UserService:
    """Operations on users exposed to the API layer."""

    @staticmethod
    def _to_read(user: User) -> UserRead:
        return UserRead(id=user.id, email=user.email, name=user.name)

    @classmethod
    async def list_users(
        cls,
        page: int = 0,
        size: Optional[int] = None,
        sort: Optional[List[str]] = None,
    ) -> UserPage:
        """Return one page of users.

        ``page`` is zero-based.  Totals and the ``first``/``last``/
        ``empty`` flags are derived from the total count, the page
        number and the page size; the store is not queried again.

        Out-of-range paging never fails the request: a negative page
        becomes 0, a missing or non-positive size becomes
        ``settings.default_page_size`` and a size above
        ``settings.max_page_size`` is capped to it.
        """
        if page < 0:
            page = 0
        if size is None or size < 1:
            size = settings.default_page_size
        elif size > settings.max_page_size:
            logger.debug("Capping page size %s to %s", size, settings.max_page_size)
            size = settings.max_page_size
        orders = parse_sort(sort)
        with unit_of_work() as repo:
            users, total = repo.find_page(page, size, orders)
        total_pages = -(-total // size)
        content = [cls._to_read(user) for user in users]
        return UserPage(
            content=content,
            page_number=page,
            page_size=size,
            total_elements=total,
            total_pages=total_pages,
            first=page == 0,
            last=page == total_pages - 1 or total == 0,
            empty=not content,
        )

    @classmethod
    async def get_user_by_id(cls, user_id: int) -> UserRead:
        with unit_of_work() as repo:
            user = repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError.for_id(user_id)
        return cls._to_read(user)

    @classmethod
    async def get_user_by_email(cls, email: str) -> UserRead:
        with unit_of_work() as repo:
            user = repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError.for_email(email)
        return cls._to_read(user)

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Create a user after validation and the email uniqueness check.

        Raises ``ValidationFailedError`` with every bad field, then
        ``UserAlreadyExistsError`` if the email is taken.
        """
        errors = validate_create_request(data)
        if errors:
            raise ValidationFailedError(errors)
        with unit_of_work() as repo:
            if repo.exists_by_email(data.email):
                logger.info("Rejected registration: email %s already in use", data.email)
                raise UserAlreadyExistsError(data.email)
            user = repo.insert(User(email=data.email, password=data.password, name=data.name))
        logger.info("Created user %s", user.id)
        return cls._to_read(user)

    @classmethod
    async def update_user(cls, user_id: int, data: UserUpdate) -> UserRead:
        """Apply a partial update.

        Only ``email`` and ``name`` can change, and only when supplied.
        Keeping one's own email is not a conflict.
        """
        with unit_of_work() as repo:
            existing = repo.find_by_id(user_id)
            if existing is None:
                raise UserNotFoundError.for_id(user_id)
            errors = validate_update_request(data)
            if errors:
                raise ValidationFailedError(errors)
            if (
                data.email is not None
                and data.email != existing.email
                and repo.exists_by_email(data.email)
            ):
                logger.info("Rejected update of user %s: email %s already in use", user_id, data.email)
                raise UserAlreadyExistsError(data.email)
            merged = User(
                id=existing.id,
                email=data.email if data.email is not None else existing.email,
                password=existing.password,
                name=data.name if data.name is not None else existing.name,
            )
            user = repo.update(merged)
        logger.info("Updated user %s", user_id)
        return cls._to_read(user)

    @classmethod
    async def delete_user(cls, user_id: int) -> None:
        with unit_of_work() as repo:
            if not repo.exists_by_id(user_id):
                raise UserNotFoundError.for_id(user_id)
            repo.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)
