"""
Error taxonomy of the user service.

Business-rule failures are raised where they are detected and are
never retried.  Each exception carries a stable ``code``; translating
a code into an HTTP status is the job of ``api.errors``.
"""

from typing import List, Optional

from ..schemas.error import FieldError


class UserManagementError(Exception):
    """Base class for all expected failures of the service."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserNotFoundError(UserManagementError):
    code = "USER_NOT_FOUND"

    @classmethod
    def for_id(cls, user_id: int) -> "UserNotFoundError":
        return cls(f"User not found with id: {user_id}")

    @classmethod
    def for_email(cls, email: str) -> "UserNotFoundError":
        return cls(f"User not found with email: {email}")


class UserAlreadyExistsError(UserManagementError):
    code = "USER_ALREADY_EXISTS"

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User already exists with email: {email}")


class ValidationFailedError(UserManagementError):
    """One or more field violations.  Carries all of them, not just the first."""

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        field_errors: List[FieldError],
        message: Optional[str] = None,
    ):
        self.field_errors = list(field_errors)
        super().__init__(message or "Validation failed for one or more fields")


class InvalidSortPropertyError(UserManagementError):
    code = "INVALID_SORT_PROPERTY"

    def __init__(self, prop: str, allowed: List[str]):
        self.prop = prop
        super().__init__(
            f"Invalid sort property: {prop}. Valid properties are: {', '.join(allowed)}"
        )


class InvalidArgumentError(UserManagementError):
    code = "INVALID_ARGUMENT"
