"""Validation rules for user requests.

The functions here are pure: they never touch the database and never
raise.  Each returns the list of ``FieldError`` found in a request,
empty when the request is valid.  Every field is checked
independently so that a request with several bad fields reports all
of them.

Within one field only the first failing rule is reported.  A blank
password therefore yields "Password is required" alone, not that plus
the minimum-length message.

Request schemas accept any JSON type for these fields, so a value of
the wrong type is reported here next to the other fields' violations
instead of aborting the whole request.
"""

from typing import Any, List, Optional

from email_validator import EmailNotValidError, validate_email

from ..schemas.error import FieldError
from ..schemas.user import UserCreate, UserUpdate

EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 6
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Email should be valid"
EMAIL_TOO_LONG = f"Email must be at most {EMAIL_MAX_LENGTH} characters"
EMAIL_NOT_TEXT = "Email must be a string"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_SHORT = f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
PASSWORD_NOT_TEXT = "Password must be a string"
NAME_REQUIRED = "Name is required"
NAME_LENGTH = f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
NAME_NOT_TEXT = "Name must be a string"


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_email(value: str) -> bool:
    """Syntax check only; no DNS lookup is made."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def check_email(value: Any, required: bool) -> Optional[str]:
    """Return the violation message for ``value`` or ``None`` if it is acceptable.

    When ``required`` is false a missing value is accepted, but a
    present-and-blank one is not a valid address.
    """
    if value is None:
        return EMAIL_REQUIRED if required else None
    if not isinstance(value, str):
        return EMAIL_NOT_TEXT
    if not value.strip():
        return EMAIL_REQUIRED if required else EMAIL_INVALID
    if len(value) > EMAIL_MAX_LENGTH:
        return EMAIL_TOO_LONG
    if not is_valid_email(value):
        return EMAIL_INVALID
    return None


def check_password(value: Any) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        return PASSWORD_NOT_TEXT
    if is_blank(value):
        return PASSWORD_REQUIRED
    if len(value) < PASSWORD_MIN_LENGTH:
        return PASSWORD_TOO_SHORT
    return None


def check_name(value: Any, required: bool) -> Optional[str]:
    if value is None:
        return NAME_REQUIRED if required else None
    if not isinstance(value, str):
        return NAME_NOT_TEXT
    if required and not value.strip():
        return NAME_REQUIRED
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        return NAME_LENGTH
    return None


def _collect(checks: List[tuple]) -> List[FieldError]:
    errors: List[FieldError] = []
    for field, value, message in checks:
        if message is not None:
            errors.append(FieldError(field=field, rejected_value=value, message=message))
    return errors


def validate_create_request(request: UserCreate) -> List[FieldError]:
    """Check a create request; email, password and name are all required."""
    return _collect(
        [
            ("email", request.email, check_email(request.email, required=True)),
            ("password", request.password, check_password(request.password)),
            ("name", request.name, check_name(request.name, required=True)),
        ]
    )


def validate_update_request(request: UserUpdate) -> List[FieldError]:
    """Check a partial update; only the fields that are present are validated."""
    return _collect(
        [
            ("email", request.email, check_email(request.email, required=False)),
            ("name", request.name, check_name(request.name, required=False)),
        ]
    )
