"""
Pydantic models for user data.

Request fields are all optional at the schema level: whether a field
is required, and the message used when it is missing, is decided by
``validators.user_validator`` so that every bad field of a request is
reported together.  The request fields accept any JSON type for the
same reason: a wrongly typed value is reported by the validator next
to the other fields instead of failing the body as a whole.  Response
models never include the password.
"""

from typing import Any, List, Optional

from pydantic import Field

from .error import CamelModel


class UserCreate(CamelModel):
    """Schema for registering a user.  All three fields are required."""

    email: Optional[Any] = Field(None, examples=["user@example.com"])
    password: Optional[Any] = Field(None, examples=["password123"])
    name: Optional[Any] = Field(None, examples=["Ann"])


class UserUpdate(CamelModel):
    """Schema for a partial update.

    Omitted fields keep their stored value.  The password cannot be
    changed through this schema; unknown keys in the body are ignored.
    """

    email: Optional[Any] = Field(None, examples=["newemail@example.com"])
    name: Optional[Any] = Field(None, examples=["Annie"])


class UserRead(CamelModel):
    """Schema for reading a user from the API."""

    id: int
    email: str
    name: str


class UserPage(CamelModel):
    """A slice of the ordered user set plus paging metadata."""

    content: List[UserRead]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool
    empty: bool
