"""
Pydantic models for error responses.

Every failure leaves the API as an ``ErrorResponse``; validation
failures carry the full list of field violations in a
``ValidationErrorResponse``.  Field names are serialised in camelCase
(``rejectedValue``, ``fieldErrors``).
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that serialises field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldError(CamelModel):
    """A single rejected field: its name, the submitted value and why."""

    field: str = Field(..., examples=["email"])
    rejected_value: Optional[Any] = Field(None, examples=["invalid-email"])
    message: str = Field(..., examples=["Email should be valid"])


class ErrorResponse(CamelModel):
    code: str = Field(..., examples=["USER_NOT_FOUND"])
    message: str = Field(..., examples=["User not found with id: 1"])
    timestamp: datetime
    path: Optional[str] = Field(None, examples=["/api/v1/users/1"])


class ValidationErrorResponse(ErrorResponse):
    code: str = Field("VALIDATION_ERROR", examples=["VALIDATION_ERROR"])
    field_errors: List[FieldError] = Field(default_factory=list)
