"""
User endpoints for API v1.

Provide listing, lookup, registration, partial update and deletion of
users.  Handlers only decode the request and call ``UserService``;
errors raised by the service are turned into responses by
``api.errors``.  There is no authentication on these routes.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from user_management_api.app.schemas.error import ErrorResponse, ValidationErrorResponse
from user_management_api.app.schemas.user import UserCreate, UserPage, UserRead, UserUpdate
from user_management_api.app.services.user_service import UserService

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}
INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}


@router.get("", response_model=UserPage, responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}})
async def list_users(
    page: int = Query(0, description="Zero-based page index"),
    size: Optional[int] = Query(None, description="Page size (default 20)"),
    sort: Optional[List[str]] = Query(
        None,
        description="Sort criteria as property[,asc|desc]; repeatable. "
        "Allowed properties: id, email, name.",
    ),
) -> UserPage:
    """Return a page of users.

    An unknown sort property falls back to sorting by ``id``
    ascending instead of failing the request.
    """
    return await UserService.list_users(page=page, size=size, sort=sort)


@router.get("/email/{email}", response_model=UserRead, responses=NOT_FOUND)
async def get_user_by_email(email: str) -> UserRead:
    """Look a user up by exact email."""
    return await UserService.get_user_by_email(email)


@router.get("/{user_id}", response_model=UserRead, responses=NOT_FOUND)
async def get_user(user_id: int) -> UserRead:
    return await UserService.get_user_by_id(user_id)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={**INVALID, **CONFLICT},
)
async def create_user(user: UserCreate) -> UserRead:
    """Register a new user.

    Returns 400 with every invalid field, or 409 if the email is
    already in use.
    """
    return await UserService.create_user(user)


@router.put("/{user_id}", response_model=UserRead, responses={**INVALID, **NOT_FOUND, **CONFLICT})
async def update_user(user_id: int, body: UserUpdate) -> UserRead:
    """Update a user's email and/or name.  Omitted fields are left unchanged."""
    return await UserService.update_user(user_id, body)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_user(user_id: int) -> None:
    """Delete a user permanently."""
    await UserService.delete_user(user_id)
    return None
