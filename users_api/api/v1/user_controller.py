"""
User Controller
===============

FastAPI controller for user CRUD endpoints.

Handlers are plain functions so FastAPI runs them in its threadpool and the
blocking MongoDB calls stay off the event loop.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from users_api.application.dto.user_dto import (
    ErrorResponse,
    UserDeleteResponse,
    UserResponse,
)
from users_api.application.services.user_service import UserService
from users_api.api.v1.dependencies import get_user_service
from users_api.domain.exceptions import (
    InvalidIdentifierError,
    StorageError,
    UserNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])

USER_NOT_FOUND = "User not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Request failed with %d: %s", status_code, message)
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    description="List all users, optionally filtered by a first/last name search and sorted by a field.",
    responses={500: {"model": ErrorResponse}},
)
def list_users(
    search: Optional[str] = Query(None, description="Case-insensitive match on firstName or lastName"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="Field to sort by"),
    order: Optional[str] = Query(None, description="'desc' for descending, ascending otherwise"),
    service: UserService = Depends(get_user_service),
):
    """List users with optional search and sort."""
    try:
        users = service.list_users(search=search, sort_by=sort_by, order=order)
    except StorageError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    return [UserResponse.from_entity(user) for user in users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    """Get a specific user by ID."""
    try:
        user = service.get_user(user_id)
    except UserNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    except (InvalidIdentifierError, StorageError) as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    return UserResponse.from_entity(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="""
    Create a new user.

    firstName, lastName, email and age are required; password and role are optional.
    The identifier is assigned by the database.
    """,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_user(
    payload: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
):
    """Create a user."""
    try:
        user = service.create_user(payload)
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StorageError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    return UserResponse.from_entity(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
    description="Apply the supplied fields to an existing user; other fields keep their values.",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def update_user(
    user_id: str,
    payload: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
):
    """Partially update a user."""
    try:
        user = service.update_user(user_id, payload)
    except UserNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    except (ValidationError, InvalidIdentifierError) as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StorageError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    return UserResponse.from_entity(user)


@router.delete(
    "/{user_id}",
    response_model=UserDeleteResponse,
    summary="Delete a user",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    """Delete a user."""
    try:
        service.delete_user(user_id)
    except UserNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    except (InvalidIdentifierError, StorageError) as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    return UserDeleteResponse(message="User deleted successfully")
