"""
User DTO
========

Pydantic models for user API requests and responses.

``UserCreateRequest`` is the record schema: required fields are checked
before anything reaches the store. ``UserUpdateRequest`` accepts any subset
of the same fields for partial updates.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from users_api.domain.models.user import User

# Largest integer BSON can store (signed 64-bit)
MAX_BSON_INT = 2**63 - 1


class UserCreateRequest(BaseModel):
    """DTO for creating a user."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Jane",
                "lastName": "Smith",
                "email": "jane.smith@example.com",
                "age": 30,
                "password": "pass456",
                "role": "admin"
            }
        }
    )

    firstName: str = Field(..., min_length=1, description="First name")
    lastName: str = Field(..., min_length=1, description="Last name")
    email: str = Field(..., min_length=1, description="Email address (not checked for format or uniqueness)")
    age: int = Field(..., ge=0, le=MAX_BSON_INT, description="Age in years")
    password: Optional[str] = Field(None, description="Plaintext password")
    role: Optional[str] = Field(None, description="Free-form role, e.g. user, admin, moderator")


class UserUpdateRequest(BaseModel):
    """DTO for partially updating a user. Only supplied fields are applied."""
    model_config = ConfigDict(json_schema_extra={"example": {"age": 31}})

    firstName: Optional[str] = Field(None, min_length=1)
    lastName: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    age: Optional[int] = Field(None, ge=0, le=MAX_BSON_INT)
    password: Optional[str] = None
    role: Optional[str] = None


class UserResponse(BaseModel):
    """DTO for user data."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "6650f1c2a7b3c9d4e5f60718",
                "firstName": "Jane",
                "lastName": "Smith",
                "email": "jane.smith@example.com",
                "age": 30,
                "password": "pass456",
                "role": "admin"
            }
        },
    )

    id: str = Field(..., alias="_id")
    firstName: str
    lastName: str
    email: str
    age: int
    password: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id, **user.fields())


class UserDeleteResponse(BaseModel):
    """DTO for delete confirmation."""
    message: str


class ErrorResponse(BaseModel):
    """DTO for error bodies."""
    error: str
