"""
Pydantic models for user data.

Defines the role enumeration and the schemas for registering,
authenticating and reading users.  Password hashes are never returned
through the API.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Role(str, Enum):
    """Access level of a user.

    ``USER`` is the restricted role: such users see and manage only
    their own bookings.  ``ADMIN`` is the elevated role with access to
    every booking.
    """

    USER = "USER"
    ADMIN = "ADMIN"

    @property
    def is_restricted(self) -> bool:
        return self is Role.USER


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, max_length=64, examples=["alice"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserLogin(BaseModel):
    username: str
    password: str


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    role: Role

    model_config = {
        "from_attributes": True,
    }


class RoleUpdate(BaseModel):
    role: Role


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
