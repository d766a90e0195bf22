"""
Pydantic models for user data.

Dates of birth travel as ``YYYY-MM-DD`` strings under the ``dob`` key.
Create and update responses carry ``id``, ``name`` and ``dob``; read
responses add the derived ``age``.
"""

from pydantic import BaseModel, Field

from ..core.dates import format_dob
from ..services.user_service import User


class UserBase(BaseModel):
    name: str = Field(..., examples=["Ada Lovelace"])
    dob: str = Field(..., description="Date of birth, YYYY-MM-DD", examples=["1990-01-10"])


class UserCreate(UserBase):
    """Schema for registering a user."""


class UserUpdate(UserBase):
    """Schema for replacing a user's name and date of birth.

    Both fields are required; the id in the path is immutable.
    """


class UserRead(UserBase):
    """Schema returned by create and update."""

    id: int

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        return cls(id=user.id, name=user.name, dob=format_dob(user.date_of_birth))


class UserReadWithAge(UserRead):
    """Schema returned by get and list, including the derived age."""

    age: int = Field(..., ge=0)

    @classmethod
    def from_user(cls, user: User) -> "UserReadWithAge":
        return cls(
            id=user.id,
            name=user.name,
            dob=format_dob(user.date_of_birth),
            age=user.age,
        )
