"""User DTO triad.

UserDto is the read projection and may expose id and audit timestamps.
CreateUserDto / UpdateUserDto carry only caller-writable fields; they never
mention id, created_at, updated_at or is_deleted.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .fields import NAME_PATTERN


class UserDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    first_name: str
    last_name: str
    email: str
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    full_name: str


class CreateUserDto(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=2, max_length=200, pattern=NAME_PATTERN)
    last_name: str = Field(..., min_length=2, max_length=200, pattern=NAME_PATTERN)
    # email-validator rejects addresses longer than 254 characters
    email: EmailStr


class UpdateUserDto(BaseModel):
    """Partial update: only fields explicitly set (and not None) are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: Optional[str] = Field(None, min_length=2, max_length=200, pattern=NAME_PATTERN)
    last_name: Optional[str] = Field(None, min_length=2, max_length=200, pattern=NAME_PATTERN)
