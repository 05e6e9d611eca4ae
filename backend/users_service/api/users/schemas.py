"""Pydantic request/response schemas for Users API."""
from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.user import User


class UserIn(BaseModel):
    """Body of POST/PUT. Field rules are enforced by the user validator, not here."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    full_name: Optional[str] = Field(default=None, alias="fullName")
    phone: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    def to_domain(self) -> User:
        return User(
            full_name=self.full_name,
            phone=self.phone,
            email=self.email,
            password=self.password,
        )


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: Optional[uuid.UUID]
    full_name: Optional[str] = Field(alias="fullName")
    phone: Optional[str]
    email: Optional[str]
    create_date: Optional[date] = Field(alias="createDate")
    update_date: Optional[date] = Field(alias="updateDate")


class UserCreatedOut(UserOut):
    """Full entity returned by POST, credential included."""

    password: Optional[str]


class UserListOut(BaseModel):
    users: list[UserOut]
