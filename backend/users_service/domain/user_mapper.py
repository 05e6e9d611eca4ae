"""Projection of User entities onto their public DTO."""
from __future__ import annotations

from .user import User, UserDTO


def to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        full_name=user.full_name,
        phone=user.phone,
        email=user.email,
        create_date=user.create_date,
        update_date=user.update_date,
    )
