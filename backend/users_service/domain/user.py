"""Domain dataclasses for User records (DB-agnostic)."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(slots=True)
class User:
    full_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    id: Optional[uuid.UUID] = None
    create_date: Optional[date] = None
    update_date: Optional[date] = None

    # identity is the id alone, as for the stored row
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)


@dataclass(frozen=True, slots=True)
class UserDTO:
    """Public view of a User: everything except the password."""

    id: Optional[uuid.UUID]
    full_name: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    create_date: Optional[date]
    update_date: Optional[date]
