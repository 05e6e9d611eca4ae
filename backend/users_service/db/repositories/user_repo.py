"""SQLAlchemy-backed User repository returning dataclasses."""
from __future__ import annotations

import uuid
from contextlib import contextmanager
from datetime import date
from typing import Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.user import UserModel
from ...domain.user import User


def _to_dc(m: UserModel) -> User:
    return User(
        id=uuid.UUID(m.id),
        full_name=m.full_name,
        phone=m.phone,
        email=m.email,
        password=m.password,
        create_date=m.create_date,
        update_date=m.update_date,
    )


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        try:
            yield
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def list(self) -> List[User]:
        return [_to_dc(m) for m in self.session.scalars(select(UserModel)).all()]

    def get(self, user_id: uuid.UUID) -> Optional[User]:
        m = self.session.get(UserModel, str(user_id))
        return _to_dc(m) if m else None

    def create(self, data: User) -> User:
        """Insert a new row; the store assigns the id and both dates."""
        today = date.today()
        m = UserModel(
            id=str(uuid.uuid4()),
            full_name=data.full_name,
            phone=data.phone,
            email=data.email,
            password=data.password,
            create_date=today,
            update_date=today,
        )
        with self._transaction():
            self.session.add(m)
        return _to_dc(m)

    def save(self, data: User) -> User:
        """Replace the mutable columns of the row identified by ``data.id``.

        ``create_date`` is never rewritten once set.
        """
        m = self.session.get(UserModel, str(data.id))
        if m is None:
            m = UserModel(id=str(data.id), create_date=data.create_date or date.today())
            self.session.add(m)
        m.full_name = data.full_name
        m.phone = data.phone
        m.email = data.email
        m.password = data.password
        m.update_date = data.update_date or date.today()
        with self._transaction():
            self.session.flush()
        return _to_dc(m)

    def delete_by_id(self, user_id: uuid.UUID) -> bool:
        m = self.session.get(UserModel, str(user_id))
        if not m:
            return False
        with self._transaction():
            self.session.delete(m)
        return True

    def delete(self, data: User) -> bool:
        if data.id is None:
            return False
        return self.delete_by_id(data.id)
