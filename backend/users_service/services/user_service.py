"""User service encapsulating business rules."""
from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date
from typing import List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from ..db.repositories.user_repo import UserRepository
from ..domain.user import User, UserDTO
from ..domain.user_mapper import to_dto
from ..exceptions import UserNotFound
from ..i18n import MessageSource, messages as default_messages
from .user_validator import ensure_valid

NOT_FOUND_CODE = "user.message.notfound"


class UserService:
    def __init__(
        self,
        session: Session,
        messages: Optional[MessageSource] = None,
        locale: Optional[str] = None,
    ) -> None:
        self.repo = UserRepository(session)
        self.messages = messages or default_messages
        self.locale = locale

    def _not_found(self, user_id: uuid.UUID) -> UserNotFound:
        message = self.messages.get_message(NOT_FOUND_CODE, [str(user_id)], self.locale)
        return UserNotFound(message, user_id)

    def list_users(self) -> List[UserDTO]:
        return [to_dto(u) for u in self.repo.list()]

    def get_user(self, user_id: uuid.UUID) -> UserDTO:
        user = self.repo.get(user_id)
        if user is None:
            logger.debug("user {} not found", user_id)
            raise self._not_found(user_id)
        return to_dto(user)

    def create_user(self, payload: User) -> User:
        """Validate and persist a new user; returns the full stored entity."""
        ensure_valid(payload, self.messages, self.locale)
        created = self.repo.create(payload)
        logger.info("created user {}", created.id)
        return created

    def update_user(self, user_id: uuid.UUID, payload: User) -> User:
        """Replace a stored user, keeping its email, full name and phone.

        Only the password (and the refreshed update date) can change through
        this path; contact fields always come from the existing record.
        """
        ensure_valid(payload, self.messages, self.locale)
        existing = self.repo.get(user_id)
        if existing is None:
            raise self._not_found(user_id)

        merged = replace(
            payload,
            id=existing.id,
            email=existing.email,
            full_name=existing.full_name,
            phone=existing.phone,
            create_date=existing.create_date,
            update_date=date.today(),
        )
        saved = self.repo.save(merged)
        logger.info("updated user {}", user_id)
        return saved

    def delete_user(self, user_id: uuid.UUID) -> None:
        if self.repo.delete_by_id(user_id):
            logger.info("deleted user {}", user_id)

    def delete(self, user: User) -> None:
        if self.repo.delete(user):
            logger.info("deleted user {}", user.id)
