"""User ORM model (table ``users``)."""
from __future__ import annotations

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from ..base import Base


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column("user_id", String(36), primary_key=True)  # UUID string
    full_name: Mapped[str] = mapped_column(String(60), nullable=False)
    phone: Mapped[str] = mapped_column(String(15), nullable=False)
    email: Mapped[str] = mapped_column(String(60), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    create_date: Mapped[date] = mapped_column(Date, nullable=False)
    update_date: Mapped[date] = mapped_column(Date, nullable=False)
