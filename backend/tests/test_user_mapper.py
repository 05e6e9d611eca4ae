"""User -> UserDTO projection."""
import uuid
from dataclasses import fields
from datetime import date

from users_service.domain.user import User, UserDTO
from users_service.domain.user_mapper import to_dto


def test_copies_public_fields_and_drops_password():
    user = User(
        id=uuid.uuid4(),
        full_name="Alice",
        phone="111",
        email="a@x.com",
        password="secret",
        create_date=date(2024, 1, 1),
        update_date=date(2024, 2, 1),
    )
    dto = to_dto(user)

    assert isinstance(dto, UserDTO)
    assert "password" not in {f.name for f in fields(dto)}
    assert not hasattr(dto, "password")
    assert (dto.id, dto.full_name, dto.phone, dto.email, dto.create_date, dto.update_date) == (
        user.id, "Alice", "111", "a@x.com", date(2024, 1, 1), date(2024, 2, 1),
    )


def test_unset_fields_propagate_as_none():
    dto = to_dto(User(full_name="Only Name"))
    assert dto.full_name == "Only Name"
    assert dto.id is None and dto.email is None and dto.create_date is None
