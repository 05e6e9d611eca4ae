"""UserService: CRUD semantics, merge-from-existing updates, not-found signaling."""
import uuid
from datetime import date

import pytest

from users_service.db.repositories.user_repo import UserRepository
from users_service.domain.user import User, UserDTO
from users_service.exceptions import UserNotFound, UserValidationError
from users_service.services.user_service import UserService


@pytest.fixture
def service(session):
    return UserService(session)


@pytest.fixture
def repo(session):
    return UserRepository(session)


def test_list_on_empty_store_is_empty(service):
    assert service.list_users() == []


def test_list_returns_dtos(service, make_user):
    service.create_user(make_user())
    service.create_user(make_user(email="bob@mail.com"))
    users = service.list_users()
    assert len(users) == 2
    assert all(isinstance(u, UserDTO) for u in users)


def test_create_returns_full_entity(service, make_user):
    created = service.create_user(make_user())
    assert created.id is not None
    assert created.password == "s3cret"
    assert created.create_date == created.update_date == date.today()


def test_create_with_invalid_payload_persists_nothing(service, make_user):
    with pytest.raises(UserValidationError) as exc_info:
        service.create_user(make_user(full_name="", email="not-an-email"))
    assert set(exc_info.value.errors) == {"fullName", "email"}
    assert service.list_users() == []


def test_get_user_returns_dto(service, make_user):
    created = service.create_user(make_user())
    dto = service.get_user(created.id)
    assert dto.id == created.id
    assert dto.email == "alice@mail.com"
    assert not hasattr(dto, "password")


def test_get_missing_user_raises_not_found(service):
    missing = uuid.uuid4()
    with pytest.raises(UserNotFound) as exc_info:
        service.get_user(missing)
    assert str(missing) in exc_info.value.message
    assert exc_info.value.user_id == missing


def test_update_missing_user_raises_not_found(service, make_user):
    missing = uuid.uuid4()
    with pytest.raises(UserNotFound, match=str(missing)):
        service.update_user(missing, make_user())


def test_not_found_message_is_localized(session):
    missing = uuid.uuid4()
    with pytest.raises(UserNotFound) as exc_info:
        UserService(session, locale="pt_BR").get_user(missing)
    assert exc_info.value.message == f"Usuário com id {missing} não encontrado"


def test_update_keeps_contact_fields_and_takes_new_password(service, repo):
    alice = service.create_user(User(full_name="Alice", phone="111", email="a@x.com", password="old"))

    service.update_user(
        alice.id, User(full_name="Bob", phone="222", email="b@x.com", password="new")
    )

    stored = repo.get(alice.id)
    assert stored.id == alice.id
    assert (stored.full_name, stored.phone, stored.email) == ("Alice", "111", "a@x.com")
    assert stored.password == "new"
    assert stored.update_date == date.today()
    assert stored.create_date == alice.create_date
    assert stored.update_date >= stored.create_date


def test_update_with_invalid_payload_changes_nothing(service, repo, make_user):
    created = service.create_user(make_user())
    with pytest.raises(UserValidationError):
        service.update_user(created.id, make_user(password=""))
    assert repo.get(created.id).password == "s3cret"


def test_delete_by_id_is_idempotent(service, make_user):
    created = service.create_user(make_user())
    service.delete_user(created.id)
    service.delete_user(created.id)
    assert service.list_users() == []


def test_delete_absent_id_does_not_raise(service):
    service.delete_user(uuid.uuid4())


def test_delete_by_entity(service, make_user):
    created = service.create_user(make_user())
    service.delete(created)
    with pytest.raises(UserNotFound):
        service.get_user(created.id)
