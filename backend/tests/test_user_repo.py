"""UserRepository against an in-memory SQLite store."""
import uuid
from datetime import date, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from users_service.db.repositories.user_repo import UserRepository


@pytest.fixture
def repo(session):
    return UserRepository(session)


def test_create_assigns_id_and_dates(repo, make_user):
    created = repo.create(make_user())
    assert isinstance(created.id, uuid.UUID)
    assert created.create_date == created.update_date == date.today()
    assert repo.get(created.id).email == "alice@mail.com"


def test_create_ignores_client_supplied_identity(repo, make_user):
    supplied = uuid.uuid4()
    created = repo.create(make_user(id=supplied, create_date=date(2000, 1, 1)))
    assert created.id != supplied
    assert created.create_date == date.today()


def test_duplicate_email_is_rejected_and_session_stays_usable(repo, make_user):
    repo.create(make_user())
    with pytest.raises(IntegrityError):
        repo.create(make_user(full_name="Other"))
    assert len(repo.list()) == 1


def test_save_keeps_create_date(repo, make_user):
    created = repo.create(make_user())
    later = date.today() + timedelta(days=3)
    created.password = "changed"
    created.create_date = date(1999, 1, 1)
    created.update_date = later

    saved = repo.save(created)

    assert saved.password == "changed"
    assert saved.create_date == date.today()
    assert saved.update_date == later


def test_delete_by_id_reports_presence(repo, make_user):
    created = repo.create(make_user())
    assert repo.delete_by_id(created.id) is True
    assert repo.delete_by_id(created.id) is False
    assert repo.get(created.id) is None


def test_delete_by_entity(repo, make_user):
    created = repo.create(make_user())
    assert repo.delete(created) is True
    assert repo.list() == []
