"""Users blueprint (CRUD)."""
from __future__ import annotations

import uuid

from flask import Blueprint, abort, request
from sqlalchemy.orm import Session

from ...db.session import db
from ...errors import no_content, ok
from ...services.user_service import UserService
from ..locale import request_locale
from .schemas import UserCreatedOut, UserIn, UserListOut, UserOut


bp = Blueprint("users", __name__)


def _service() -> UserService:
    assert db.Session is not None, "DB session is not initialized"
    session: Session = db.Session()
    return UserService(session, locale=request_locale())


def _parse_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError:
        abort(400, description=f"invalid user id: {raw!r}")


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


@bp.get("")
def list_users():
    svc = _service()
    return ok(_dump(UserListOut(users=[UserOut.model_validate(u) for u in svc.list_users()])))


@bp.get("/<user_id>")
def get_user(user_id: str):
    uid = _parse_id(user_id)
    svc = _service()
    return ok(_dump(UserOut.model_validate(svc.get_user(uid))))


@bp.post("")
def create_user():
    payload = UserIn.model_validate_json(request.get_data())
    svc = _service()
    user = svc.create_user(payload.to_domain())
    return ok(_dump(UserCreatedOut.model_validate(user)), 201)


@bp.put("/<user_id>")
def update_user(user_id: str):
    uid = _parse_id(user_id)
    payload = UserIn.model_validate_json(request.get_data())
    svc = _service()
    svc.update_user(uid, payload.to_domain())
    return no_content()


@bp.delete("/<user_id>")
def delete_user(user_id: str):
    uid = _parse_id(user_id)
    svc = _service()
    svc.delete_user(uid)
    return no_content()
