"""Field rules a User must satisfy before it reaches the store."""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

from ..domain.user import User
from ..exceptions import UserValidationError
from ..i18n import MessageSource

# (attribute, wire name, max length or None, check email shape)
FIELD_RULES: Tuple[Tuple[str, str, Optional[int], bool], ...] = (
    ("full_name", "fullName", 60, False),
    ("phone", "phone", 15, False),
    ("email", "email", 60, True),
    ("password", "password", None, False),
)


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _violation(value: Optional[str], field: str, max_len: Optional[int], email: bool) -> Optional[Tuple[str, tuple]]:
    if value is None:
        return f"NotNull.user.{field}", ()
    if not value.strip():
        return f"NotBlank.user.{field}", ()
    if max_len is not None and len(value) > max_len:
        return f"Size.user.{field}", (max_len,)
    if email and not _is_email(value):
        return f"Email.user.{field}", ()
    return None


def validate_user(payload: User, messages: MessageSource, locale: str | None = None) -> Dict[str, str]:
    """Return ``{wire_field: message}`` for every violated field (empty if valid)."""
    errors: Dict[str, str] = {}
    for attr, field, max_len, email in FIELD_RULES:
        found = _violation(getattr(payload, attr), field, max_len, email)
        if found is not None:
            code, params = found
            errors[field] = messages.get_message(code, params, locale)
    return errors


def ensure_valid(payload: User, messages: MessageSource, locale: str | None = None) -> None:
    errors = validate_user(payload, messages, locale)
    if errors:
        raise UserValidationError(errors)
