"""Pick the message locale for the current request."""
from __future__ import annotations

from flask import current_app, request

from ..i18n import messages


def request_locale() -> str:
    for lang in request.accept_languages.values():
        if messages.supports(lang):
            return lang
    return current_app.config.get("DEFAULT_LOCALE", "en")
