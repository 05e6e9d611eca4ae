"""Message catalogs and locale-aware lookup for user-facing text.

Messages are keyed by a code (``user.message.notfound``) and may carry
positional ``{0}``, ``{1}`` placeholders filled from the lookup params.
Lookup falls back from the exact locale (``pt_BR``) to its language
(``pt``) and finally to the default locale.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

Catalog = Dict[str, str]


EN: Catalog = {
    "user.message.notfound": "User with id {0} not found",
    "NotNull.user.fullName": "Full name is required",
    "NotBlank.user.fullName": "Full name must not be blank",
    "Size.user.fullName": "Full name must have at most {0} characters",
    "NotNull.user.phone": "Phone is required",
    "NotBlank.user.phone": "Phone must not be blank",
    "Size.user.phone": "Phone must have at most {0} characters",
    "NotNull.user.email": "Email is required",
    "NotBlank.user.email": "Email must not be blank",
    "Size.user.email": "Email must have at most {0} characters",
    "Email.user.email": "Email must be a well-formed email address",
    "NotNull.user.password": "Password is required",
    "NotBlank.user.password": "Password must not be blank",
    "Type.user.field": "Invalid value: {0}",
}

PT_BR: Catalog = {
    "user.message.notfound": "Usuário com id {0} não encontrado",
    "NotNull.user.fullName": "O nome completo é obrigatório",
    "NotBlank.user.fullName": "O nome completo não pode estar em branco",
    "Size.user.fullName": "O nome completo deve ter no máximo {0} caracteres",
    "NotNull.user.phone": "O telefone é obrigatório",
    "NotBlank.user.phone": "O telefone não pode estar em branco",
    "Size.user.phone": "O telefone deve ter no máximo {0} caracteres",
    "NotNull.user.email": "O e-mail é obrigatório",
    "NotBlank.user.email": "O e-mail não pode estar em branco",
    "Size.user.email": "O e-mail deve ter no máximo {0} caracteres",
    "Email.user.email": "O e-mail deve ser um endereço válido",
    "NotNull.user.password": "A senha é obrigatória",
    "NotBlank.user.password": "A senha não pode estar em branco",
    "Type.user.field": "Valor inválido: {0}",
}


class MessageNotFoundError(KeyError):
    """No catalog in the fallback chain defines the requested code."""


def normalize_locale(locale: Optional[str]) -> Optional[str]:
    """``pt-br`` / ``pt_BR.UTF-8`` -> ``pt_BR``; empty -> None."""
    if not locale:
        return None
    tag = locale.split(".")[0].replace("-", "_").strip()
    if not tag:
        return None
    lang, _, region = tag.partition("_")
    return f"{lang.lower()}_{region.upper()}" if region else lang.lower()


class MessageSource:
    def __init__(self, catalogs: Mapping[str, Catalog], default_locale: str = "en") -> None:
        self.catalogs = {normalize_locale(k): dict(v) for k, v in catalogs.items()}
        self.default_locale = normalize_locale(default_locale) or "en"

    def _chain(self, locale: Optional[str]) -> list[str]:
        chain: list[str] = []
        tag = normalize_locale(locale)
        if tag:
            chain.append(tag)
            lang = tag.split("_")[0]
            if lang != tag:
                chain.append(lang)
            # a bare language also matches the first regional catalog for it
            chain.extend(k for k in self.catalogs if k.startswith(lang + "_") and k not in chain)
        chain.append(self.default_locale)
        return chain

    def supports(self, locale: Optional[str]) -> bool:
        tag = normalize_locale(locale)
        if not tag:
            return False
        lang = tag.split("_")[0]
        return any(k == tag or k == lang or k.startswith(lang + "_") for k in self.catalogs)

    def get_message(self, code: str, params: Sequence[object] = (), locale: Optional[str] = None) -> str:
        for tag in self._chain(locale):
            template = self.catalogs.get(tag, {}).get(code)
            if template is not None:
                return template.format(*params)
        raise MessageNotFoundError(code)


messages = MessageSource({"en": EN, "pt_BR": PT_BR})
