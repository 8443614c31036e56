"""Payload checks shared by the tombamento and detalhe services."""
from __future__ import annotations

from typing import Any

from tombamento_api.core.errors import InvalidPayloadError
from tombamento_api.domain.store import normalize_code


def require_code(payload: Any) -> str:
    """Return the record code as text, or raise when it is absent or not scalar."""
    if not isinstance(payload, dict):
        raise InvalidPayloadError("Corpo da requisição deve ser um objeto JSON")
    raw = payload.get("code")
    code = normalize_code(raw)
    if code is not None:
        return code
    if not raw:
        raise InvalidPayloadError("Código é obrigatório")
    raise InvalidPayloadError("Código deve ser texto")
