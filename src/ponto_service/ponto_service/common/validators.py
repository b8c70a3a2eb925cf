from __future__ import annotations

from typing import Any

from ..core.constants import INVALID_TIPO_MESSAGE
from ..core.enums import TipoPonto
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Campo {field_name} é obrigatório")
    return value


def require_tipo(value: Any) -> TipoPonto:
    # Exact match only: "Entrada" or " saida" are rejected.
    if value not in TipoPonto.values():
        raise ValidationError(INVALID_TIPO_MESSAGE)
    return TipoPonto(value)
