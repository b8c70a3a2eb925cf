from __future__ import annotations

from enum import Enum


class TipoPonto(str, Enum):
    """Marcador de registro de ponto: entrada ou saída."""

    ENTRADA = "entrada"
    SAIDA = "saida"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(item.value for item in cls)
