from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from ..core.enums import TipoPonto


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: Ponto node (one clock-in or clock-out event).

    ``funcionario`` repeats the owner's cpf on the node itself; ownership is
    also stored as the REGISTROU relationship. Records are never updated.

    Note: Nodes written by other tools may carry unknown ``tipo`` values or
    extra properties; both are read back verbatim.
    """

    data: Optional[str]
    hora: Optional[str]
    tipo: Union[TipoPonto, str, None]
    funcionario: Optional[str]
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> "AttendanceRecord":
        props = dict(properties)
        tipo = props.pop("tipo", None)
        if tipo in TipoPonto.values():
            tipo = TipoPonto(tipo)
        return cls(
            data=props.pop("data", None),
            hora=props.pop("hora", None),
            tipo=tipo,
            funcionario=props.pop("funcionario", None),
            extra=props,
        )

    def to_dict(self) -> Dict[str, Any]:
        props = dict(self.extra)
        tipo = self.tipo.value if isinstance(self.tipo, TipoPonto) else self.tipo
        for key, value in (("data", self.data), ("hora", self.hora), ("tipo", tipo), ("funcionario", self.funcionario)):
            if value is not None:
                props[key] = value
        return props
