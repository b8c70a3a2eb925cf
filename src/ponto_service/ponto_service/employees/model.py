from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Funcionario node.

    Note: Employees are created outside this service; only ``cpf`` and ``nome``
    are known fields, any other stored property is kept verbatim in ``extra``.
    """

    cpf: str
    nome: Optional[str]
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> "Employee":
        props = dict(properties)
        cpf = props.pop("cpf", None)
        nome = props.pop("nome", None)
        return cls(cpf=cpf, nome=nome, extra=props)

    def to_dict(self) -> Dict[str, Any]:
        props = dict(self.extra)
        if self.cpf is not None:
            props["cpf"] = self.cpf
        if self.nome is not None:
            props["nome"] = self.nome
        return props


@dataclass(frozen=True)
class EmployeeSummary:
    """Single-field projection returned by a cpf lookup (only ``nome``)."""

    nome: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"nome": self.nome}
