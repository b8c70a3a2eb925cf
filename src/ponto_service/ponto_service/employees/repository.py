from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeSummary


class EmployeeRepository(Protocol):
    """Read-only access to Funcionario nodes.

    Note: ``list_all`` returns full entities while ``find_by_cpf`` returns only
    the name projection. Callers rely on that asymmetry.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def find_by_cpf(self, cpf: str) -> Optional[EmployeeSummary]:
        """Return ``None`` when no employee matches; never raises for a miss."""

        raise NotImplementedError
