from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import TipoPonto
from .model import AttendanceRecord


class AttendanceRecordRepository(Protocol):
    def create(self, *, cpf: str, data: str, hora: str, tipo: TipoPonto) -> Optional[AttendanceRecord]:
        """Create the record and its REGISTROU edge in one statement.

        Returns ``None`` when no employee has ``cpf``; nothing is written then.
        """

        raise NotImplementedError

    def list_for_employee(self, cpf: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_for_day(self, *, cpf: str, data: str) -> int:
        """Detach-delete the employee's records for ``data``; returns how many went."""

        raise NotImplementedError
