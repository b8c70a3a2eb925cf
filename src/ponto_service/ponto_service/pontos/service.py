from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_non_empty, require_tipo
from ..core.exceptions import NotFoundError
from .model import AttendanceRecord
from .repository import AttendanceRecordRepository

logger = logging.getLogger(__name__)


class AttendanceRecordService:
    """Use case: register, list and purge pontos of an employee."""

    def __init__(self, records: AttendanceRecordRepository):
        self._records = records

    def create_record(self, *, cpf: Any, data: Any, hora: Any, tipo: Any) -> AttendanceRecord:
        # All validation happens before the store is touched.
        tipo_ponto = require_tipo(tipo)
        cpf = require_non_empty(cpf, "cpf")
        data = require_non_empty(data, "data")
        hora = require_non_empty(hora, "hora")

        record = self._records.create(cpf=cpf, data=data, hora=hora, tipo=tipo_ponto)
        if record is None:
            raise NotFoundError(f"Funcionário com CPF {cpf} não encontrado")

        logger.info("Ponto registrado: cpf=%s data=%s hora=%s tipo=%s", cpf, data, hora, tipo_ponto.value)
        return record

    def list_records_for_employee(self, cpf: str) -> Sequence[AttendanceRecord]:
        """Every record owned by ``cpf``, in no particular order.

        An unknown cpf yields an empty list.
        """

        return list(self._records.list_for_employee(cpf))

    def delete_records_for_day(self, *, cpf: str, data: str) -> int:
        deleted = self._records.delete_for_day(cpf=cpf, data=data)
        logger.info("Pontos excluídos: cpf=%s data=%s total=%d", cpf, data, deleted)
        return deleted
