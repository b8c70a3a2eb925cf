from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import EMPLOYEE_NOT_FOUND_MESSAGE
from ..database.connection import GraphConnection
from ..database.neo4j_base import run_query
from .model import Employee, EmployeeSummary
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class Neo4jEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: GraphConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        result = run_query(self._conn_factory, "MATCH (f:Funcionario) RETURN f")
        return [Employee.from_properties(r["f"]) for r in result.records]

    def find_by_cpf(self, cpf: str) -> Optional[EmployeeSummary]:
        result = run_query(
            self._conn_factory,
            "MATCH (f:Funcionario {cpf: $cpf}) RETURN f.nome AS nome",
            {"cpf": cpf},
        )
        if not result.records:
            logger.info("%s cpf=%s", EMPLOYEE_NOT_FOUND_MESSAGE, cpf)
            return None
        return EmployeeSummary(nome=result.records[0]["nome"])
