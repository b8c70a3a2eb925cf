from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import TipoPonto
from ..database.connection import GraphConnection
from ..database.neo4j_base import run_query
from .model import AttendanceRecord
from .repository import AttendanceRecordRepository


class Neo4jAttendanceRecordRepository(AttendanceRecordRepository):
    def __init__(self, conn_factory: GraphConnection):
        self._conn_factory = conn_factory

    def create(self, *, cpf: str, data: str, hora: str, tipo: TipoPonto) -> Optional[AttendanceRecord]:
        result = run_query(
            self._conn_factory,
            """
            MATCH (f:Funcionario {cpf: $cpf})
            CREATE (p:Ponto {data: $data, hora: $hora, tipo: $tipo, funcionario: $cpf})
            CREATE (f)-[:REGISTROU]->(p)
            RETURN p
            """,
            {"cpf": cpf, "data": data, "hora": hora, "tipo": tipo.value},
        )
        if not result.records:
            return None
        return AttendanceRecord.from_properties(result.records[0]["p"])

    def list_for_employee(self, cpf: str) -> Sequence[AttendanceRecord]:
        result = run_query(
            self._conn_factory,
            """
            MATCH (f:Funcionario {cpf: $cpf})-[:REGISTROU]->(p:Ponto)
            RETURN p
            """,
            {"cpf": cpf},
        )
        return [AttendanceRecord.from_properties(r["p"]) for r in result.records]

    def delete_for_day(self, *, cpf: str, data: str) -> int:
        result = run_query(
            self._conn_factory,
            """
            MATCH (f:Funcionario {cpf: $cpf})-[:REGISTROU]->(p:Ponto {data: $data})
            DETACH DELETE p
            """,
            {"cpf": cpf, "data": data},
        )
        return result.nodes_deleted
