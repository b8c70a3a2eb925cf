from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import GraphConfig, GraphConnection
from .employees.neo4j_employee_repository import Neo4jEmployeeRepository
from .employees.repository import EmployeeRepository
from .pontos.neo4j_ponto_repository import Neo4jAttendanceRecordRepository
from .pontos.repository import AttendanceRecordRepository
from .pontos.service import AttendanceRecordService


@dataclass(frozen=True)
class Container:
    conn: Optional[GraphConnection]

    employees_repo: EmployeeRepository
    pontos_repo: AttendanceRecordRepository

    ponto_service: AttendanceRecordService


def build_container(*, graph_config: dict, driver=None) -> Container:
    config = GraphConfig(
        uri=str(graph_config["uri"]),
        user=str(graph_config["user"]),
        password=str(graph_config["password"]),
        database=graph_config.get("database") or None,
    )
    conn = GraphConnection(config, driver=driver)

    employees_repo = Neo4jEmployeeRepository(conn)
    pontos_repo = Neo4jAttendanceRecordRepository(conn)

    ponto_service = AttendanceRecordService(pontos_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        pontos_repo=pontos_repo,
        ponto_service=ponto_service,
    )
