from __future__ import annotations

import os
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Optional

import pytest

os.environ.setdefault("PONTO_ENV", "testing")

from src.ponto_service.ponto_service.core.enums import TipoPonto
from src.ponto_service.ponto_service.employees.model import Employee, EmployeeSummary
from src.ponto_service.ponto_service.pontos.model import AttendanceRecord


class InMemoryGraph:
    """Funcionario nodes plus REGISTROU edges, kept as (owner cpf, record) pairs."""

    def __init__(self, employees: list[Employee]):
        self.employees = {e.cpf: e for e in employees}
        self.edges: list[tuple[str, AttendanceRecord]] = []
        self.calls = 0

    # EmployeeRepository
    def list_all(self):
        self.calls += 1
        return list(self.employees.values())

    def find_by_cpf(self, cpf: str) -> Optional[EmployeeSummary]:
        self.calls += 1
        employee = self.employees.get(cpf)
        return EmployeeSummary(nome=employee.nome) if employee else None

    # AttendanceRecordRepository
    def create(self, *, cpf: str, data: str, hora: str, tipo: TipoPonto) -> Optional[AttendanceRecord]:
        self.calls += 1
        if cpf not in self.employees:
            return None
        record = AttendanceRecord(data=data, hora=hora, tipo=tipo, funcionario=cpf)
        self.edges.append((cpf, record))
        return record

    def list_for_employee(self, cpf: str):
        self.calls += 1
        return [r for owner, r in self.edges if owner == cpf]

    def delete_for_day(self, *, cpf: str, data: str) -> int:
        self.calls += 1
        kept = [(owner, r) for owner, r in self.edges if not (owner == cpf and r.data == data)]
        deleted = len(self.edges) - len(kept)
        self.edges = kept
        return deleted


@pytest.fixture
def graph() -> InMemoryGraph:
    return InMemoryGraph(
        [
            Employee(cpf="111", nome="Ana Souza", extra={"cargo": "analista"}),
            Employee(cpf="222", nome="Bruno Lima"),
        ]
    )


@dataclass
class FakeCounters:
    nodes_created: int = 0
    nodes_deleted: int = 0
    relationships_created: int = 0
    relationships_deleted: int = 0


class FakeRecord:
    def __init__(self, data: dict[str, Any]):
        self._data = data

    def data(self) -> dict[str, Any]:
        return dict(self._data)


class FakeResult:
    def __init__(self, rows: list[dict[str, Any]], counters: FakeCounters):
        self._rows = rows
        self._counters = counters

    def __iter__(self):
        return iter(FakeRecord(r) for r in self._rows)

    def consume(self):
        return SimpleNamespace(counters=self._counters)


class FakeSession:
    def __init__(self, conn: "FakeGraphConnection"):
        self._conn = conn
        self.closed = False

    def run(self, query: str, parameters: dict[str, Any]):
        self._conn.calls.append((" ".join(query.split()), parameters))
        if self._conn.error is not None:
            raise self._conn.error
        return FakeResult(self._conn.rows, self._conn.counters)

    def close(self) -> None:
        self.closed = True


class FakeGraphConnection:
    """Stands in for GraphConnection: scripted rows, recorded statements."""

    def __init__(self, rows=None, counters: dict[str, int] | None = None, error: Exception | None = None):
        self.rows = list(rows or [])
        self.counters = FakeCounters(**(counters or {}))
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.sessions: list[FakeSession] = []

    def session(self) -> FakeSession:
        s = FakeSession(self)
        self.sessions.append(s)
        return s


@pytest.fixture
def fake_conn():
    return FakeGraphConnection
