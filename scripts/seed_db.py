from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.ponto_service.ponto_service.container import build_container
from src.ponto_service.ponto_service.database.neo4j_base import run_query

DEMO_EMPLOYEES = [
    {"cpf": "111", "nome": "Ana Souza"},
    {"cpf": "222", "nome": "Bruno Lima"},
]


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(graph_config=dict(settings.GRAPH_CONFIG))

    try:
        created = 0
        for employee in DEMO_EMPLOYEES:
            result = run_query(
                container.conn,
                "MERGE (f:Funcionario {cpf: $cpf}) SET f.nome = $nome RETURN f",
                employee,
            )
            created += result.nodes_created
    finally:
        container.conn.close()

    print(f"OK: Seeded {len(DEMO_EMPLOYEES)} funcionario(s), {created} new -> {settings.GRAPH_CONFIG['uri']}")


if __name__ == "__main__":
    main()
