"""Exemplo: usar a camada de serviço sem passar pelo Flask."""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.ponto_service.ponto_service.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(graph_config=settings.GRAPH_CONFIG)
    try:
        container.ponto_service.create_record(cpf="111", data="2024-01-10", hora="08:00", tipo="entrada")
        for record in container.ponto_service.list_records_for_employee("111"):
            print(record.to_dict())
    finally:
        container.conn.close()


if __name__ == "__main__":
    main()
