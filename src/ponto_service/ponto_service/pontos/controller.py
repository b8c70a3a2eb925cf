from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.constants import DELETE_SUCCESS_TEMPLATE, INTERNAL_ERROR_MESSAGE
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/ponto", methods=["POST"], endpoint="ponto_create")
    def ponto_create():
        body = request.get_json(silent=True) or {}
        if not isinstance(body, dict):
            body = {}

        try:
            record = container.ponto_service.create_record(
                cpf=body.get("cpf"),
                data=body.get("data"),
                hora=body.get("hora"),
                tipo=body.get("tipo"),
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except StoreError:
            logger.exception("Falha ao registrar ponto")
            return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500

        return jsonify(record.to_dict())

    @app.route("/pontos/<cpf>", methods=["GET"], endpoint="pontos_list")
    def pontos_list(cpf: str):
        try:
            records = container.ponto_service.list_records_for_employee(cpf)
        except StoreError:
            logger.exception("Falha ao listar pontos cpf=%s", cpf)
            return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500
        return jsonify([r.to_dict() for r in records])

    @app.route("/pontos/<cpf>/<data>", methods=["DELETE"], endpoint="pontos_delete_day")
    def pontos_delete_day(cpf: str, data: str):
        try:
            container.ponto_service.delete_records_for_day(cpf=cpf, data=data)
        except StoreError:
            logger.exception("Falha ao excluir pontos cpf=%s data=%s", cpf, data)
            return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500
        # Same message whether or not anything matched.
        return jsonify({"message": DELETE_SUCCESS_TEMPLATE.format(data=data, cpf=cpf)}), 200
