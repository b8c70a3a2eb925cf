from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..core.constants import EMPLOYEE_NOT_FOUND_MESSAGE, INTERNAL_ERROR_MESSAGE
from ..core.exceptions import StoreError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        try:
            employees = container.employees_repo.list_all()
        except StoreError:
            logger.exception("Falha ao listar funcionários")
            return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500
        return jsonify([e.to_dict() for e in employees])

    @app.route("/employees/<cpf>", methods=["GET"], endpoint="employees_detail")
    def employees_detail(cpf: str):
        try:
            summary = container.employees_repo.find_by_cpf(cpf)
        except StoreError:
            logger.exception("Falha ao buscar funcionário cpf=%s", cpf)
            return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500

        if summary is None:
            return jsonify({"error": EMPLOYEE_NOT_FOUND_MESSAGE}), 404
        # Kept as a list of rows, the shape the endpoint has always returned.
        return jsonify([summary.to_dict()])
