from __future__ import annotations

import atexit
import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .container import Container, build_container
from .core.constants import INTERNAL_ERROR_MESSAGE
from .employees.controller import register as register_employees
from .pontos.controller import register as register_pontos

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    graph_config = getattr(settings, "GRAPH_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT"))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("settings=%s graph=%s@%s", settings_module, graph_config.get("user"), graph_config.get("uri"))

    if container is None:
        container = build_container(graph_config=graph_config)
        if container.conn is not None:
            atexit.register(container.conn.close)

    register_employees(app, container)
    register_pontos(app, container)

    @app.after_request
    def log_request(response):
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Erro inesperado em %s %s", request.method, request.path)
        return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500

    return app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])
