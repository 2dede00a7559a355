"""Request parsing and JSON error responses shared by all controllers."""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def request_params() -> dict:
    """Merge query string, form values and JSON body (body wins)."""

    params: dict = {}
    params.update(request.args.to_dict())
    params.update(request.form.to_dict())
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        params.update(body)
    return params


def ok(payload: dict | None = None, status: int = 200):
    body = {"ok": True}
    body.update(payload or {})
    return jsonify(body), status


def error_response(message: str, status: int):
    return jsonify({"ok": False, "error": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if e.status_code >= 500:
            logger.error("store failure on %s %s: %s", request.method, request.path, e)
        return error_response(str(e), e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        if bool(app.config.get("DEBUG", False)):
            return error_response(f"Internal error: {e}", 500)
        return error_response("Internal server error", 500)
