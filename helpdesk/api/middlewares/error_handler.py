# helpdesk/api/middlewares/error_handler.py
import logging

from flask import Flask, current_app, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from helpdesk.core.exceptions import AppError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        body = {"error": str(err)}
        if err.retryable:
            body["retryable"] = True
            logger.warning("retryable failure: %s", err.__cause__ or err)
        return jsonify(body), err.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        details = [
            {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
            for e in err.errors(include_url=False, include_input=False)
        ]
        return jsonify({"error": "Invalid request.", "details": details}), 422

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return jsonify({"error": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("unhandled exception")

        if current_app.debug:
            return jsonify({"error": str(err)}), 500

        return jsonify({"error": "Internal server error"}), 500
