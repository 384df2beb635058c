# upload_api/api/middlewares/error_handler.py
import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from upload_api.api.schemas.upload_schema import ErrorResponse
from upload_api.core.exceptions import AppError

logger = logging.getLogger(__name__)


def _error(message: str, status_code: int):
    return jsonify(ErrorResponse(message=message).model_dump()), status_code


def register_error_handlers(app: Flask, *, debug: bool = False) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        if err.status_code >= 500:
            logger.error("%s: %s", type(err).__name__, err)
        return _error(str(err), err.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return _error(err.description or err.name, err.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("Unhandled error")  # stack trace só no log

        if debug:
            return _error(str(err), 500)  # mostra a msg em dev

        return _error("Internal server error", 500)
