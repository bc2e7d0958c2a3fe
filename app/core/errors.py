"""Typed action failures and their HTTP rendering.

Handlers never return ``success: false``; they raise one of these and the
exception handlers below turn it into ``{"error": {"code", "message"}}``.
Store-level errors are not translated and surface as a plain 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ActionError(Exception):
    """Base class for failures with a stable, client-visible code."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    default_message: str = "An error occurred."
    log_level: int = logging.ERROR

    def __init__(self, message: str | None = None, details: list | dict | None = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class Unauthorized(ActionError):
    http_status = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    default_message = "You must be signed in to perform this action."
    log_level = logging.INFO


class NotFound(ActionError):
    """Missing, or owned by someone else; the two are indistinguishable."""

    http_status = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Not found."
    log_level = logging.INFO


class InvalidInput(ActionError):
    http_status = status.HTTP_400_BAD_REQUEST
    code = "INVALID_INPUT"
    default_message = "Invalid input."
    log_level = logging.WARNING


def error_response(exc: ActionError) -> JSONResponse:
    body: dict = {"code": exc.code, "message": exc.message}
    if exc.details is not None:
        body["details"] = exc.details
    return JSONResponse(status_code=exc.http_status, content=jsonable_encoder({"error": body}))


async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    logger.log(exc.log_level, "%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # Pydantic puts the ValueError instance in ctx; it is not JSON-serializable
    details = [{k: v for k, v in err.items() if k not in ("ctx", "input", "url")} for err in errors]
    message = errors[0]["msg"] if errors else InvalidInput.default_message
    return await action_error_handler(request, InvalidInput(message, details=details))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ActionError, action_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
