# formbridge/core/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from formbridge.core.logging import logger


class FormBridgeError(Exception):
    """Base class for errors turned into JSON responses."""


class ValidationError(FormBridgeError):
    """The submission cannot be forwarded (missing formResponse, no task name...)."""


class RemoteApiError(FormBridgeError):
    """The board API answered with an error envelope, or the transport failed."""


class ConfigurationError(FormBridgeError):
    """Board credentials are missing."""


def _failure(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    content = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning("Submission rejected", path=request.url.path, reason=str(exc))
    return _failure(400, str(exc))


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Malformed request body", path=request.url.path, errors=exc.errors())
    return _failure(400, "Invalid request body", error=str(exc))


async def remote_error_handler(request: Request, exc: FormBridgeError):
    logger.error("Board API call failed", path=request.url.path, error=str(exc))
    return _failure(500, "Failed to process form submission", error=str(exc))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", path=request.url.path)
    return _failure(500, "Internal server error", error=str(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(RemoteApiError, remote_error_handler)
    app.add_exception_handler(ConfigurationError, remote_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
