import logging
from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError

from shared.core.exceptions import AppError, ValidationError
from shared.helpers.json_response_helper import failure_json
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(ValidationError)
    async def business_validation_handler(request: Request, exc: ValidationError):
        logger.warning("Validation failed on %s %s: %s",
                       request.method, request.url.path, exc.message)
        return failure_json(
            exc.http_status,
            f"Validation Error: {exc.message}",
            status_code=exc.status_code,
            errors=exc.violations,
        )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.http_status >= 500:
            logger.error("Store failure on %s %s: %s",
                         request.method, request.url.path, exc.message)
        else:
            logger.info("%s on %s %s: %s", type(exc).__name__,
                        request.method, request.url.path, exc.message)
        return failure_json(exc.http_status, exc.message, status_code=exc.status_code)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return failure_json(
            exc.status_code or 400,
            str(exc.detail),
            status_code=str(exc.status_code or AppStatusCode.OPERATION_FAILED),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed input: wrong types, unparseable numbers or ids
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        return failure_json(422, problems or "Malformed request",
                            status_code=AppStatusCode.INVALID_INPUT)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s",
                         request.method, request.url.path)
        return failure_json(500, "An unexpected error occurred")
