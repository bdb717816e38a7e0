from logging import getLogger

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .base import AppError

logger = getLogger(__name__)


def _jsend_error(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    # JSend: "fail" for client errors, "error" for server errors
    jsend_status = "fail" if status_code < 500 else "error"
    return JSONResponse(
        status_code=status_code,
        content={"status": jsend_status, "message": message},
        headers=headers,
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "; ".join(parts) or "Invalid request."


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(_: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f" {exc.status_code} Error: {exc.detail}", exc_info=exc)
            # Never leak internals of unexpected failures
            return _jsend_error(exc.status_code, AppError.detail)
        logger.warning(f" {exc.status_code} Error: {exc.detail}")
        return _jsend_error(exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError):
        message = _format_validation_errors(exc)
        logger.warning(f" 400 Validation error: {message}")
        return _jsend_error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_: Request, exc: StarletteHTTPException):
        return _jsend_error(
            exc.status_code, str(exc.detail), getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(_: Request, exc: Exception):
        logger.error("Unhandled error", exc_info=exc)
        return _jsend_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred.",
        )
