from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from leadhub.platform.logger import get_logger
from leadhub.platform.response import error_response
from leadhub.platform.validation import PayloadValidationError, field_errors_from

logger = get_logger(__name__)


def add_exception_handlers(app: FastAPI):
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(
            message=str(exc.detail) or "Error",
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(
            message="Validation failed",
            status_code=status.HTTP_400_BAD_REQUEST,
            errors=field_errors_from(exc.errors()),
        )

    @app.exception_handler(PayloadValidationError)
    async def payload_validation_exception_handler(request: Request, exc: PayloadValidationError):
        return error_response(
            message=exc.message,
            status_code=status.HTTP_400_BAD_REQUEST,
            errors=exc.errors,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
        return error_response(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
