"""
Global exception handlers.

Application errors keep their status code and gain their ``kind`` tag in the
body. Request bodies that fail schema validation become a ``validation``
error. SQLAlchemy errors that escape a service become an opaque 500.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shared.config.constants import ErrorKind
from shared.config.logging import get_logger
from shared.utils.exceptions import AppException
from shared.utils.schemas import ErrorResponse

logger = get_logger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = error["loc"]
        # ("body", "name") reads as "name"
        if len(location) > 1 and location[0] in ("body", "path", "query"):
            location = location[1:]
        messages.append(f"{'.'.join(str(part) for part in location)}: {error['msg']}")
    return "; ".join(messages)


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        # Already logged when raised
        body = ErrorResponse(detail=exc.detail, kind=exc.kind)
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        detail = _describe_validation_errors(exc)
        logger.warning(
            "Request validation failed",
            path=request.url.path,
            errors=detail,
        )
        body = ErrorResponse(detail=detail, kind=ErrorKind.VALIDATION)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=body.model_dump(),
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error(
            "Unhandled database error",
            path=request.url.path,
            error_type=type(exc).__name__,
            exc_info=exc,
        )
        body = ErrorResponse(detail="Internal storage error", kind=ErrorKind.STORAGE)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(),
        )
