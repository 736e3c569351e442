from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import StoreError
from app.schemas.response import ErrorResponse
from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def _request_context(request: Request) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "client": request.client.host if request.client else "unknown",
    }


def add_exception_handlers(app: FastAPI):
    """
    Registers exception handlers with the FastAPI app.
    """
    @app.exception_handler(StoreError)
    async def store_exception_handler(request: Request, exc: StoreError):
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__}: {exc.message}", extra=_request_context(request))
        else:
            logger.info(f"{type(exc).__name__}: {exc.message}", extra=_request_context(request))

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=exc.message,
                details=exc.details
            ).model_dump(exclude_none=True)
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Handles standard HTTP exceptions (404, 405, etc.)
        """
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Handles Pydantic validation errors. Malformed input is a client error (400).
        """
        errors = jsonable_encoder(exc.errors())
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", []) if part != "body")
        msg = first.get("msg") or "Input validation failed"
        message = f"{field}: {msg}" if field else msg

        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=message, details=errors).model_dump()
        )

    @app.exception_handler(PyMongoError)
    async def database_exception_handler(request: Request, exc: PyMongoError):
        logger.error(
            f"Database error: {str(exc)}",
            extra=_request_context(request),
            exc_info=True
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal Server Error").model_dump(exclude_none=True)
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catch-all for unhandled exceptions.
        """
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra=_request_context(request),
            exc_info=True
        )

        message = "Something went wrong" if settings.is_production else str(exc) or "Something went wrong"

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=message).model_dump(exclude_none=True)
        )
