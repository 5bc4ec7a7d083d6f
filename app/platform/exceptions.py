from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.features.accessibility.exceptions import (
    ANALYSIS_FAILED_TITLE,
    URL_REQUIRED_TITLE,
    AnalysisError,
    ValidationError,
)
from app.platform.logger import get_logger
from app.platform.response import api_response

logger = get_logger("exception_handlers")


def add_exception_handlers(app):
    @app.exception_handler(AnalysisError)
    async def analysis_exception_handler(request: Request, exc: AnalysisError):
        # One message per side of the boundary: the user's input or the analyzer
        if isinstance(exc, ValidationError):
            return api_response(message=URL_REQUIRED_TITLE, status_code=status.HTTP_400_BAD_REQUEST)

        logger.warning(f"{request.method} {request.url.path} failed with {exc.kind}: {exc}")
        return api_response(message=ANALYSIS_FAILED_TITLE, status_code=status.HTTP_502_BAD_GATEWAY)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return api_response(message=str(exc.detail) or "Error", status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return api_response(
            message="Validation failed",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            data={"errors": exc.errors()},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.url.path}: {exc}")
        return api_response(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
