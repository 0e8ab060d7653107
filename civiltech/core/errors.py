import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


class CivilTechError(Exception):
    """Base for errors that map straight onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CivilTechError):
    status_code = status.HTTP_404_NOT_FOUND


class ClientError(CivilTechError):
    status_code = status.HTTP_400_BAD_REQUEST


class FeatureUnavailableError(CivilTechError):
    """Raised when a write targets an optional table this deployment lacks."""


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


def database_error_message(exc: SQLAlchemyError, expose: bool = True) -> str:
    if not expose:
        return "Database Error"
    # DBAPIError keeps the driver exception on .orig
    detail = getattr(exc, "orig", None) or exc
    return f"Database Error: {detail}"


def register_exception_handlers(app: FastAPI, expose_db_errors: bool = True) -> None:
    async def handle_civiltech_error(request: Request, exc: CivilTechError):
        if exc.status_code >= 500:
            logger.error("request_failed", path=request.url.path, error=exc.message)
        return error_response(exc.status_code, exc.message)

    async def handle_db_error(request: Request, exc: SQLAlchemyError):
        logger.error("database_error", path=request.url.path, error=str(exc))
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            database_error_message(exc, expose_db_errors),
        )

    app.add_exception_handler(CivilTechError, handle_civiltech_error)
    app.add_exception_handler(SQLAlchemyError, handle_db_error)
