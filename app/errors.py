from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class PlayerStatsError(Exception):
    """Base class for errors raised by the player stats service."""


class NotFoundError(PlayerStatsError):
    def __init__(self, resource: str, identifier):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} not found")


class StorageError(PlayerStatsError):
    """Any fault coming out of the persistence layer.

    The underlying exception is kept as ``__cause__`` for logging only; it is
    never sent back to the client.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage failure during {operation}")


def _field_name(loc) -> str:
    # ("body", "email") -> "email", ("path", "player_id") -> "player_id"
    parts = [str(p) for p in loc if p not in ("body", "path", "query")]
    if parts:
        return ".".join(parts)
    return str(loc[0]) if loc else "request"


def collect_field_errors(errors) -> dict:
    report = {}
    for err in errors:
        report.setdefault(_field_name(err.get("loc", ())), []).append(err.get("msg", "Invalid value"))
    return report


async def validation_error_handler(request: Request, exc: RequestValidationError):
    report = collect_field_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, report)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": report},
    )


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": f"{exc.resource} not found"},
    )


async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(
        "Storage error on %s %s (%s)",
        request.method,
        request.url.path,
        exc.operation,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
