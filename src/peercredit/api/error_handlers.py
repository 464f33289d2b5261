"""Global exception handlers.

Domain errors that escape a route keep their stable code; store transport
failures become 503; anything else is a generic 500 with no internal detail.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError

from ..core.errors import LedgerError, StoreUnavailable

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
        logger.warning("ledger error on %s: %s", request.url.path, exc.code)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()})

    @app.exception_handler(OperationalError)
    @app.exception_handler(InterfaceError)
    async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("credit store failure on %s", request.url.path, exc_info=exc)
        unavailable = StoreUnavailable("Credit store is unavailable.")
        return JSONResponse(status_code=unavailable.status_code, content={"detail": unavailable.to_detail()})

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"}},
        )
