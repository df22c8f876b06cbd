import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.errors import LedgerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register global error handlers on the FastAPI app"""

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError):
        if exc.http_status >= 500:
            logger.error(f"{exc.message} on {request.url.path}: {exc.error}")
        else:
            logger.info(f"{exc.message} on {request.url.path}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())
