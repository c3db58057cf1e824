import logging
from contextlib import contextmanager
from typing import Iterator
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from docsum.core.exceptions import DocsumError, InternalError

logger = logging.getLogger(__name__)


@contextmanager
def guarded(action: str, db: Session | None = None) -> Iterator[None]:
    """Let taxonomy errors through; log anything else and replace it with InternalError."""
    try:
        yield
    except DocsumError:
        raise
    except Exception:
        logger.exception("Error %s", action)
        if db is not None:
            db.rollback()
        raise InternalError()


async def docsum_error_handler(request: Request, exc: DocsumError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Request failed", extra={"path": request.url.path, "status": exc.status_code})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DocsumError, docsum_error_handler)
