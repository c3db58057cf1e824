import logging
import sys
import uuid
from contextvars import ContextVar
from pythonjsonlogger import jsonlogger

request_id_ctx_var: ContextVar[str] = ContextVar("request_id", default="-")
caller_ctx_var: ContextVar[str] = ContextVar("caller", default="-")


def get_request_id() -> str:
    return request_id_ctx_var.get()


class RequestContextFilter(logging.Filter):
    """Stamps every record with the current request id and caller subject."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        record.caller = caller_ctx_var.get()
        return True


def configure_logging(level: str = "INFO") -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s %(caller)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(RequestContextFilter())
    logger.handlers = [handler]


def ensure_request_id(value: str | None) -> str:
    value = (value or "").strip()
    return value or uuid.uuid4().hex
