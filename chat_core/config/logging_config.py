import logging
from logging.handlers import RotatingFileHandler
import io
import sys
from pathlib import Path
from contextvars import ContextVar
from typing import Optional

from chat_core.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"

# Set by the caller (one value per request/task); read on every log record
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)

# Handlers installed by setup_logging carry this name so a second call replaces them
_HANDLER_NAME = "chat_core"


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _install(root: logging.Logger, handler: logging.Handler, formatter) -> None:
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    root.addHandler(handler)


def setup_logging(
    level: str = Config.LOG_LEVEL,
    log_file: Optional[str] = Config.LOG_FILE,
    stream=None,
):
    """
    Configure logging for chat_core.

    The root logger stays at WARNING so library chatter is dropped; only the
    chat_core logger tree is lowered to `level`. Output goes to `stream`
    (stdout by default) and, when `log_file` is set, to a rotating file.
    """
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    for handler in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(handler)
        handler.close()

    if stream is None:
        stream = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
    formatter = SafeFormatter(Config.LOG_FORMAT)
    _install(root, logging.StreamHandler(stream), formatter)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _install(
            root,
            RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
            ),
            formatter,
        )

    logging.getLogger("chat_core").setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger(__name__).info("Logging is set up.")

    return root
