import sys
import uuid
from contextlib import contextmanager
from pathlib import Path
from contextvars import ContextVar
from typing import Iterator, Optional
from loguru import logger
from framework.config import settings

# Trace id of the unit of work currently running in this context
_current_trace_id: ContextVar[str] = ContextVar("current_trace_id", default="system")

LOG_DIR = Path(settings.LOG_DIR)

class LogConfig:
    """Global logging configuration using Loguru."""
    @classmethod
    def setup_logging(cls, level: Optional[str] = None):
        level = level or settings.LOG_LEVEL
        LOG_DIR.mkdir(parents=True, exist_ok=True)

        logger.remove()

        # stdout is reserved for command output
        logger.add(
            sys.stderr,
            enqueue=True,
            backtrace=True,
            diagnose=settings.DEBUG,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "<magenta>Trace:{extra[trace_id]}</magenta> - <level>{message}</level>"
            ),
            level=level,
        )

        logger.add(
            LOG_DIR / "app_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="30 days",
            compression="zip",
            enqueue=True,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | Trace:{extra[trace_id]} - {message}",
            level="DEBUG",
        )

        logger.add(
            LOG_DIR / "error_{time:YYYY-MM-DD}.log",
            level="ERROR",
            rotation="100 MB",
            enqueue=True,
        )

        logger.configure(extra={"trace_id": "system"})

    @classmethod
    def setup_cli_logging(cls):
        """Console commands print JSON on stdout; keep log lines on stderr."""
        logger.remove()
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss.SSS} | {level: <8} | Trace:{extra[trace_id]} - {message}",
            level="WARNING",
        )
        logger.configure(extra={"trace_id": "system"})


@contextmanager
def trace_context(trace_id: Optional[str] = None) -> Iterator[str]:
    """Run a block under a trace id (generated when not given)."""
    trace_id = trace_id or uuid.uuid4().hex
    token = _current_trace_id.set(trace_id)
    try:
        with logger.contextualize(trace_id=trace_id):
            yield trace_id
    finally:
        _current_trace_id.reset(token)


def current_trace_id() -> str:
    return _current_trace_id.get()


def get_logger(name: str = None):
    """Get logger instance; trace_id comes from trace_context() at emit time."""
    # Binding trace_id here would pin it, bound extras win over contextualize()
    if name:
        return logger.bind(name=name)
    else:
        return logger
