from typing import Any
from sqlalchemy.exc import SQLAlchemyError
from framework.logging.logger import get_logger, current_trace_id
from framework.response import ResponseModel
from framework.config import settings

logger = get_logger("exception_handler")

# Backend failures (connectivity, constraint violation, timeout) are raised by
# SQLAlchemy/the driver and propagate unchanged; catch them as one kind.
StorageError = SQLAlchemyError

class BusinessException(Exception):
    """Base class for business exceptions."""
    def __init__(self, message: str, code: int = 400, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.detail = detail

def handle_exception(exc: Exception) -> dict:
    """Render an exception as a failed response envelope and log it."""
    trace_id = current_trace_id()

    if isinstance(exc, BusinessException):
        logger.warning(f"Trace[{trace_id}] - BusinessError: {exc.message}")
        return ResponseModel.fail(code=exc.code, message=exc.message, data=exc.detail)

    if isinstance(exc, StorageError):
        logger.critical(f"Trace[{trace_id}] - DatabaseError: {str(exc)}")
        return ResponseModel.fail(code=500, message="Service temporarily unavailable")

    logger.opt(exception=exc).error(f"Trace[{trace_id}] - UncaughtException: {str(exc)}")

    return ResponseModel.fail(
        code=500,
        message="System busy, please try again later",
        data={"trace_id": trace_id} if settings.DEBUG else None
    )
