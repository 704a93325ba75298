import logging
from contextlib import contextmanager

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class ReportError(Exception):
    """Raised when a report cannot be computed; the message is shown to the caller."""


@contextmanager
def bad_request_on_error(operation: str):
    """
    Turns any failure inside the block into a 400 carrying the error text.

    HTTPExceptions raised inside the block pass through untouched.
    """
    try:
        yield
    except HTTPException:
        raise
    except Exception as exc:
        logger.error(f"{operation} failed: {exc}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
