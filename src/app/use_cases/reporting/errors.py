"""Reporting error codes and store failure translation"""

from libs.result import Error
from src.app.services.store_errors import (
    StoreConnectionError,
    StoreTimeoutError,
)

# Validation (never touch the store)
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_FOLDER_ID = "INVALID_FOLDER_ID"
INVALID_STATUS = "INVALID_STATUS"
SEARCH_TOO_SHORT = "SEARCH_TOO_SHORT"
SEARCH_TOO_LONG = "SEARCH_TOO_LONG"

# Store failures
STORE_UNAVAILABLE = StoreConnectionError.code
QUERY_TIMEOUT = StoreTimeoutError.code

VALIDATION_CODES = frozenset({
    VALIDATION_ERROR,
    INVALID_FOLDER_ID,
    INVALID_STATUS,
    SEARCH_TOO_SHORT,
    SEARCH_TOO_LONG,
})


def store_failure(error: Exception, message: str, fallback_code: str) -> Error:
    """
    Build a Result error for a failed store read

    Args:
        error: Exception raised while reading
        message: Human readable message for the caller
        fallback_code: Code used when the failure is neither connectivity nor timeout

    Returns:
        Error with STORE_UNAVAILABLE, QUERY_TIMEOUT or fallback_code
    """
    if isinstance(error, StoreConnectionError):
        return Error(code=STORE_UNAVAILABLE, message="Database connection failed", reason=str(error))
    if isinstance(error, StoreTimeoutError):
        return Error(
            code=QUERY_TIMEOUT,
            message="Request timeout - try refining your search",
            reason=str(error),
        )
    return Error(code=fallback_code, message=message, reason=str(error))
