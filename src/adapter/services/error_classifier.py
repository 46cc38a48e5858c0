"""Store error classification

Maps driver and SQLAlchemy exceptions onto the store error taxonomy.
"""

import asyncio
from sqlalchemy import exc as sa_exc
from src.app.services.store_errors import (
    StoreError,
    StoreConnectionError,
    StoreTimeoutError,
    StoreQueryError,
)

_CONNECTION_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,  # connection pool exhausted
    ConnectionError,
    OSError,
)


def classify_store_error(error: BaseException) -> StoreError:
    """
    Translate an exception raised while querying into a StoreError

    Args:
        error: Exception raised by the driver, SQLAlchemy or asyncio

    Returns:
        StoreError subclass describing the failure
    """
    if isinstance(error, StoreError):
        return error

    # TimeoutError subclasses OSError, so it is checked first
    if isinstance(error, (asyncio.TimeoutError, TimeoutError)):
        return StoreTimeoutError("Query timed out")

    if isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
        return StoreConnectionError(f"Connection lost: {error.orig}")

    if isinstance(error, _CONNECTION_ERRORS):
        return StoreConnectionError(f"Store unavailable: {error}")

    return StoreQueryError(f"{type(error).__name__}: {error}")
