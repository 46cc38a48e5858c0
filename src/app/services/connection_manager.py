"""Connection Lifecycle Manager

Lazily establishes a single store connection per process and memoizes it.
Concurrent callers share one in-flight connect attempt. Any failure reported
through reset() drops the handle so the next call reconnects.
"""

import asyncio
import logging
from enum import Enum
from typing import Generic, Optional, TypeVar

from src.app.services.store_connector import StoreConnector
from src.app.services.store_errors import StoreConnectionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConnectionState(str, Enum):
    """Connection lifecycle states"""
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class ConnectionLifecycleManager(Generic[T]):
    """
    Memoizes a store handle and coordinates reconnects

    Features:
    - At most one connect attempt in flight; other callers await the same task
    - No inline retry: a failed attempt raises, the next call tries again
    - reset() downgrades to DISCONNECTED after any store failure

    Usage:
        manager = ConnectionLifecycleManager(SqlAlchemyStoreConnector(db_uri))
        session_factory = await manager.ensure_connection()
    """

    def __init__(
        self,
        connector: StoreConnector[T],
        connect_timeout: Optional[float] = None,
    ):
        """
        Initialize the manager

        Args:
            connector: StoreConnector that opens the underlying handle
            connect_timeout: Seconds allowed for one connect attempt (None = no limit)
        """
        self.connector = connector
        self.connect_timeout = connect_timeout
        self._handle: Optional[T] = None
        self._pending: Optional[asyncio.Task] = None
        self._state = ConnectionState.DISCONNECTED

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    async def ensure_connection(self) -> T:
        """
        Return the memoized handle, connecting first if needed

        Returns:
            The connected store handle

        Raises:
            StoreConnectionError: If the connect attempt fails or times out
        """
        if self._state is ConnectionState.CONNECTED and self._handle is not None:
            return self._handle

        if self._pending is None:
            self._state = ConnectionState.CONNECTING
            self._pending = asyncio.ensure_future(self._connect())

        try:
            # shield: a cancelled caller must not cancel the attempt other callers share
            return await asyncio.shield(self._pending)
        except StoreConnectionError:
            raise
        except Exception as e:
            raise StoreConnectionError(f"Failed to connect to store: {e}") from e

    async def _connect(self) -> T:
        try:
            if self.connect_timeout:
                handle = await asyncio.wait_for(self.connector.connect(), self.connect_timeout)
            else:
                handle = await self.connector.connect()
        except BaseException as e:
            self._pending = None
            self._handle = None
            self._state = ConnectionState.DISCONNECTED
            logger.error(f"Store connection failed: {type(e).__name__}: {e}")
            raise

        self._handle = handle
        self._pending = None
        self._state = ConnectionState.CONNECTED
        logger.info("Store connection established")
        return handle

    def reset(self, reason: Optional[str] = None) -> None:
        """
        Forget the current handle so the next call reconnects

        Args:
            reason: Short description of the failure, for logs
        """
        if self._state is ConnectionState.CONNECTED:
            logger.warning(f"Resetting store connection: {reason or 'unspecified failure'}")
        self._handle = None
        self._state = ConnectionState.DISCONNECTED

    async def aclose(self) -> None:
        """Dispose of the connector and return to DISCONNECTED"""
        self.reset("shutdown")
        await self.connector.dispose()
