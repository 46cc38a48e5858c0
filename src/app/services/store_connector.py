"""Store Connector Interface

Defines how the connection manager opens and releases a store handle.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class StoreConnector(ABC, Generic[T]):
    """
    Service interface for establishing a store connection

    The handle returned by connect() is shared by every request once
    established, so it must be safe for concurrent use.
    """

    @abstractmethod
    async def connect(self) -> T:
        """
        Open (or re-open) the store and verify it answers

        Returns:
            Handle used by repositories to run queries

        Raises:
            Exception: Any failure; the manager wraps it in StoreConnectionError
        """
        pass

    @abstractmethod
    async def dispose(self) -> None:
        """Release every resource held by the connector"""
        pass
