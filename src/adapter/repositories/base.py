"""Shared plumbing for read-only SQLAlchemy repositories"""

import asyncio
from typing import Any, Callable, Optional, TypeVar
from sqlalchemy.engine import Result as SaResult
from sqlalchemy.sql import Executable
from src.adapter.services.error_classifier import classify_store_error
from src.app.services.connection_manager import ConnectionLifecycleManager

R = TypeVar("R")


class SqlAlchemyReadRepository:
    """
    Base class for repositories that run one statement per session

    A fresh session per statement lets callers issue independent reads
    concurrently. Every failure surfaces as a StoreError subclass.
    """

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        query_timeout: Optional[float] = None,
    ):
        """
        Args:
            connection: Manager providing the session factory
            query_timeout: Seconds allowed per statement (None = no limit)
        """
        self.connection = connection
        self.query_timeout = query_timeout

    async def _execute(self, statement: Executable, fetch: Callable[[SaResult], R]) -> R:
        session_factory = await self.connection.ensure_connection()
        try:
            async with session_factory() as session:
                pending = session.execute(statement)
                if self.query_timeout:
                    result = await asyncio.wait_for(pending, self.query_timeout)
                else:
                    result = await pending
                return fetch(result)
        except Exception as e:
            raise classify_store_error(e) from e

    async def _scalar(self, statement: Executable) -> Any:
        return await self._execute(statement, lambda result: result.scalar_one())
