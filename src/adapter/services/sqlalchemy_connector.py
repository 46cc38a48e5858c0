"""SQLAlchemy Store Connector

Opens the async engine, verifies it with a ping and hands out a session
factory. Repositories open one short-lived session per query.
"""

import logging
from typing import Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.store_connector import StoreConnector

logger = logging.getLogger(__name__)


class SqlAlchemyStoreConnector(StoreConnector[sessionmaker]):
    """
    SQLAlchemy implementation of StoreConnector

    Features:
    - Builds its own engine from a URI, or wraps an engine supplied by the caller
    - Recreates an owned engine on every connect() so a poisoned pool is dropped
    - Pings with SELECT 1 before reporting success
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        engine: Optional[AsyncEngine] = None,
        echo: bool = False,
    ):
        """
        Initialize the connector

        Args:
            db_uri: Database URI used to build an owned engine
            engine: Existing engine to wrap (not disposed by this connector)
            echo: Log SQL statements
        """
        if db_uri is None and engine is None:
            raise ValueError("Either db_uri or engine is required")
        self.db_uri = db_uri
        self.echo = echo
        self.engine = engine
        self._owns_engine = engine is None

    async def connect(self) -> sessionmaker:
        if self._owns_engine:
            if self.engine is not None:
                await self.engine.dispose()
            self.engine = create_async_engine(
                self.db_uri, echo=self.echo, future=True, pool_pre_ping=True
            )

        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

        logger.info(f"Connected to store ({self.engine.url.get_backend_name()})")
        return sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    async def dispose(self) -> None:
        if self._owns_engine and self.engine is not None:
            await self.engine.dispose()
            self.engine = None
