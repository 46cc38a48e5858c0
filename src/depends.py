from dataclasses import dataclass
from typing import Optional
from fastapi import Request
from src.adapter.repositories.client_repository import SqlAlchemyClientRepository
from src.adapter.repositories.folder_repository import SqlAlchemyFolderRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.report_repository import SqlAlchemyInvoiceReportRepository
from src.adapter.services.sqlalchemy_connector import SqlAlchemyStoreConnector
from src.app.services.connection_manager import ConnectionLifecycleManager
from src.app.services.store_connector import StoreConnector
from src.app.services.ttl_cache import KeyedTTLCache, TTLCache


@dataclass
class ReportingContext:
    """Process-wide state shared by every request: the connection and the report caches"""

    connection: ConnectionLifecycleManager
    stats_cache: KeyedTTLCache
    status_cache: TTLCache
    monthly_revenue_cache: KeyedTTLCache
    query_timeout: Optional[float] = None

    @classmethod
    def from_config(cls, config, connector: Optional[StoreConnector] = None) -> "ReportingContext":
        connector = connector or SqlAlchemyStoreConnector(db_uri=config.DB_URI)
        return cls(
            connection=ConnectionLifecycleManager(
                connector, connect_timeout=config.DB_CONNECT_TIMEOUT_SECONDS
            ),
            stats_cache=KeyedTTLCache(
                config.STATS_CACHE_TTL_SECONDS,
                max_entries=config.STATS_CACHE_MAX_ENTRIES,
            ),
            status_cache=TTLCache(config.STATUS_CACHE_TTL_SECONDS),
            monthly_revenue_cache=KeyedTTLCache(
                config.MONTHLY_REVENUE_CACHE_TTL_SECONDS,
                max_entries=config.MONTHLY_REVENUE_CACHE_MAX_ENTRIES,
            ),
            query_timeout=config.QUERY_TIMEOUT_SECONDS,
        )

    def invoice_repository(self) -> SqlAlchemyInvoiceRepository:
        return SqlAlchemyInvoiceRepository(self.connection, query_timeout=self.query_timeout)

    def client_repository(self) -> SqlAlchemyClientRepository:
        return SqlAlchemyClientRepository(self.connection, query_timeout=self.query_timeout)

    def folder_repository(self) -> SqlAlchemyFolderRepository:
        return SqlAlchemyFolderRepository(self.connection, query_timeout=self.query_timeout)

    def report_repository(self) -> SqlAlchemyInvoiceReportRepository:
        return SqlAlchemyInvoiceReportRepository(self.connection, query_timeout=self.query_timeout)

    async def aclose(self) -> None:
        await self.connection.aclose()


def get_reporting_context(request: Request) -> ReportingContext:
    return request.app.state.reporting
