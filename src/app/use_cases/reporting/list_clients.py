"""List Clients Use Case

Paginated, searchable client listing with a live invoice count per client.
"""

import asyncio
import logging
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.client_repository import ClientRepository
from src.app.services.connection_manager import ConnectionLifecycleManager
from .dtos import ClientListResponseDTO
from .errors import store_failure
from .mappers import client_list_item
from .pagination import PageRequest
from .query_filters import ClientQueryFilterBuilder

logger = logging.getLogger(__name__)


class ListClients:
    """
    Use Case: Client listing

    Same paging bounds as the invoice listing. invoiceCount is joined live on
    every request rather than cached, so it always reflects current invoices.
    """

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        client_repo: ClientRepository,
        filter_builder: Optional[ClientQueryFilterBuilder] = None,
    ):
        self.connection = connection
        self.client_repo = client_repo
        self.filter_builder = filter_builder or ClientQueryFilterBuilder()

    async def execute(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        search: Optional[str] = None,
    ) -> Result[ClientListResponseDTO]:
        criteria_result = self.filter_builder.build(search)
        if criteria_result.is_err():
            return criteria_result
        criteria = criteria_result.value

        page_result = PageRequest.validate(page, limit)
        if page_result.is_err():
            return page_result
        page_request = page_result.value

        try:
            await self.connection.ensure_connection()
            total, listings = await asyncio.gather(
                self.client_repo.count(criteria),
                self.client_repo.list_with_invoice_count(
                    criteria, offset=page_request.offset, limit=page_request.limit
                ),
            )
        except Exception as e:
            self.connection.reset(f"client listing failed: {type(e).__name__}")
            logger.error(f"Error fetching clients: {type(e).__name__}: {e}")
            return Return.err(store_failure(e, "Failed to fetch clients", "LIST_CLIENTS_FAILED"))

        return Return.ok(
            ClientListResponseDTO(
                data=[client_list_item(listing) for listing in listings],
                pagination=page_request.paginate(total),
            )
        )
