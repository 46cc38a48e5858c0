"""Search Invoices Use Case

Quick search box: short result list without a total count.
"""

import logging
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.criteria import FieldMatch, MatchMode
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.connection_manager import ConnectionLifecycleManager
from .dtos import InvoiceSearchResponseDTO, SearchMetaDTO
from .errors import store_failure
from .mappers import invoice_list_item
from .pagination import PageRequest
from .query_filters import InvoiceQueryFilterBuilder

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MAX_QUERY_LENGTH = 100
DEFAULT_SEARCH_LIMIT = 20
MAX_SEARCH_LIMIT = 50

# Client name by prefix, invoice number anywhere
QUICK_SEARCH_FIELDS = (
    FieldMatch("client_name", MatchMode.PREFIX),
    FieldMatch("invoice_number", MatchMode.CONTAINS),
)


class SearchInvoices:
    """
    Use Case: Invoice quick search

    Business Rules:
    1. Query is trimmed and must be 2-100 characters
    2. limit defaults to 20 and is clamped to [1, 50]
    3. meta.hasMore is true when the result filled the limit
    """

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        invoice_repo: InvoiceRepository,
    ):
        self.connection = connection
        self.invoice_repo = invoice_repo
        self.filter_builder = InvoiceQueryFilterBuilder(
            search_fields=QUICK_SEARCH_FIELDS, max_search_length=MAX_QUERY_LENGTH
        )

    async def execute(
        self, query: Optional[str], limit: Optional[int] = None
    ) -> Result[InvoiceSearchResponseDTO]:
        criteria_result = self.filter_builder.build(query, min_search_length=MIN_QUERY_LENGTH)
        if criteria_result.is_err():
            return criteria_result
        criteria = criteria_result.value

        page_request = PageRequest.clamp(
            1, limit, default_limit=DEFAULT_SEARCH_LIMIT, max_limit=MAX_SEARCH_LIMIT
        )

        try:
            await self.connection.ensure_connection()
            listings = await self.invoice_repo.list_page(criteria, offset=0, limit=page_request.limit)
        except Exception as e:
            self.connection.reset(f"invoice search failed: {type(e).__name__}")
            logger.error(f"Error searching invoices: {type(e).__name__}: {e}")
            return Return.err(store_failure(e, "Failed to search invoices", "SEARCH_FAILED"))

        return Return.ok(
            InvoiceSearchResponseDTO(
                data=[invoice_list_item(listing) for listing in listings],
                meta=SearchMetaDTO(
                    count=len(listings),
                    has_more=len(listings) == page_request.limit,
                    query=criteria.search.term,
                ),
            )
        )
