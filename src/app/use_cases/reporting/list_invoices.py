"""List Invoices Use Case

Paginated, searchable invoice listing scoped by folder and status.
"""

import asyncio
import logging
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.connection_manager import ConnectionLifecycleManager
from .dtos import InvoiceListResponseDTO
from .errors import store_failure
from .mappers import invoice_list_item
from .pagination import PageRequest
from .query_filters import InvoiceQueryFilterBuilder, InvoiceScope

logger = logging.getLogger(__name__)


class ListInvoices:
    """
    Use Case: Invoice listing

    Business Rules:
    1. page is raised to 1 and capped at MAX_PAGE (above it is a validation error);
       limit defaults to 10 and is clamped to [1, 100]
    2. Search is trimmed; invoice number matches by prefix, client name/email by substring
    3. A malformed folder id or unknown status is rejected before the store is queried
    4. Count and page are fetched concurrently
    5. No match is an empty page, not an error

    Flow:
    1. Build criteria (validation)
    2. Ensure connection
    3. Fetch total and page concurrently
    4. Build pagination metadata
    """

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        invoice_repo: InvoiceRepository,
        filter_builder: Optional[InvoiceQueryFilterBuilder] = None,
    ):
        self.connection = connection
        self.invoice_repo = invoice_repo
        self.filter_builder = filter_builder or InvoiceQueryFilterBuilder()

    async def execute(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        search: Optional[str] = None,
        folder_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Result[InvoiceListResponseDTO]:
        """
        List invoices

        Args:
            page: Requested page (1-based)
            limit: Requested page size
            search: Free-text search term
            folder_id: Restrict to one folder
            status: Restrict to one status

        Returns:
            Result[InvoiceListResponseDTO]: Page of invoices with pagination metadata
        """
        criteria_result = self.filter_builder.build(
            search, InvoiceScope(folder_id=folder_id, status=status)
        )
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
                self.invoice_repo.count(criteria),
                self.invoice_repo.list_page(
                    criteria, offset=page_request.offset, limit=page_request.limit
                ),
            )
        except Exception as e:
            self.connection.reset(f"invoice listing failed: {type(e).__name__}")
            logger.error(f"Error fetching invoices: {type(e).__name__}: {e}")
            return Return.err(store_failure(e, "Failed to fetch invoices", "LIST_INVOICES_FAILED"))

        return Return.ok(
            InvoiceListResponseDTO(
                invoices=[invoice_list_item(listing) for listing in listings],
                pagination=page_request.paginate(total),
            )
        )
