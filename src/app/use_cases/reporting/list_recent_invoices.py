"""List Recent Invoices Use Case

Newest invoices for the dashboard widget.
"""

import logging
from typing import List, Optional
from libs.result import Result, Return
from src.app.repositories.criteria import MATCH_ALL_INVOICES
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.connection_manager import ConnectionLifecycleManager
from .dtos import InvoiceListItemDTO
from .errors import store_failure
from .mappers import invoice_list_item
from .pagination import PageRequest

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 5
MAX_RECENT_LIMIT = 20


class ListRecentInvoices:
    """Use Case: the latest invoices by creation time"""

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        invoice_repo: InvoiceRepository,
    ):
        self.connection = connection
        self.invoice_repo = invoice_repo

    async def execute(self, limit: Optional[int] = None) -> Result[List[InvoiceListItemDTO]]:
        page_request = PageRequest.clamp(
            1, limit, default_limit=DEFAULT_RECENT_LIMIT, max_limit=MAX_RECENT_LIMIT
        )

        try:
            await self.connection.ensure_connection()
            listings = await self.invoice_repo.list_page(
                MATCH_ALL_INVOICES, offset=0, limit=page_request.limit
            )
        except Exception as e:
            self.connection.reset(f"recent invoices failed: {type(e).__name__}")
            logger.error(f"Recent invoices error: {type(e).__name__}: {e}")
            return Return.err(store_failure(e, "Failed to fetch recent invoices", "RECENT_INVOICES_FAILED"))

        return Return.ok([invoice_list_item(listing) for listing in listings])
