"""Invoice Repository Interface

Defines the contract for invoice listing reads.
"""

from abc import ABC, abstractmethod
from typing import List
from src.app.repositories.criteria import InvoiceCriteria
from src.domain.reporting import InvoiceListing


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice listing queries

    count() and list_page() are independent reads over the same criteria so
    callers may run them concurrently.
    """

    @abstractmethod
    async def count(self, criteria: InvoiceCriteria) -> int:
        """
        Count invoices matching the criteria

        Args:
            criteria: Validated invoice criteria

        Returns:
            Number of matching invoices
        """
        pass

    @abstractmethod
    async def list_page(
        self,
        criteria: InvoiceCriteria,
        offset: int = 0,
        limit: int = 10,
    ) -> List[InvoiceListing]:
        """
        Retrieve one page of matching invoices, newest first

        Args:
            criteria: Validated invoice criteria
            offset: Number of invoices to skip
            limit: Maximum number of invoices to return

        Returns:
            Invoices joined with their client and folder
        """
        pass
