"""Client Repository Interface

Defines the contract for client listing reads.
"""

from abc import ABC, abstractmethod
from typing import List
from src.app.repositories.criteria import ClientCriteria
from src.domain.client import Client
from src.domain.reporting import ClientListing


class ClientRepository(ABC):
    """Repository interface for Client listing queries"""

    @abstractmethod
    async def count(self, criteria: ClientCriteria) -> int:
        """
        Count clients matching the criteria

        Args:
            criteria: Validated client criteria

        Returns:
            Number of matching clients
        """
        pass

    @abstractmethod
    async def list_with_invoice_count(
        self,
        criteria: ClientCriteria,
        offset: int = 0,
        limit: int = 10,
    ) -> List[ClientListing]:
        """
        Retrieve one page of clients with a live invoice count each

        Args:
            criteria: Validated client criteria
            offset: Number of clients to skip
            limit: Maximum number of clients to return

        Returns:
            Clients ordered by name, each with its invoice count
        """
        pass

    @abstractmethod
    async def list_contacts(self) -> List[Client]:
        """
        Retrieve every client for lookups (name, email, address)

        Returns:
            Clients ordered by name
        """
        pass
