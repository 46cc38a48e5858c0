"""List Client Contacts Use Case

Every client's name, email and address for lookups, without paging.
"""

import logging
from typing import List
from libs.result import Result, Return
from src.app.repositories.client_repository import ClientRepository
from src.app.services.connection_manager import ConnectionLifecycleManager
from .dtos import ClientSummaryDTO
from .errors import store_failure
from .mappers import client_contact

logger = logging.getLogger(__name__)


class ListClientContacts:
    """Use Case: client lookup list ordered by name"""

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        client_repo: ClientRepository,
    ):
        self.connection = connection
        self.client_repo = client_repo

    async def execute(self) -> Result[List[ClientSummaryDTO]]:
        try:
            await self.connection.ensure_connection()
            clients = await self.client_repo.list_contacts()
        except Exception as e:
            self.connection.reset(f"client contacts failed: {type(e).__name__}")
            logger.error(f"Error fetching client contacts: {type(e).__name__}: {e}")
            return Return.err(store_failure(e, "Failed to fetch clients", "LIST_CLIENT_CONTACTS_FAILED"))

        return Return.ok([client_contact(client) for client in clients])
