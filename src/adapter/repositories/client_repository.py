"""SQLAlchemy Client Repository Implementation

Invoice counts are computed live with an outer join, so a client with no
invoices reports 0.
"""

from typing import List
from sqlmodel import select, func
from src.adapter.repositories.base import SqlAlchemyReadRepository
from src.adapter.repositories.filter_compiler import client_where_clauses
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.criteria import ClientCriteria
from src.domain.client import Client
from src.domain.invoice import Invoice
from src.domain.reporting import ClientListing


class SqlAlchemyClientRepository(SqlAlchemyReadRepository, ClientRepository):
    """SQLAlchemy implementation of ClientRepository"""

    async def count(self, criteria: ClientCriteria) -> int:
        statement = select(func.count()).select_from(Client)
        for clause in client_where_clauses(criteria):
            statement = statement.where(clause)
        return int(await self._scalar(statement))

    async def list_with_invoice_count(
        self,
        criteria: ClientCriteria,
        offset: int = 0,
        limit: int = 10,
    ) -> List[ClientListing]:
        invoice_count = func.count(Invoice.id).label("invoice_count")
        statement = (
            select(Client, invoice_count)
            .outerjoin(Invoice, Invoice.client_id == Client.id)
        )

        for clause in client_where_clauses(criteria):
            statement = statement.where(clause)

        statement = (
            statement.group_by(Client.id)
            .order_by(Client.name, Client.id)
            .offset(offset)
            .limit(limit)
        )

        rows = await self._execute(statement, lambda result: result.all())
        return [
            ClientListing(client=client, invoice_count=int(count or 0))
            for client, count in rows
        ]

    async def list_contacts(self) -> List[Client]:
        statement = select(Client).order_by(Client.name, Client.id)
        return list(await self._execute(statement, lambda result: result.scalars().all()))
