"""SQLAlchemy Invoice Repository Implementation

Implements invoice listing reads using the shared session factory.
"""

from typing import List
from sqlmodel import select, func
from src.adapter.repositories.base import SqlAlchemyReadRepository
from src.adapter.repositories.filter_compiler import invoice_where_clauses, needs_client_join
from src.app.repositories.criteria import InvoiceCriteria
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.client import Client
from src.domain.folder import Folder
from src.domain.invoice import Invoice
from src.domain.reporting import InvoiceListing


class SqlAlchemyInvoiceRepository(SqlAlchemyReadRepository, InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Clients and folders are outer-joined so invoices whose client was
    removed still list.
    """

    async def count(self, criteria: InvoiceCriteria) -> int:
        """
        Count invoices matching the criteria

        Args:
            criteria: Validated invoice criteria

        Returns:
            Number of matching invoices
        """
        statement = select(func.count()).select_from(Invoice)
        if needs_client_join(criteria):
            statement = statement.outerjoin(Client, Invoice.client_id == Client.id)

        for clause in invoice_where_clauses(criteria):
            statement = statement.where(clause)

        return int(await self._scalar(statement))

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
        statement = (
            select(Invoice, Client, Folder)
            .outerjoin(Client, Invoice.client_id == Client.id)
            .outerjoin(Folder, Invoice.folder_id == Folder.id)
        )

        for clause in invoice_where_clauses(criteria):
            statement = statement.where(clause)

        statement = statement.order_by(Invoice.created_at.desc(), Invoice.id)
        statement = statement.offset(offset).limit(limit)

        rows = await self._execute(statement, lambda result: result.all())
        return [
            InvoiceListing(invoice=invoice, client=client, folder=folder)
            for invoice, client, folder in rows
        ]
