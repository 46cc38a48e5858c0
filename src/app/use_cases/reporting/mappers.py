"""Entity to DTO conversion for listings"""

from src.domain.client import Client
from src.domain.folder import Folder
from src.domain.reporting import ClientListing, InvoiceListing
from .dtos import (
    ClientListItemDTO,
    ClientSummaryDTO,
    FolderListItemDTO,
    FolderSummaryDTO,
    InvoiceListItemDTO,
)


def _status_value(status) -> str:
    return status.value if hasattr(status, "value") else status


def invoice_list_item(listing: InvoiceListing) -> InvoiceListItemDTO:
    invoice = listing.invoice

    # Fall back to the contact snapshot when the client row is gone
    if listing.client is not None:
        client = ClientSummaryDTO(
            id=listing.client.id,
            name=listing.client.name,
            email=listing.client.email,
            address=listing.client.address,
        )
    elif invoice.client_name or invoice.client_email:
        client = ClientSummaryDTO(
            id=invoice.client_id or "",
            name=invoice.client_name,
            email=invoice.client_email,
        )
    else:
        client = None

    folder = None
    if listing.folder is not None:
        folder = FolderSummaryDTO(id=listing.folder.id, name=listing.folder.name)

    return InvoiceListItemDTO(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        status=_status_value(invoice.status),
        total=invoice.total,
        invoice_date=invoice.invoice_date,
        due_date=invoice.due_date,
        paid_at=invoice.paid_at,
        client=client,
        folder=folder,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )


def client_list_item(listing: ClientListing) -> ClientListItemDTO:
    client = listing.client
    return ClientListItemDTO(
        id=client.id,
        name=client.name,
        email=client.email,
        address=client.address,
        invoice_count=listing.invoice_count,
        created_at=client.created_at,
    )


def client_contact(client: Client) -> ClientSummaryDTO:
    return ClientSummaryDTO(
        id=client.id,
        name=client.name,
        email=client.email,
        address=client.address,
    )


def folder_list_item(folder: Folder) -> FolderListItemDTO:
    return FolderListItemDTO(
        id=folder.id,
        name=folder.name,
        description=folder.description,
        created_at=folder.created_at,
    )
