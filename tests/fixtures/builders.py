"""Builders for domain objects used across unit tests"""

from datetime import date, datetime, timezone
from decimal import Decimal

from src.domain.client import Client
from src.domain.folder import Folder
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.reporting import InvoiceListing

FOLDER_ID = "3c0c4e8e-0b5e-4e55-9a8b-7d4c2c6b9e21"


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_listing(number: str = "FA-2024-001", with_client: bool = True) -> InvoiceListing:
    client = None
    if with_client:
        client = Client(name="Acme s.r.o.", email="billing@acme.sk", address="Hlavná 1")
    folder = Folder.named("2024")
    folder.id = FOLDER_ID
    invoice = Invoice(
        invoice_number=number,
        status=InvoiceStatus.PENDING,
        total=Decimal("120.00"),
        invoice_date=date(2024, 3, 1),
        due_date=date(2024, 3, 15),
        folder_id=FOLDER_ID,
        client_id=client.id if client else None,
        client_name="Acme s.r.o.",
        client_email="billing@acme.sk",
        created_at=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
        updated_at=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
    )
    return InvoiceListing(invoice=invoice, client=client, folder=folder)
