import pytest
import pytest_asyncio
from datetime import date, datetime, timezone
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.sqlalchemy_connector import SqlAlchemyStoreConnector
from src.app.services.connection_manager import ConnectionLifecycleManager
from src.app.services.ttl_cache import KeyedTTLCache, TTLCache
from src.depends import ReportingContext
from src.domain import Client, Folder, Invoice, InvoiceLine, InvoiceStatus  # noqa: F401 (register tables)
from tests.fixtures.builders import FakeClock


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    # A file (not :memory:) so concurrent sessions see the same database
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'reporting_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def connection(engine):
    return ConnectionLifecycleManager(SqlAlchemyStoreConnector(engine=engine))


@pytest.fixture
def context(connection, clock):
    """Reporting context wired to the test engine with a manual clock"""
    return ReportingContext(
        connection=connection,
        stats_cache=KeyedTTLCache(300, max_entries=12, clock=clock),
        status_cache=TTLCache(120, clock=clock),
        monthly_revenue_cache=KeyedTTLCache(300, max_entries=24, clock=clock),
        query_timeout=5,
    )


@pytest_asyncio.fixture
async def client(context):
    """Create test client bound to the test reporting context"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig, context=context)

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


class Seeder:
    """Inserts folders, clients and invoices through a session"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._sequence = 0

    async def folder(self, name: str = "2024") -> Folder:
        folder = Folder.named(name)
        self.session.add(folder)
        await self.session.commit()
        return folder

    async def client(self, name: str, email: str, address: str = "") -> Client:
        client = Client(name=name, email=email, address=address)
        self.session.add(client)
        await self.session.commit()
        return client

    async def invoice(
        self,
        folder: Folder,
        client: Client = None,
        number: str = None,
        status: InvoiceStatus = InvoiceStatus.PENDING,
        total: str = "100.00",
        invoice_date: date = date(2024, 3, 1),
        created_at: datetime = None,
    ) -> Invoice:
        self._sequence += 1
        invoice = Invoice(
            invoice_number=number or f"FA-2024-{self._sequence:03d}",
            status=status,
            total=Decimal(total),
            invoice_date=invoice_date,
            due_date=invoice_date,
            paid_at=datetime.combine(invoice_date, datetime.min.time(), tzinfo=timezone.utc) if status is InvoiceStatus.PAID else None,
            folder_id=folder.id,
            client_id=client.id if client else None,
            client_name=client.name if client else "",
            client_email=client.email if client else "",
            created_at=created_at or datetime(2024, 1, 1, 0, self._sequence, tzinfo=timezone.utc),
        )
        self.session.add(invoice)
        await self.session.commit()
        return invoice


@pytest.fixture
def seed(db_session):
    return Seeder(db_session)
