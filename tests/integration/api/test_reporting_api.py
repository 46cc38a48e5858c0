"""Integration tests for the reporting API endpoints"""

import pytest
import pytest_asyncio
from datetime import date, datetime, timezone
from decimal import Decimal
from httpx import ASGITransport, AsyncClient

from src.app.services.connection_manager import ConnectionLifecycleManager
from src.app.services.store_connector import StoreConnector
from src.app.services.ttl_cache import KeyedTTLCache, TTLCache
from src.app.use_cases.reporting.get_invoice_stats import build_invoice_stats
from src.depends import ReportingContext
from src.domain.base import utc_now
from src.domain.invoice import InvoiceStatus
from src.domain.reporting import PeriodAnchors, PeriodTotals


class UnreachableConnector(StoreConnector):
    async def connect(self):
        raise OSError("connection refused")

    async def dispose(self):
        pass


@pytest.fixture
def this_month():
    return PeriodAnchors.for_reference(utc_now().date())


class TestReportEndpoints:
    """Integration test suite for the cached report endpoints"""

    @pytest.mark.asyncio
    async def test_stats_from_database_then_cache(self, client: AsyncClient, seed, this_month):
        """Test GET /stats computes once and then serves the cached copy"""
        # Arrange
        folder = await seed.folder()
        await seed.invoice(folder, status=InvoiceStatus.PAID, total="1200.00", invoice_date=this_month.current_start)
        await seed.invoice(folder, status=InvoiceStatus.PAID, total="1000.00", invoice_date=this_month.previous_start)
        await seed.invoice(folder, status=InvoiceStatus.PENDING, total="400.00", invoice_date=this_month.current_start)

        # Act
        first = await client.get("/api/invoices/stats")
        second = await client.get("/api/invoices/stats")

        # Assert
        assert first.status_code == 200
        assert first.headers["X-Data-Source"] == "database"
        assert first.headers["Cache-Control"] == "public, s-maxage=300"
        data = first.json()
        assert Decimal(data["totalRevenue"]) == Decimal("2200.00")
        assert Decimal(data["thisMonthRevenue"]) == Decimal("1200.00")
        assert data["revenueChange"] == 20.0
        assert data["totalInvoices"] == 3
        assert data["thisMonthInvoices"] == 2
        assert data["paidInvoicesThisMonth"] == 1
        assert data["lastMonthInvoices"] == 1
        assert data["invoiceChange"] == 100.0
        assert "updatedAt" in data

        assert second.headers["X-Data-Source"] == "cache"
        assert second.json() == data

    @pytest.mark.asyncio
    async def test_no_cache_header_forces_recompute(self, client: AsyncClient):
        await client.get("/api/invoices/stats")

        response = await client.get("/api/invoices/stats", headers={"Cache-Control": "no-cache"})

        assert response.headers["X-Data-Source"] == "database"

    @pytest.mark.asyncio
    async def test_monthly_revenue_window(self, client: AsyncClient, seed, this_month):
        folder = await seed.folder()
        await seed.invoice(folder, status=InvoiceStatus.PAID, total="250.00", invoice_date=this_month.current_start)

        response = await client.get("/api/invoices/monthly-revenue", params={"months": 3})

        assert response.status_code == 200
        series = response.json()
        assert len(series) == 3
        assert [(m["year"], m["monthNumber"]) for m in series] == sorted(
            (m["year"], m["monthNumber"]) for m in series
        )
        assert Decimal(series[-1]["revenue"]) == Decimal("250.00")
        assert series[-1]["invoiceCount"] == 1
        assert Decimal(series[0]["revenue"]) == 0
        assert set(series[0]) == {"month", "monthNumber", "year", "revenue", "invoiceCount"}

    @pytest.mark.asyncio
    async def test_monthly_revenue_clamps_and_defaults(self, client: AsyncClient):
        too_many = await client.get("/api/invoices/monthly-revenue", params={"months": 100})
        default = await client.get("/api/invoices/monthly-revenue")

        assert len(too_many.json()) == 24
        assert len(default.json()) == 6

    @pytest.mark.asyncio
    async def test_monthly_revenue_rejects_non_integer(self, client: AsyncClient):
        response = await client.get("/api/invoices/monthly-revenue", params={"months": "six"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_status_count(self, client: AsyncClient, seed):
        folder = await seed.folder()
        await seed.invoice(folder, status=InvoiceStatus.PAID)
        await seed.invoice(folder, status=InvoiceStatus.PAID)
        await seed.invoice(folder, status=InvoiceStatus.OVERDUE)
        await seed.invoice(folder, status=InvoiceStatus.DRAFT)

        response = await client.get("/api/invoices/status-count")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 4
        assert [(e["status"], e["value"], e["percentage"]) for e in body["data"]] == [
            ("paid", 2, 50),
            ("pending", 0, 0),
            ("overdue", 1, 25),
            ("draft", 1, 25),
        ]
        assert response.headers["Cache-Control"] == "public, s-maxage=120"


class TestStoreFailure:
    """Integration test suite for behaviour when the store is unreachable"""

    @pytest.fixture
    def context(self, clock):
        return ReportingContext(
            connection=ConnectionLifecycleManager(UnreachableConnector()),
            stats_cache=KeyedTTLCache(300, max_entries=12, clock=clock),
            status_cache=TTLCache(120, clock=clock),
            monthly_revenue_cache=KeyedTTLCache(300, clock=clock),
        )

    @pytest_asyncio.fixture
    async def down_client(self, context):
        from src.api.app import create_app
        from config import ApplicationConfig

        app = create_app(ApplicationConfig, context=context)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac

    @pytest.mark.asyncio
    async def test_unavailable_without_cache(self, down_client: AsyncClient):
        response = await down_client.get("/api/invoices/stats")

        assert response.status_code == 503
        assert response.json() == {
            "error": {"code": "STORE_UNAVAILABLE", "message": "Database connection failed"}
        }

    @pytest.mark.asyncio
    async def test_stale_cache_served_when_store_is_down(
        self, down_client: AsyncClient, context, clock, this_month
    ):
        """Test a value cached 30s ago is served as cache-stale"""
        # Arrange
        month_key = (this_month.current_start.year, this_month.current_start.month)
        context.stats_cache.set(month_key, build_invoice_stats(PeriodTotals(total_invoices=9), utc_now()))
        clock.now = 30

        # Act
        response = await down_client.get("/api/invoices/stats")

        # Assert
        assert response.status_code == 200
        assert response.headers["X-Data-Source"] == "cache-stale"
        assert response.headers["Cache-Control"] == "no-cache"
        assert response.json()["totalInvoices"] == 9

    @pytest.mark.asyncio
    async def test_listing_unavailable(self, down_client: AsyncClient):
        response = await down_client.get("/api/invoices")

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"

    @pytest.mark.asyncio
    async def test_validation_precedes_store_access(self, down_client: AsyncClient):
        response = await down_client.get("/api/invoices", params={"folderId": "nope"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_FOLDER_ID"


class TestListingEndpoints:
    """Integration test suite for the listing endpoints"""

    @pytest.mark.asyncio
    async def test_list_invoices_pagination(self, client: AsyncClient, seed):
        # Arrange
        folder = await seed.folder()
        acme = await seed.client("Acme s.r.o.", "billing@acme.sk")
        for _ in range(3):
            await seed.invoice(folder, acme)

        # Act
        response = await client.get("/api/invoices", params={"page": 1, "limit": 5})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["pagination"] == {
            "total": 3,
            "page": 1,
            "limit": 5,
            "pages": 1,
            "hasNext": False,
            "hasPrev": False,
        }
        first = body["invoices"][0]
        assert first["invoiceNumber"] == "FA-2024-003"
        assert first["client"]["email"] == "billing@acme.sk"
        assert first["folder"] == {"id": folder.id, "name": "2024"}
        assert first["status"] == "pending"
        assert "X-Data-Source" not in response.headers

    @pytest.mark.asyncio
    async def test_list_invoices_filters(self, client: AsyncClient, seed):
        q1 = await seed.folder("Q1")
        q2 = await seed.folder("Q2")
        await seed.invoice(q1, status=InvoiceStatus.PAID)
        await seed.invoice(q1, status=InvoiceStatus.DRAFT)
        await seed.invoice(q2, status=InvoiceStatus.PAID)

        response = await client.get("/api/invoices", params={"folderId": q1.id, "status": "paid"})

        body = response.json()
        assert body["pagination"]["total"] == 1
        assert body["invoices"][0]["folder"]["name"] == "Q1"

    @pytest.mark.asyncio
    async def test_list_invoices_invalid_status(self, client: AsyncClient):
        response = await client.get("/api/invoices", params={"status": "archived"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_STATUS"

    @pytest.mark.asyncio
    async def test_list_invoices_non_integer_page(self, client: AsyncClient):
        response = await client.get("/api/invoices", params={"page": "first"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_huge_page_is_validation_error(self, client: AsyncClient, context):
        """Test an oversized page is a 400 and leaves the shared connection alone"""
        # Arrange
        assert (await client.get("/api/invoices")).status_code == 200

        # Act
        invoices = await client.get("/api/invoices", params={"page": 10 ** 19})
        clients = await client.get("/api/clients", params={"page": 10 ** 19})

        # Assert
        assert invoices.status_code == 400
        assert invoices.json()["error"]["code"] == "VALIDATION_ERROR"
        assert clients.status_code == 400
        assert context.connection.is_connected

    @pytest.mark.asyncio
    async def test_search(self, client: AsyncClient, seed):
        folder = await seed.folder()
        acme = await seed.client("Acme s.r.o.", "billing@acme.sk")
        await seed.invoice(folder, acme, number="FA-2024-001")

        response = await client.get("/api/invoices/search", params={"q": "acm"})

        assert response.status_code == 200
        body = response.json()
        assert body["meta"] == {"count": 1, "hasMore": False, "query": "acm"}
        assert body["data"][0]["invoiceNumber"] == "FA-2024-001"

    @pytest.mark.asyncio
    async def test_search_too_short(self, client: AsyncClient):
        response = await client.get("/api/invoices/search", params={"q": "a"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "SEARCH_TOO_SHORT"

    @pytest.mark.asyncio
    async def test_recent(self, client: AsyncClient, seed):
        folder = await seed.folder()
        for day in range(1, 8):
            await seed.invoice(folder, created_at=datetime(2024, 1, day, 12, 0, tzinfo=timezone.utc))

        response = await client.get("/api/invoices/recent")

        assert response.status_code == 200
        created = [item["createdAt"] for item in response.json()]
        assert len(created) == 5
        assert created == sorted(created, reverse=True)

    @pytest.mark.asyncio
    async def test_list_clients(self, client: AsyncClient, seed):
        folder = await seed.folder()
        acme = await seed.client("Acme s.r.o.", "billing@acme.sk", address="Hlavná 1")
        await seed.client("Beta a.s.", "office@beta.sk")
        await seed.invoice(folder, acme, invoice_date=date(2024, 2, 1))
        await seed.invoice(folder, acme, invoice_date=date(2024, 3, 1))

        response = await client.get("/api/clients", params={"search": "a"})

        assert response.status_code == 200
        body = response.json()
        assert [(c["name"], c["invoiceCount"]) for c in body["data"]] == [
            ("Acme s.r.o.", 2),
            ("Beta a.s.", 0),
        ]
        assert body["data"][0]["address"] == "Hlavná 1"
        assert body["pagination"]["total"] == 2

    @pytest.mark.asyncio
    async def test_list_folders(self, client: AsyncClient, seed):
        q1 = await seed.folder("Q1")
        await seed.folder("Q2")

        response = await client.get("/api/folders", params={"limit": 1})

        assert response.status_code == 200
        assert response.headers["Cache-Control"] == "public, s-maxage=60, stale-while-revalidate=30"
        body = response.json()
        assert len(body) == 1
        assert set(body[0]) == {"id", "name", "description", "createdAt"}

        scoped = await client.get("/api/invoices", params={"folderId": q1.id})
        assert scoped.status_code == 200

    @pytest.mark.asyncio
    async def test_client_contacts(self, client: AsyncClient, seed):
        await seed.client("Beta a.s.", "office@beta.sk")
        await seed.client("Acme s.r.o.", "billing@acme.sk", address="Hlavná 1")

        response = await client.get("/api/clients/all")

        assert response.status_code == 200
        assert [(c["name"], c["email"], c["address"]) for c in response.json()] == [
            ("Acme s.r.o.", "billing@acme.sk", "Hlavná 1"),
            ("Beta a.s.", "office@beta.sk", ""),
        ]
