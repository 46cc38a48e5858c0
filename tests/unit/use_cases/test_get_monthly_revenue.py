"""Unit tests for GetMonthlyRevenue use case"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.services.store_errors import StoreConnectionError
from src.app.services.ttl_cache import KeyedTTLCache
from src.app.use_cases.reporting.dtos import DataSource
from src.app.use_cases.reporting.get_monthly_revenue import GetMonthlyRevenue, clamp_months
from src.domain.reporting import MonthlyRevenueBucket

MARCH_15 = datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc)


class TestGetMonthlyRevenue:
    """Test suite for GetMonthlyRevenue use case"""

    @pytest.fixture
    def mock_report_repo(self):
        repo = AsyncMock()
        repo.monthly_paid_revenue.return_value = []
        return repo

    @pytest.fixture
    def cache(self, clock):
        return KeyedTTLCache(300, max_entries=24, clock=clock)

    @pytest.fixture
    def use_case(self, connection, mock_report_repo, cache):
        return GetMonthlyRevenue(
            connection, mock_report_repo, cache, now=lambda: MARCH_15
        )

    @pytest.mark.asyncio
    async def test_window_is_zero_filled_and_chronological(self, use_case, mock_report_repo):
        """Test six months oldest first with a single paid month"""
        # Arrange
        mock_report_repo.monthly_paid_revenue.return_value = [
            MonthlyRevenueBucket(year=2024, month=1, revenue=Decimal("500.00"), invoice_count=2),
        ]

        # Act
        result = await use_case.execute(months=6)

        # Assert
        assert result.is_ok()
        series = result.value.data
        assert [(m.year, m.month_number) for m in series] == [
            (2023, 10), (2023, 11), (2023, 12), (2024, 1), (2024, 2), (2024, 3),
        ]
        assert [m.month for m in series] == ["Okt", "Nov", "Dec", "Jan", "Feb", "Mar"]
        assert series[3].revenue == Decimal("500.00")
        assert series[3].invoice_count == 2
        assert all(m.revenue == 0 and m.invoice_count == 0 for i, m in enumerate(series) if i != 3)
        mock_report_repo.monthly_paid_revenue.assert_awaited_once_with(
            date(2023, 10, 1), date(2024, 4, 1)
        )

    @pytest.mark.asyncio
    async def test_reference_date_crossing_year(self, use_case):
        result = await use_case.execute(months=3, reference_date=date(2024, 1, 20))

        assert [(m.year, m.month) for m in result.value.data] == [
            (2023, "Nov"), (2023, "Dec"), (2024, "Jan"),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("requested,expected", [(None, 6), (0, 1), (-3, 1), (1, 1), (24, 24), (100, 24)])
    async def test_window_size_is_clamped(self, use_case, requested, expected):
        result = await use_case.execute(months=requested)

        assert len(result.value.data) == expected

    @pytest.mark.asyncio
    async def test_cache_is_keyed_by_window(self, use_case, mock_report_repo):
        """Test different window sizes are cached separately"""
        await use_case.execute(months=6)
        await use_case.execute(months=12)
        second = await use_case.execute(months=6)

        assert second.value.source is DataSource.CACHE
        assert mock_report_repo.monthly_paid_revenue.await_count == 2

    @pytest.mark.asyncio
    async def test_stale_window_served_on_failure(self, use_case, connection, clock):
        await use_case.execute(months=6)
        clock.now = 600
        connection.ensure_connection.side_effect = StoreConnectionError("refused")

        result = await use_case.execute(months=6)

        assert result.value.source is DataSource.CACHE_STALE
        assert len(result.value.data) == 6

    @pytest.mark.asyncio
    async def test_failure_for_uncached_window(self, use_case, connection):
        connection.ensure_connection.side_effect = StoreConnectionError("refused")

        result = await use_case.execute(months=6)

        assert result.is_err()
        assert result.error.code == "STORE_UNAVAILABLE"


def test_clamp_months():
    assert clamp_months(None) == 6
    assert clamp_months(25) == 24
    assert clamp_months(0) == 1
