"""Unit tests for GetStatusBreakdown use case"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock

from src.app.services.store_errors import StoreQueryError
from src.app.services.ttl_cache import TTLCache
from src.app.use_cases.reporting.dtos import DataSource
from src.app.use_cases.reporting.get_status_breakdown import GetStatusBreakdown
from src.domain.invoice import InvoiceStatus

NOW = datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc)


class TestGetStatusBreakdown:
    """Test suite for GetStatusBreakdown use case"""

    @pytest.fixture
    def mock_report_repo(self):
        return AsyncMock()

    @pytest.fixture
    def use_case(self, connection, mock_report_repo, clock):
        return GetStatusBreakdown(
            connection, mock_report_repo, TTLCache(120, clock=clock), now=lambda: NOW
        )

    @pytest.mark.asyncio
    async def test_every_status_is_reported(self, use_case, mock_report_repo):
        """Test statuses without invoices are listed with zero"""
        # Arrange
        mock_report_repo.count_by_status.return_value = {
            InvoiceStatus.PAID: 5,
            InvoiceStatus.PENDING: 3,
            InvoiceStatus.OVERDUE: 2,
        }

        # Act
        result = await use_case.execute()

        # Assert
        assert result.is_ok()
        breakdown = result.value.data
        assert breakdown.total == 10
        assert breakdown.updated_at == NOW
        assert [(e.status, e.value, e.percentage) for e in breakdown.data] == [
            ("paid", 5, 50),
            ("pending", 3, 30),
            ("overdue", 2, 20),
            ("draft", 0, 0),
        ]
        assert breakdown.data[0].name == "Zaplatené"
        assert breakdown.data[0].color == "#22c55e"

    @pytest.mark.asyncio
    async def test_total_counts_every_status(self, use_case, mock_report_repo):
        mock_report_repo.count_by_status.return_value = {
            InvoiceStatus.PAID: 1,
            InvoiceStatus.PENDING: 1,
            InvoiceStatus.DRAFT: 2,
        }

        result = await use_case.execute()

        breakdown = result.value.data
        assert breakdown.total == 4
        assert sum(e.value for e in breakdown.data) == breakdown.total

    @pytest.mark.asyncio
    async def test_percentages_round_half_up(self, use_case, mock_report_repo):
        mock_report_repo.count_by_status.return_value = {
            InvoiceStatus.PAID: 1,
            InvoiceStatus.PENDING: 2,
        }

        result = await use_case.execute()

        percentages = {e.status: e.percentage for e in result.value.data.data}
        assert percentages == {"paid": 33, "pending": 67, "overdue": 0, "draft": 0}

    @pytest.mark.asyncio
    async def test_no_invoices(self, use_case, mock_report_repo):
        """Test zero total gives zero percentages instead of dividing by zero"""
        mock_report_repo.count_by_status.return_value = {}

        result = await use_case.execute()

        assert result.value.data.total == 0
        assert all(e.percentage == 0 for e in result.value.data.data)

    @pytest.mark.asyncio
    async def test_second_call_is_cached(self, use_case, mock_report_repo):
        mock_report_repo.count_by_status.return_value = {InvoiceStatus.PAID: 1}
        await use_case.execute()

        result = await use_case.execute()

        assert result.value.source is DataSource.CACHE
        mock_report_repo.count_by_status.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_query_failure(self, use_case, connection, mock_report_repo):
        mock_report_repo.count_by_status.side_effect = StoreQueryError("boom")

        result = await use_case.execute()

        assert result.is_err()
        assert result.error.code == "STATUS_COUNT_FAILED"
        connection.reset.assert_called_once()
