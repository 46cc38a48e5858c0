"""Invoice Report Repository Interface

Defines the aggregation queries behind the dashboard.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List
from src.domain.invoice import InvoiceStatus
from src.domain.reporting import MonthlyRevenueBucket, PeriodAnchors, PeriodTotals


class InvoiceReportRepository(ABC):
    """
    Repository interface for invoice aggregations

    Each method is a single aggregation pass over the invoice table.
    Branches with no matching rows report 0, never an error.
    """

    @abstractmethod
    async def aggregate_period_totals(self, anchors: PeriodAnchors) -> PeriodTotals:
        """
        Compute revenue and invoice counts for the current and previous period

        Args:
            anchors: Period boundaries

        Returns:
            PeriodTotals with every branch defaulted to 0
        """
        pass

    @abstractmethod
    async def monthly_paid_revenue(self, start: date, end: date) -> List[MonthlyRevenueBucket]:
        """
        Group paid invoices dated in [start, end) by calendar month

        Args:
            start: First day of the window (inclusive)
            end: First day after the window (exclusive)

        Returns:
            One bucket per month that has paid invoices; empty months are omitted
        """
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[InvoiceStatus, int]:
        """
        Count invoices per status

        Returns:
            Mapping of observed statuses to counts
        """
        pass
