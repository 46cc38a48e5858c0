"""SQLAlchemy Invoice Report Repository Implementation

Each report is one SELECT. Independent branches are expressed as
conditional aggregates (SUM(CASE ...)) so the table is scanned once.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, List
from sqlalchemy import and_, case, extract, func, select
from src.adapter.repositories.base import SqlAlchemyReadRepository
from src.app.repositories.report_repository import InvoiceReportRepository
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.reporting import MonthlyRevenueBucket, PeriodAnchors, PeriodTotals

CENT = Decimal("0.01")


def _money(value) -> Decimal:
    # SQLite hands back floats for SUM over NUMERIC
    return Decimal(str(value or 0)).quantize(CENT)


def _sum_total(condition):
    return func.coalesce(func.sum(case((condition, Invoice.total), else_=0)), 0)


def _count(condition):
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


def _dated_between(start: date, end: date):
    return and_(Invoice.invoice_date >= start, Invoice.invoice_date < end)


class SqlAlchemyInvoiceReportRepository(SqlAlchemyReadRepository, InvoiceReportRepository):
    """
    SQLAlchemy implementation of InvoiceReportRepository

    Features:
    - Single-pass multi-branch period aggregation
    - Month grouping via EXTRACT (portable across SQLite and PostgreSQL)
    - Empty branches default to 0 through COALESCE
    """

    async def aggregate_period_totals(self, anchors: PeriodAnchors) -> PeriodTotals:
        """
        Compute revenue and invoice counts for the current and previous period

        Args:
            anchors: Period boundaries

        Returns:
            PeriodTotals with every branch defaulted to 0
        """
        paid = Invoice.status == InvoiceStatus.PAID
        current = _dated_between(anchors.current_start, anchors.current_end)
        previous = _dated_between(anchors.previous_start, anchors.previous_end)

        statement = select(
            _sum_total(paid).label("total_revenue"),
            _sum_total(and_(paid, current)).label("current_revenue"),
            _sum_total(and_(paid, previous)).label("previous_revenue"),
            func.count(Invoice.id).label("total_invoices"),
            _count(current).label("current_invoices"),
            _count(previous).label("previous_invoices"),
            _count(and_(paid, current)).label("current_paid_invoices"),
        ).select_from(Invoice)

        row = await self._execute(statement, lambda result: result.one())

        return PeriodTotals(
            total_revenue=_money(row.total_revenue),
            current_revenue=_money(row.current_revenue),
            previous_revenue=_money(row.previous_revenue),
            total_invoices=int(row.total_invoices or 0),
            current_invoices=int(row.current_invoices or 0),
            previous_invoices=int(row.previous_invoices or 0),
            current_paid_invoices=int(row.current_paid_invoices or 0),
        )

    async def monthly_paid_revenue(self, start: date, end: date) -> List[MonthlyRevenueBucket]:
        """
        Group paid invoices dated in [start, end) by calendar month

        Args:
            start: First day of the window (inclusive)
            end: First day after the window (exclusive)

        Returns:
            One bucket per month that has paid invoices
        """
        year = extract("year", Invoice.invoice_date)
        month = extract("month", Invoice.invoice_date)

        statement = (
            select(
                year.label("year"),
                month.label("month"),
                func.coalesce(func.sum(Invoice.total), 0).label("revenue"),
                func.count(Invoice.id).label("invoice_count"),
            )
            .where(Invoice.status == InvoiceStatus.PAID)
            .where(_dated_between(start, end))
            .group_by(year, month)
            .order_by(year, month)
        )

        rows = await self._execute(statement, lambda result: result.all())
        return [
            MonthlyRevenueBucket(
                year=int(row.year),
                month=int(row.month),
                revenue=_money(row.revenue),
                invoice_count=int(row.invoice_count),
            )
            for row in rows
        ]

    async def count_by_status(self) -> Dict[InvoiceStatus, int]:
        statement = (
            select(Invoice.status, func.count(Invoice.id).label("count"))
            .group_by(Invoice.status)
        )
        rows = await self._execute(statement, lambda result: result.all())
        return {InvoiceStatus(status): int(count) for status, count in rows}
