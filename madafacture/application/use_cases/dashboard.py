"""Dashboard Use Case: today's figures at a glance."""

from dataclasses import dataclass, field
from datetime import date, datetime

from madafacture.config import get_logger
from madafacture.core.entities.closing import ProductStat
from madafacture.core.interfaces import IInvoiceStore, ISalesStore, ITransactionStore
from madafacture.core.services.daily_aggregation import day_bounds
from madafacture.core.services.reports import top_products_by_profit, total_receivables

logger = get_logger(__name__)


@dataclass
class DashboardSummary:
    """Headline figures for one day."""

    day: date
    cash_received: float
    receivables: float
    profit: float
    top_products: list[ProductStat] = field(default_factory=list)


class GetDashboardSummaryUseCase:
    """Money received today, outstanding receivables, today's profit, best sellers."""

    def __init__(
        self,
        transaction_store: ITransactionStore | None = None,
        sales_store: ISalesStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._transaction_store = transaction_store
        self._sales_store = sales_store
        self._invoice_store = invoice_store

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from madafacture.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    async def _get_sales_store(self) -> ISalesStore:
        if self._sales_store is None:
            from madafacture.infrastructure.storage.sqlite import get_sales_store

            self._sales_store = await get_sales_store()
        return self._sales_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from madafacture.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, day: date | None = None) -> DashboardSummary:
        day = day or datetime.now().date()
        start, end = day_bounds(day)

        transaction_store = await self._get_transaction_store()
        sales_store = await self._get_sales_store()
        invoice_store = await self._get_invoice_store()

        transactions = await transaction_store.list_between(start, end)
        all_sales = await sales_store.list_sales()
        all_invoices = await invoice_store.list_invoices(limit=1_000_000)

        todays_sales = [s for s in all_sales if start <= s.timestamp < end]
        todays_invoices = [
            inv for inv in all_invoices if inv.issue_date == day and inv.counts_as_sale
        ]

        summary = DashboardSummary(
            day=day,
            cash_received=sum(tx.amount for tx in transactions),
            receivables=total_receivables(all_invoices),
            profit=sum(s.profit for s in todays_sales) + sum(i.profit for i in todays_invoices),
            top_products=top_products_by_profit(all_sales, all_invoices, limit=3),
        )
        logger.debug(
            "dashboard_computed",
            day=day.isoformat(),
            cash_received=summary.cash_received,
            receivables=summary.receivables,
        )
        return summary
