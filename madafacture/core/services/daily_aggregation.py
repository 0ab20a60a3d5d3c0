"""
Daily journal aggregation.

Two independent views of a day are produced:

- money received, summed from the payment ledger;
- estimated profit, summed from quick sales and the line items of the
  day's documents.

They are expected to reconcile but are never forced to: a credit sale that
never produced a ledger entry shows up in profit only.
"""

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta

from madafacture.config import get_logger
from madafacture.core.entities.closing import DailyStats, DailyTotals, ProductStat
from madafacture.core.entities.invoice import Invoice, InvoiceStatus
from madafacture.core.entities.sale import QuickSale
from madafacture.core.entities.transaction import PaymentMethod, PaymentTransaction
from madafacture.core.interfaces.invoice_store import IInvoiceStore
from madafacture.core.interfaces.sales_store import ISalesStore
from madafacture.core.interfaces.transaction_store import ITransactionStore

logger = get_logger(__name__)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return [start, end) of a local calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def aggregate_products(
    sales: Iterable[QuickSale], invoices: Iterable[Invoice]
) -> list[ProductStat]:
    """
    Merge quick sales and document lines into one bucket per product name.

    Revenue and profit are multiplied out per sale before summing, so two
    sales of the same name at different prices still add up exactly.
    Buckets are ordered by revenue, then name, for a stable result.
    """
    buckets: dict[str, dict[str, float]] = {}

    def _add(name: str, quantity: int, revenue: float, profit: float) -> None:
        bucket = buckets.setdefault(
            name, {"quantity": 0, "revenue": 0.0, "profit": 0.0}
        )
        bucket["quantity"] += quantity
        bucket["revenue"] += revenue
        bucket["profit"] += profit

    for sale in sales:
        _add(sale.product_name, sale.quantity, sale.total, sale.profit)

    for invoice in invoices:
        for item in invoice.items:
            _add(item.description, item.quantity, item.line_total, item.profit)

    stats = [
        ProductStat(
            name=name,
            quantity=int(b["quantity"]),
            revenue=b["revenue"],
            profit=b["profit"],
        )
        for name, b in buckets.items()
    ]
    stats.sort(key=lambda s: (-s.revenue, s.name))
    return stats


def _sum_method(
    transactions: Iterable[PaymentTransaction], method: PaymentMethod
) -> float:
    return sum(tx.amount for tx in transactions if tx.method == method)


def compute_daily_stats(
    day: date,
    transactions: Iterable[PaymentTransaction],
    sales: Iterable[QuickSale],
    invoices: Iterable[Invoice],
) -> DailyStats:
    """Pure aggregation of one day's records. Cancelled documents are skipped."""
    txs = sorted(
        transactions,
        key=lambda tx: (tx.timestamp, tx.id or 0),
        reverse=True,
    )
    live_invoices = [inv for inv in invoices if inv.status != InvoiceStatus.ANNULE]
    products = aggregate_products(sales, live_invoices)

    totals = DailyTotals(
        total=sum(tx.amount for tx in txs),
        profit=sum(p.profit for p in products),
        cash=_sum_method(txs, PaymentMethod.ESPECES),
        mobile=_sum_method(txs, PaymentMethod.MOBILE_MONEY),
        credit=_sum_method(txs, PaymentMethod.CREDIT),
    )
    return DailyStats(
        day=day,
        totals=totals,
        transactions=tuple(txs),
        products=tuple(products),
    )


class DailyJournalService:
    """Reads one day of ledger, sales and documents and aggregates it."""

    def __init__(
        self,
        transaction_store: ITransactionStore,
        sales_store: ISalesStore,
        invoice_store: IInvoiceStore,
    ) -> None:
        self._transaction_store = transaction_store
        self._sales_store = sales_store
        self._invoice_store = invoice_store

    async def compute(self, day: date) -> DailyStats:
        """Aggregate *day*. Calling it twice without writes gives equal results."""
        start, end = day_bounds(day)

        transactions = await self._transaction_store.list_between(start, end)
        sales = await self._sales_store.list_between(start, end)
        invoices = await self._invoice_store.list_by_date(
            day, exclude_statuses=(InvoiceStatus.ANNULE,)
        )

        stats = compute_daily_stats(day, transactions, sales, invoices)
        logger.debug(
            "daily_stats_computed",
            day=day.isoformat(),
            transactions=stats.transactions_count,
            total=stats.totals.total,
            profit=stats.totals.profit,
        )
        return stats
