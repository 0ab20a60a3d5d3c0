"""Read-only summaries shown on the dashboard, catalog, client and archive views."""

from collections.abc import Iterable
from dataclasses import dataclass

from madafacture.core.entities.closing import DailyClosing, ProductStat
from madafacture.core.entities.invoice import Invoice, InvoiceStatus
from madafacture.core.entities.product import Product, StockState
from madafacture.core.entities.sale import QuickSale
from madafacture.core.services.daily_aggregation import aggregate_products


@dataclass(frozen=True)
class StockOverview:
    """Catalog-wide stock figures."""

    total_value: float
    low_stock_count: int
    out_of_stock_count: int


@dataclass(frozen=True)
class ClientAccount:
    """Money position of one client across all their documents."""

    total_paid: float
    total_due: float
    invoice_count: int


@dataclass(frozen=True)
class InvoiceLedger:
    """Billed and outstanding amounts over a list of documents."""

    total: float
    due: float


def summarize_stock(products: Iterable[Product]) -> StockOverview:
    products = list(products)
    return StockOverview(
        total_value=sum(p.stock_value for p in products),
        low_stock_count=sum(1 for p in products if p.stock_state == StockState.LOW),
        out_of_stock_count=sum(1 for p in products if p.stock_state == StockState.OUT),
    )


def summarize_client_account(invoices: Iterable[Invoice]) -> ClientAccount:
    """Paid documents count as paid in full, every other live one as due in full."""
    total_paid = 0.0
    total_due = 0.0
    count = 0
    for inv in invoices:
        if inv.status == InvoiceStatus.PAYE:
            total_paid += inv.total
        elif inv.status != InvoiceStatus.ANNULE:
            total_due += inv.total
        count += 1
    return ClientAccount(total_paid=total_paid, total_due=total_due, invoice_count=count)


def summarize_invoices(invoices: Iterable[Invoice]) -> InvoiceLedger:
    invoices = list(invoices)
    return InvoiceLedger(
        total=sum(inv.total for inv in invoices),
        due=sum(inv.balance_due for inv in invoices),
    )


def total_receivables(invoices: Iterable[Invoice]) -> float:
    """Outstanding balance of every validated or partially paid document."""
    return sum(
        inv.balance_due
        for inv in invoices
        if inv.counts_as_sale and inv.status != InvoiceStatus.PAYE
    )


def top_products_by_profit(
    sales: Iterable[QuickSale], invoices: Iterable[Invoice], limit: int = 3
) -> list[ProductStat]:
    live = [inv for inv in invoices if inv.status != InvoiceStatus.ANNULE]
    stats = aggregate_products(sales, live)
    stats.sort(key=lambda s: (-s.profit, s.name))
    return stats[:limit]


def search_closings(closings: Iterable[DailyClosing], query: str) -> list[DailyClosing]:
    """Case-insensitive match on closing number or ISO date."""
    query = query.strip().lower()
    if not query:
        return list(closings)
    return [
        c
        for c in closings
        if query in c.number.lower() or query in c.closing_date.isoformat()
    ]
