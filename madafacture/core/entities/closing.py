"""Daily journal and end-of-day closing domain entities."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from madafacture.core.entities.transaction import PaymentTransaction


class ProductStat(BaseModel):
    """Sales of one product name over a day."""

    model_config = ConfigDict(frozen=True)

    name: str
    quantity: int = 0
    revenue: float = 0.0
    profit: float = 0.0


class DailyTotals(BaseModel):
    """Headline figures of a day: cash received and estimated profit."""

    model_config = ConfigDict(frozen=True)

    total: float = 0.0  # sum of transactions
    profit: float = 0.0  # sum of product profits
    cash: float = 0.0
    mobile: float = 0.0
    credit: float = 0.0


class DailyStats(BaseModel):
    """Live aggregation of one calendar day, recomputed on every read."""

    model_config = ConfigDict(frozen=True)

    day: date
    totals: DailyTotals
    transactions: tuple[PaymentTransaction, ...] = ()
    products: tuple[ProductStat, ...] = ()

    @property
    def transactions_count(self) -> int:
        return len(self.transactions)


class DailyClosing(BaseModel):
    """
    Frozen snapshot of a day's journal.

    The product breakdown is a copy, so later edits to products or invoices
    never change an archived closing. A closing is only ever replaced whole.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    number: str
    closing_date: date
    timestamp: datetime = Field(default_factory=datetime.now)
    total_revenue: float
    total_profit: float
    cash_amount: float = 0.0
    mobile_amount: float = 0.0
    credit_amount: float = 0.0
    transactions_count: int = 0
    aggregated_products: tuple[ProductStat, ...] = ()

    @classmethod
    def from_stats(cls, number: str, stats: DailyStats) -> "DailyClosing":
        return cls(
            number=number,
            closing_date=stats.day,
            total_revenue=stats.totals.total,
            total_profit=stats.totals.profit,
            cash_amount=stats.totals.cash,
            mobile_amount=stats.totals.mobile,
            credit_amount=stats.totals.credit,
            transactions_count=stats.transactions_count,
            aggregated_products=stats.products,
        )

    @property
    def totals(self) -> DailyTotals:
        return DailyTotals(
            total=self.total_revenue,
            profit=self.total_profit,
            cash=self.cash_amount,
            mobile=self.mobile_amount,
            credit=self.credit_amount,
        )
