"""
Core business logic services.

Layer-pure services that depend only on:
- madafacture/core/entities/*
- madafacture/core/interfaces/*
- madafacture/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from madafacture.core.services.daily_aggregation import (
    DailyJournalService,
    aggregate_products,
    compute_daily_stats,
    day_bounds,
)
from madafacture.core.services.numbering import (
    format_closing_number,
    format_invoice_number,
    get_sequence_lock,
)
from madafacture.core.services.reports import (
    ClientAccount,
    InvoiceLedger,
    StockOverview,
    search_closings,
    summarize_client_account,
    summarize_invoices,
    summarize_stock,
    top_products_by_profit,
    total_receivables,
)

__all__ = [
    # Daily journal
    "DailyJournalService",
    "aggregate_products",
    "compute_daily_stats",
    "day_bounds",
    # Numbering
    "format_invoice_number",
    "format_closing_number",
    "get_sequence_lock",
    # Summaries
    "ClientAccount",
    "InvoiceLedger",
    "StockOverview",
    "search_closings",
    "summarize_client_account",
    "summarize_invoices",
    "summarize_stock",
    "top_products_by_profit",
    "total_receivables",
]
