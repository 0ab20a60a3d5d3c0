"""
Document numbering.

Numbers are derived from the settings singleton at save time. The counter
read, the document insert and the counter increment happen under one
in-process lock so two creations started from the same process can never
draw the same number.
"""

import asyncio
from datetime import date

from madafacture.core.entities.invoice import DocumentType
from madafacture.core.entities.user_settings import UserSettings

QUOTE_PREFIX = "DEV-"
CLOSING_PREFIX = "CLOT-"

_sequence_lock: asyncio.Lock | None = None


def get_sequence_lock() -> asyncio.Lock:
    """Lock serializing every read-insert-increment of a sequence counter."""
    global _sequence_lock
    if _sequence_lock is None:
        _sequence_lock = asyncio.Lock()
    return _sequence_lock


def format_invoice_number(
    settings: UserSettings, doc_type: DocumentType, issue_date: date
) -> str:
    """
    Build a document number such as ``FACT-2024-200`` or ``DEV-2024-007``.

    The year comes from the issue date, not from the clock.
    """
    prefix = QUOTE_PREFIX if doc_type == DocumentType.DEVIS else settings.invoice_prefix
    return f"{prefix}{issue_date.year}-{settings.next_invoice_number:03d}"


def format_closing_number(settings: UserSettings, closing_date: date) -> str:
    """Build a closing number such as ``CLOT-20240601-001``."""
    return (
        f"{CLOSING_PREFIX}{closing_date.strftime('%Y%m%d')}"
        f"-{settings.next_closing_number:03d}"
    )
