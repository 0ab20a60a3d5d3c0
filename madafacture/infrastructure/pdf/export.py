"""Saving rendered documents to the local export directory."""

import re
from pathlib import Path

from madafacture.config import get_logger
from madafacture.core.entities.client import Client
from madafacture.core.entities.closing import DailyClosing
from madafacture.core.entities.invoice import Invoice
from madafacture.core.exceptions import DocumentExportError

logger = get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r'[\\/:*?"<>|]')


def _clean(part: str) -> str:
    return _UNSAFE_RE.sub("", _WHITESPACE_RE.sub("_", part.strip()))


def invoice_filename(invoice: Invoice, client: Client) -> str:
    """``FACT-2024-200_Jean_Rakoto.pdf``"""
    return f"{_clean(invoice.number)}_{_clean(client.name)}.pdf"


def closing_filename(closing: DailyClosing, duplicate: bool = False) -> str:
    suffix = "_DUPLICATA" if duplicate else ""
    return f"{_clean(closing.number)}{suffix}.pdf"


def save_pdf(pdf_bytes: bytes, filename: str, export_dir: Path) -> Path:
    """Write *pdf_bytes* to ``export_dir / filename`` and return the path."""
    path = Path(export_dir) / filename
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pdf_bytes)
    except OSError as e:
        logger.error("pdf_export_failed", filename=filename, error=str(e))
        raise DocumentExportError(filename, str(e)) from e

    logger.info("pdf_exported", path=str(path), size=len(pdf_bytes))
    return path
