"""
Generate Invoice PDF Use Case.

Loads a document with its client and the business profile, renders it and
optionally writes it to the export directory.
"""

from dataclasses import dataclass
from pathlib import Path

from madafacture.config import get_logger, get_settings
from madafacture.core.exceptions import (
    ClientNotFoundError,
    InvoiceNotFoundError,
    SettingsNotInitializedError,
)
from madafacture.core.interfaces import IClientStore, IInvoiceStore, ISettingsStore
from madafacture.infrastructure.pdf import IInvoicePdfRenderer, invoice_filename, save_pdf

logger = get_logger(__name__)


@dataclass
class InvoicePdfResult:
    """Rendered document."""

    invoice_id: int
    filename: str
    pdf_bytes: bytes
    file_path: Path | None = None

    @property
    def file_size(self) -> int:
        return len(self.pdf_bytes)


class GenerateInvoicePdfUseCase:
    """Render an invoice, quote or receipt to PDF."""

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        client_store: IClientStore | None = None,
        settings_store: ISettingsStore | None = None,
        renderer: IInvoicePdfRenderer | None = None,
    ):
        self._invoice_store = invoice_store
        self._client_store = client_store
        self._settings_store = settings_store
        self._renderer = renderer

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from madafacture.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_client_store(self) -> IClientStore:
        if self._client_store is None:
            from madafacture.infrastructure.storage.sqlite import get_client_store

            self._client_store = await get_client_store()
        return self._client_store

    async def _get_settings_store(self) -> ISettingsStore:
        if self._settings_store is None:
            from madafacture.infrastructure.storage.sqlite import get_settings_store

            self._settings_store = await get_settings_store()
        return self._settings_store

    def _get_renderer(self) -> IInvoicePdfRenderer:
        if self._renderer is None:
            from madafacture.application.services import get_invoice_renderer

            self._renderer = get_invoice_renderer()
        return self._renderer

    async def execute(
        self,
        invoice_id: int,
        save: bool = False,
        export_dir: Path | None = None,
    ) -> InvoicePdfResult:
        """
        Render the document.

        Args:
            invoice_id: Document to render.
            save: Also write the file to disk.
            export_dir: Target directory, the configured export dir by default.
        """
        logger.info("generate_invoice_pdf_started", invoice_id=invoice_id, save=save)

        invoice_store = await self._get_invoice_store()
        invoice = await invoice_store.get_invoice(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)

        client_store = await self._get_client_store()
        client = await client_store.get_client(invoice.client_id)
        if client is None:
            raise ClientNotFoundError(invoice.client_id)

        settings_store = await self._get_settings_store()
        settings = await settings_store.get_settings()
        if settings is None:
            raise SettingsNotInitializedError()

        pdf_bytes = self._get_renderer().render(invoice, client, settings)
        result = InvoicePdfResult(
            invoice_id=invoice_id,
            filename=invoice_filename(invoice, client),
            pdf_bytes=pdf_bytes,
        )

        if save:
            target = export_dir or get_settings().pdf.export_dir
            result.file_path = save_pdf(pdf_bytes, result.filename, target)

        logger.info(
            "generate_invoice_pdf_complete",
            invoice_id=invoice_id,
            file_size=result.file_size,
        )
        return result
