"""Closing archive use cases: browse and reprint."""

from dataclasses import dataclass
from pathlib import Path

from madafacture.config import get_logger, get_settings
from madafacture.core.entities.closing import DailyClosing
from madafacture.core.exceptions import ClosingNotFoundError, SettingsNotInitializedError
from madafacture.core.interfaces import IClosingStore, ISettingsStore
from madafacture.core.services.reports import search_closings
from madafacture.infrastructure.pdf import IDailyReportRenderer, closing_filename, save_pdf

logger = get_logger(__name__)


@dataclass
class ClosingArchiveResult:
    """Archived closings matching a search, newest first."""

    closings: list[DailyClosing]
    total_revenue: float


class ListClosingsUseCase:
    """Browse the closing archive."""

    def __init__(self, closing_store: IClosingStore | None = None):
        self._closing_store = closing_store

    async def _get_closing_store(self) -> IClosingStore:
        if self._closing_store is None:
            from madafacture.infrastructure.storage.sqlite import get_closing_store

            self._closing_store = await get_closing_store()
        return self._closing_store

    async def execute(self, query: str = "") -> ClosingArchiveResult:
        store = await self._get_closing_store()
        closings = search_closings(await store.list_closings(), query)
        return ClosingArchiveResult(
            closings=closings,
            total_revenue=sum(c.total_revenue for c in closings),
        )


@dataclass
class ReprintClosingResult:
    """Duplicate report of an archived closing."""

    closing: DailyClosing
    filename: str
    pdf_bytes: bytes
    file_path: Path | None = None


class ReprintClosingUseCase:
    """
    Print a duplicate of an archived closing.

    Only the frozen snapshot is used; the live data of that day may have
    changed since and is not read.
    """

    def __init__(
        self,
        closing_store: IClosingStore | None = None,
        settings_store: ISettingsStore | None = None,
        renderer: IDailyReportRenderer | None = None,
    ):
        self._closing_store = closing_store
        self._settings_store = settings_store
        self._renderer = renderer

    async def _get_closing_store(self) -> IClosingStore:
        if self._closing_store is None:
            from madafacture.infrastructure.storage.sqlite import get_closing_store

            self._closing_store = await get_closing_store()
        return self._closing_store

    async def _get_settings_store(self) -> ISettingsStore:
        if self._settings_store is None:
            from madafacture.infrastructure.storage.sqlite import get_settings_store

            self._settings_store = await get_settings_store()
        return self._settings_store

    def _get_renderer(self) -> IDailyReportRenderer:
        if self._renderer is None:
            from madafacture.application.services import get_daily_report_renderer

            self._renderer = get_daily_report_renderer()
        return self._renderer

    async def execute(
        self,
        closing_id: int,
        save: bool = False,
        export_dir: Path | None = None,
    ) -> ReprintClosingResult:
        closing_store = await self._get_closing_store()
        closing = await closing_store.get_closing(closing_id)
        if closing is None:
            raise ClosingNotFoundError(closing_id)

        settings_store = await self._get_settings_store()
        settings = await settings_store.get_settings()
        if settings is None:
            raise SettingsNotInitializedError()

        pdf_bytes = self._get_renderer().render(
            (),
            closing.aggregated_products,
            closing.totals,
            closing.closing_date,
            settings,
            number=closing.number,
            duplicate=True,
            transactions_count=closing.transactions_count,
        )
        result = ReprintClosingResult(
            closing=closing,
            filename=closing_filename(closing, duplicate=True),
            pdf_bytes=pdf_bytes,
        )
        if save:
            target = export_dir or get_settings().pdf.export_dir
            result.file_path = save_pdf(pdf_bytes, result.filename, target)

        logger.info("closing_reprinted", closing_id=closing_id, number=closing.number)
        return result
