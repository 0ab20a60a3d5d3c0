"""
Daily journal use cases: live statistics and end-of-day closing.

The closing is a frozen copy of the statistics. Live statistics keep
following the underlying data; an archived closing never does.
"""

from dataclasses import dataclass
from datetime import date

from madafacture.config import get_logger
from madafacture.core.entities.closing import DailyClosing, DailyStats
from madafacture.core.exceptions import (
    ClosingAlreadyExistsError,
    DatabaseError,
    MadaFactureError,
    NothingToCloseError,
    SettingsNotInitializedError,
)
from madafacture.core.interfaces import IClosingStore, ISettingsStore
from madafacture.core.services.daily_aggregation import DailyJournalService
from madafacture.core.services.numbering import format_closing_number, get_sequence_lock
from madafacture.infrastructure.pdf import IDailyReportRenderer

logger = get_logger(__name__)


class ComputeDailyStatsUseCase:
    """Aggregate one calendar day. Read-only and idempotent."""

    def __init__(self, journal_service: DailyJournalService | None = None):
        self._journal_service = journal_service

    async def _get_journal_service(self) -> DailyJournalService:
        if self._journal_service is None:
            from madafacture.application.services import get_daily_journal_service

            self._journal_service = await get_daily_journal_service()
        return self._journal_service

    async def execute(self, day: date) -> DailyStats:
        service = await self._get_journal_service()
        return await service.compute(day)


@dataclass
class FinalizeClosingResult:
    """Archived closing and its report."""

    closing: DailyClosing
    pdf_bytes: bytes | None = None  # None when rendering failed
    replaced: bool = False


class FinalizeClosingUseCase:
    """
    Freeze a day's statistics into the closing archive.

    Flow:
    1. Compute the day; nothing recorded means nothing to close
    2. Under the sequence lock: refuse an existing closing unless replacing,
       write the snapshot, advance the closing counter
    3. Render the report; a rendering failure does not undo the archive
    """

    def __init__(
        self,
        journal_service: DailyJournalService | None = None,
        closing_store: IClosingStore | None = None,
        settings_store: ISettingsStore | None = None,
        renderer: IDailyReportRenderer | None = None,
    ):
        self._journal_service = journal_service
        self._closing_store = closing_store
        self._settings_store = settings_store
        self._renderer = renderer

    async def _get_journal_service(self) -> DailyJournalService:
        if self._journal_service is None:
            from madafacture.application.services import get_daily_journal_service

            self._journal_service = await get_daily_journal_service()
        return self._journal_service

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

    async def execute(self, day: date, replace: bool = False) -> FinalizeClosingResult:
        """
        Close *day*.

        Args:
            day: Calendar day to archive.
            replace: Confirmation to overwrite an existing closing of that day.

        Raises:
            NothingToCloseError: No transaction was recorded on the day.
            ClosingAlreadyExistsError: The day is closed and replace is False.
            DatabaseError: Reading or writing the archive failed.
        """
        logger.info("finalize_closing_started", day=day.isoformat(), replace=replace)

        try:
            service = await self._get_journal_service()
            stats = await service.compute(day)
            if stats.transactions_count == 0:
                raise NothingToCloseError(day)

            closing_store = await self._get_closing_store()
            settings_store = await self._get_settings_store()

            async with get_sequence_lock():
                settings = await settings_store.get_settings()
                if settings is None:
                    raise SettingsNotInitializedError()

                existing = await closing_store.get_by_date(day)
                if existing is not None and not replace:
                    raise ClosingAlreadyExistsError(day, existing.number)

                snapshot = DailyClosing.from_stats(format_closing_number(settings, day), stats)
                if existing is not None:
                    closing = await closing_store.replace_closing(snapshot)
                else:
                    closing = await closing_store.create_closing(snapshot)
                await settings_store.advance_closing_number(settings.id)

        except MadaFactureError:
            raise
        except Exception as e:
            logger.error("finalize_closing_failed", day=day.isoformat(), error=str(e))
            raise DatabaseError("finalize_closing", str(e)) from e

        pdf_bytes = None
        try:
            pdf_bytes = self._get_renderer().render(
                stats.transactions,
                stats.products,
                stats.totals,
                day,
                settings,
                number=closing.number,
            )
        except Exception as e:
            logger.warning(
                "closing_report_render_failed",
                closing_id=closing.id,
                error=str(e),
            )

        logger.info(
            "closing_finalized",
            closing_id=closing.id,
            number=closing.number,
            total=closing.total_revenue,
            profit=closing.total_profit,
            replaced=existing is not None,
        )
        return FinalizeClosingResult(
            closing=closing,
            pdf_bytes=pdf_bytes,
            replaced=existing is not None,
        )
