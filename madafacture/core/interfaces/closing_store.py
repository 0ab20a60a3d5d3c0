"""Abstract interface for daily closing storage."""

from abc import ABC, abstractmethod
from datetime import date

from madafacture.core.entities.closing import DailyClosing


class IClosingStore(ABC):
    """Interface for end-of-day closing archives."""

    @abstractmethod
    async def create_closing(self, closing: DailyClosing) -> DailyClosing:
        """Archive a closing. Fails if the date is already closed."""
        pass

    @abstractmethod
    async def replace_closing(self, closing: DailyClosing) -> DailyClosing:
        """Delete any closing of the same date and archive this one, atomically."""
        pass

    @abstractmethod
    async def get_closing(self, closing_id: int) -> DailyClosing | None:
        """Get closing by ID."""
        pass

    @abstractmethod
    async def get_by_date(self, closing_date: date) -> DailyClosing | None:
        """Get the closing of a date."""
        pass

    @abstractmethod
    async def list_closings(
        self, limit: int = 1000, offset: int = 0
    ) -> list[DailyClosing]:
        """List closings newest date first."""
        pass
