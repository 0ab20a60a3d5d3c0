"""Abstract interface for quick sale storage."""

from abc import ABC, abstractmethod
from datetime import datetime

from madafacture.core.entities.sale import QuickSale


class ISalesStore(ABC):
    """Interface for quick sale persistence."""

    @abstractmethod
    async def add_sale(self, sale: QuickSale) -> QuickSale:
        """Record a quick sale."""
        pass

    @abstractmethod
    async def list_between(
        self, start: datetime, end: datetime | None = None
    ) -> list[QuickSale]:
        """List sales with start <= timestamp < end (open-ended when end is None)."""
        pass

    @abstractmethod
    async def list_sales(self) -> list[QuickSale]:
        """List every recorded sale, oldest first."""
        pass
