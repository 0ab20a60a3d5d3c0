"""Abstract interface for the payment ledger."""

from abc import ABC, abstractmethod
from datetime import datetime

from madafacture.core.entities.transaction import PaymentTransaction


class ITransactionStore(ABC):
    """Interface for the append-only payment ledger."""

    @abstractmethod
    async def add_transaction(
        self, transaction: PaymentTransaction
    ) -> PaymentTransaction:
        """Append a ledger entry."""
        pass

    @abstractmethod
    async def list_between(
        self, start: datetime, end: datetime | None = None
    ) -> list[PaymentTransaction]:
        """List entries with start <= timestamp < end, newest first."""
        pass
