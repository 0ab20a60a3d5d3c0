"""Abstract interface for the business profile singleton."""

from abc import ABC, abstractmethod

from madafacture.core.entities.user_settings import UserSettings


class ISettingsStore(ABC):
    """Interface for the settings singleton and its sequence counters."""

    @abstractmethod
    async def get_settings(self) -> UserSettings | None:
        """Get the settings record, or None before initialization."""
        pass

    @abstractmethod
    async def create_settings(self, settings: UserSettings) -> UserSettings:
        """Create the settings record."""
        pass

    @abstractmethod
    async def update_settings(self, settings: UserSettings) -> UserSettings:
        """Update profile fields. Sequence counters are left untouched."""
        pass

    @abstractmethod
    async def advance_invoice_number(self, settings_id: int) -> int:
        """Increment next_invoice_number by one and return the new value."""
        pass

    @abstractmethod
    async def advance_closing_number(self, settings_id: int) -> int:
        """Increment next_closing_number by one and return the new value."""
        pass
