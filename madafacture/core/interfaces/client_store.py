"""Abstract interface for client storage."""

from abc import ABC, abstractmethod

from madafacture.core.entities.client import Client


class IClientStore(ABC):
    """Interface for client persistence."""

    @abstractmethod
    async def create_client(self, client: Client) -> Client:
        """Create a client and return it with its assigned ID."""
        pass

    @abstractmethod
    async def get_client(self, client_id: int) -> Client | None:
        """Get client by ID."""
        pass

    @abstractmethod
    async def update_notes(self, client_id: int, notes: str) -> None:
        """Replace the free-text note of a client."""
        pass

    @abstractmethod
    async def list_clients(
        self, limit: int = 500, offset: int = 0
    ) -> list[Client]:
        """List clients ordered by name."""
        pass
