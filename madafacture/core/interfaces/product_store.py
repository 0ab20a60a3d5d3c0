"""Abstract interface for product catalog storage."""

from abc import ABC, abstractmethod

from madafacture.core.entities.product import Product


class IProductStore(ABC):
    """Interface for product persistence and stock updates."""

    @abstractmethod
    async def create_product(self, product: Product) -> Product:
        """Create a product and return it with its assigned ID."""
        pass

    @abstractmethod
    async def get_product(self, product_id: int) -> Product | None:
        """Get product by ID."""
        pass

    @abstractmethod
    async def get_product_by_name(self, name: str) -> Product | None:
        """Get the first product (lowest ID) whose name equals *name*."""
        pass

    @abstractmethod
    async def update_product(self, product: Product) -> Product:
        """Update all editable fields of a product."""
        pass

    @abstractmethod
    async def adjust_stock(self, product_id: int, delta: int) -> Product | None:
        """Add *delta* (negative for a sale) to the stock and return the product."""
        pass

    @abstractmethod
    async def list_products(
        self, limit: int = 1000, offset: int = 0
    ) -> list[Product]:
        """List products ordered by name."""
        pass
