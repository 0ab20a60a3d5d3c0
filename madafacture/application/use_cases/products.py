"""Catalog use cases: product creation, edits and stock overview."""

from dataclasses import dataclass

from madafacture.application.dto.requests import CreateProductRequest, UpdateProductRequest
from madafacture.config import get_logger
from madafacture.core.entities.product import Product
from madafacture.core.exceptions import ProductNotFoundError
from madafacture.core.interfaces import IProductStore
from madafacture.core.services.reports import summarize_stock

logger = get_logger(__name__)


class CreateProductUseCase:
    """Add a product to the catalog."""

    def __init__(self, product_store: IProductStore | None = None):
        self._product_store = product_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from madafacture.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def execute(self, request: CreateProductRequest) -> Product:
        store = await self._get_product_store()
        product = Product(**request.model_dump())
        return await store.create_product(product)


class UpdateProductUseCase:
    """
    Edit a product.

    Past documents and quick sales keep the prices they were made with;
    only future lines see the change.
    """

    def __init__(self, product_store: IProductStore | None = None):
        self._product_store = product_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from madafacture.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def execute(self, request: UpdateProductRequest) -> Product:
        store = await self._get_product_store()
        product = await store.get_product(request.product_id)
        if product is None:
            raise ProductNotFoundError(request.product_id)

        changes = request.model_dump(exclude={"product_id"}, exclude_unset=True)
        updated = Product.model_validate({**product.model_dump(), **changes})
        updated = await store.update_product(updated)
        logger.info("product_edited", product_id=product.id, fields=sorted(changes))
        return updated


@dataclass
class StockOverviewResult:
    """Catalog with its stock figures."""

    products: list[Product]
    total_value: float
    low_stock_count: int
    out_of_stock_count: int


class GetStockOverviewUseCase:
    """Stock value at sale price, low-stock and out-of-stock counts."""

    def __init__(self, product_store: IProductStore | None = None):
        self._product_store = product_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from madafacture.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def execute(self) -> StockOverviewResult:
        store = await self._get_product_store()
        products = await store.list_products()
        overview = summarize_stock(products)
        return StockOverviewResult(
            products=products,
            total_value=overview.total_value,
            low_stock_count=overview.low_stock_count,
            out_of_stock_count=overview.out_of_stock_count,
        )
