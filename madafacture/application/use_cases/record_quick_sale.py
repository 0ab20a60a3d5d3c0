"""Record Quick Sale Use Case: point-of-sale without an invoice."""

from dataclasses import dataclass
from datetime import datetime

from madafacture.application.dto.requests import QuickSaleRequest
from madafacture.config import get_logger
from madafacture.core.entities.product import Product
from madafacture.core.entities.sale import QuickSale
from madafacture.core.entities.transaction import (
    QUICK_SALE_REFERENCE,
    PaymentTransaction,
    TransactionType,
)
from madafacture.core.exceptions import DatabaseError, MadaFactureError, ProductNotFoundError
from madafacture.core.interfaces import IProductStore, ISalesStore, ITransactionStore

logger = get_logger(__name__)


@dataclass
class QuickSaleResult:
    """Result of a quick sale."""

    sale: QuickSale
    transaction: PaymentTransaction
    product: Product  # with its stock after the sale


class RecordQuickSaleUseCase:
    """Sell one catalog product directly: sale record, ledger entry, stock."""

    def __init__(
        self,
        product_store: IProductStore | None = None,
        sales_store: ISalesStore | None = None,
        transaction_store: ITransactionStore | None = None,
    ):
        self._product_store = product_store
        self._sales_store = sales_store
        self._transaction_store = transaction_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from madafacture.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _get_sales_store(self) -> ISalesStore:
        if self._sales_store is None:
            from madafacture.infrastructure.storage.sqlite import get_sales_store

            self._sales_store = await get_sales_store()
        return self._sales_store

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from madafacture.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    async def execute(self, request: QuickSaleRequest) -> QuickSaleResult:
        """Execute quick sale use case."""
        logger.info(
            "quick_sale_started",
            product_id=request.product_id,
            quantity=request.quantity,
            method=request.payment_method.value,
        )

        try:
            product_store = await self._get_product_store()
            product = await product_store.get_product(request.product_id)
            if product is None:
                raise ProductNotFoundError(request.product_id)

            now = datetime.now()
            total = request.quantity * product.unit_price

            sales_store = await self._get_sales_store()
            sale = await sales_store.add_sale(
                QuickSale(
                    timestamp=now,
                    product_id=product.id,
                    product_name=product.name,
                    quantity=request.quantity,
                    unit_price=product.unit_price,
                    purchase_price=product.purchase_price,
                    total=total,
                    payment_method=request.payment_method,
                    client_name=request.client_name,
                )
            )

            transaction_store = await self._get_transaction_store()
            transaction = await transaction_store.add_transaction(
                PaymentTransaction(
                    timestamp=now,
                    amount=total,
                    method=request.payment_method,
                    reference_id=QUICK_SALE_REFERENCE,
                    label=f"{product.name} (x{request.quantity})",
                    client_name=request.client_name,
                    type=TransactionType.QUICK_SALE,
                )
            )

            updated = await product_store.adjust_stock(product.id, -request.quantity)

        except MadaFactureError:
            raise
        except Exception as e:
            logger.error("quick_sale_failed", product_id=request.product_id, error=str(e))
            raise DatabaseError("record_quick_sale", str(e)) from e

        logger.info(
            "quick_sale_complete",
            sale_id=sale.id,
            total=total,
            stock=updated.stock if updated else None,
        )
        return QuickSaleResult(sale=sale, transaction=transaction, product=updated or product)
