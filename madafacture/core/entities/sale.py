"""Quick sale (point-of-sale) domain entity."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from madafacture.core.entities.transaction import PaymentMethod


class QuickSale(BaseModel):
    """A direct sale of one catalog product, without an invoice document."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    timestamp: datetime = Field(default_factory=datetime.now)
    product_id: int
    product_name: str  # snapshot
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)  # snapshot
    purchase_price: float = Field(default=0.0, ge=0)  # snapshot
    total: float
    payment_method: PaymentMethod
    client_name: str = ""

    @property
    def profit(self) -> float:
        return (self.unit_price - self.purchase_price) * self.quantity
