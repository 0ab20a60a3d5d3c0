"""Product catalog domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

LOW_STOCK_THRESHOLD = 5


class StockState(str, Enum):
    """Alert level of a product's stock."""

    IN_STOCK = "in_stock"
    LOW = "low"
    OUT = "out"


class Product(BaseModel):
    """A catalog entry with sale price, cost and on-hand stock."""

    id: int | None = None
    name: str = Field(..., min_length=1)
    unit_price: float = Field(..., ge=0)  # sale price
    purchase_price: float = Field(default=0.0, ge=0)  # cost
    unit: str = "Unité"
    stock: int = 0  # may go negative, sales are never blocked
    category: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def stock_state(self) -> StockState:
        if self.stock <= 0:
            return StockState.OUT
        if self.stock <= LOW_STOCK_THRESHOLD:
            return StockState.LOW
        return StockState.IN_STOCK

    @property
    def unit_margin(self) -> float:
        return self.unit_price - self.purchase_price

    @property
    def stock_value(self) -> float:
        """Value of stock on hand at sale price."""
        return self.unit_price * self.stock
