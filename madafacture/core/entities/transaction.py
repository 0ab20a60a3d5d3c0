"""Payment ledger domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

QUICK_SALE_REFERENCE = "VENTE-RAPIDE"


class PaymentMethod(str, Enum):
    """How money was (or will be) received."""

    ESPECES = "Espèces"
    MOBILE_MONEY = "Mobile Money"
    VIREMENT = "Virement"
    CHEQUE = "Chèque"
    CREDIT = "Crédit (Non payé)"


class TransactionType(str, Enum):
    """Origin of a ledger entry."""

    INVOICE_PAYMENT = "invoice_payment"
    QUICK_SALE = "quick_sale"


class PaymentTransaction(BaseModel):
    """
    One entry of the append-only money-received ledger.

    Never edited after creation; the store hands back a copy carrying the
    assigned id.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    timestamp: datetime = Field(default_factory=datetime.now)
    amount: float
    method: PaymentMethod
    reference_id: str  # invoice id, or QUICK_SALE_REFERENCE
    label: str
    client_name: str
    type: TransactionType
