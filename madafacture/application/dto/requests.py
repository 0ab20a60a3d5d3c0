"""Request DTOs for use cases.

Pydantic v2 models validating caller input. Field bounds are enforced
here; cross-record rules (client exists, items present) are checked by
the use cases before anything is written.
"""

from datetime import date

from pydantic import BaseModel, Field

from madafacture.core.entities.client import ClientType
from madafacture.core.entities.invoice import BusinessDomain, DocumentType
from madafacture.core.entities.product import Product
from madafacture.core.entities.transaction import PaymentMethod


class CreateClientRequest(BaseModel):
    """Request to register a client."""

    name: str = Field(..., min_length=1, examples=["Jean Rakoto", "SARL Vanille"])
    type: ClientType = ClientType.INDIVIDUAL
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    nif: str | None = Field(default=None, description="Company clients only")
    stat: str | None = Field(default=None, description="Company clients only")
    notes: str = ""


class CreateProductRequest(BaseModel):
    """Request to add a catalog product."""

    name: str = Field(..., min_length=1)
    unit_price: float = Field(..., ge=0, description="Sale price")
    purchase_price: float = Field(default=0.0, ge=0, description="Cost")
    unit: str = "Unité"
    stock: int = 0
    category: str | None = None


class UpdateProductRequest(BaseModel):
    """Partial product update. Omitted fields keep their value."""

    product_id: int
    name: str | None = Field(default=None, min_length=1)
    unit_price: float | None = Field(default=None, ge=0)
    purchase_price: float | None = Field(default=None, ge=0)
    unit: str | None = None
    stock: int | None = None
    category: str | None = None


class InvoiceItemRequest(BaseModel):
    """One line of a document being created."""

    description: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)
    purchase_price: float = Field(default=0.0, ge=0)
    vat_rate: float | None = Field(
        default=None,
        ge=0,
        description="Percent; the business default VAT applies when omitted",
    )
    unit: str = "Unité"

    @classmethod
    def from_product(
        cls, product: Product, quantity: int, vat_rate: float | None = None
    ) -> "InvoiceItemRequest":
        """Prefill a line from the catalog, copying prices at this moment."""
        return cls(
            description=product.name,
            quantity=quantity,
            unit_price=product.unit_price,
            purchase_price=product.purchase_price,
            vat_rate=vat_rate,
            unit=product.unit,
        )


class CreateInvoiceRequest(BaseModel):
    """Request to create an invoice, quote or receipt."""

    client_id: int = Field(default=0, description="Must reference an existing client")
    type: DocumentType = DocumentType.FACTURE
    items: list[InvoiceItemRequest] = Field(default_factory=list)
    issue_date: date | None = Field(default=None, description="Defaults to today")
    due_date: date | None = Field(default=None, description="Defaults to issue date + 30 days")
    pay_now: bool = Field(default=False, description="Record the full amount as paid")
    payment_method: PaymentMethod | None = None
    notes: str = ""


class QuickSaleRequest(BaseModel):
    """Direct sale of one catalog product."""

    product_id: int
    quantity: int = Field(default=1, ge=1)
    payment_method: PaymentMethod = PaymentMethod.ESPECES
    client_name: str = ""


class InvoicePaymentRequest(BaseModel):
    """Payment received against an invoice or receipt."""

    invoice_id: int
    amount: float
    payment_method: PaymentMethod = PaymentMethod.ESPECES


class ListInvoicesRequest(BaseModel):
    """Filter for the document list."""

    doc_type: DocumentType | None = None
    query: str = Field(default="", description="Matches number or client name")
    limit: int = Field(default=1000, ge=1)
    offset: int = Field(default=0, ge=0)


class UpdateSettingsRequest(BaseModel):
    """Business profile edit. Sequence counters are not editable."""

    business_name: str | None = Field(default=None, min_length=1)
    nif: str | None = None
    stat: str | None = None
    rcs: str | None = None
    bank_info: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    logo_path: str | None = None
    default_vat: float | None = Field(default=None, ge=0)
    currency: str | None = None
    currency_name: str | None = None
    domain: BusinessDomain | None = None
    invoice_prefix: str | None = None
    shop_mode_enabled: bool | None = None
    show_profits: bool | None = None
