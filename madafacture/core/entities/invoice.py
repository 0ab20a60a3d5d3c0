"""Invoice, quote and receipt domain entities."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from madafacture.core.entities.transaction import PaymentMethod


class DocumentType(str, Enum):
    """Kind of sales document. Quotes never move stock or money."""

    FACTURE = "Facture"
    DEVIS = "Devis"
    RECU = "Reçu"

    @property
    def moves_stock(self) -> bool:
        return self in (DocumentType.FACTURE, DocumentType.RECU)


class InvoiceStatus(str, Enum):
    """Lifecycle status of a sales document."""

    BROUILLON = "Brouillon"
    VALIDE = "Validé"
    PARTIEL = "Partiel"
    PAYE = "Payé"
    ANNULE = "Annulé"


class BusinessDomain(str, Enum):
    """Business line a document was issued under."""

    COMMERCE = "Commerce"
    SERVICES = "Services"


class InvoiceItem(BaseModel):
    """
    A line item on a sales document.

    Prices are copied from the catalog when the line is created and never
    follow later product edits. The description doubles as the link back to
    the product (matched by name).
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    invoice_id: int | None = None
    description: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)
    purchase_price: float = Field(default=0.0, ge=0)
    vat_rate: float = Field(default=0.0, ge=0)  # percent
    unit: str = "Unité"

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price

    @property
    def vat_amount(self) -> float:
        return self.quantity * self.unit_price * (self.vat_rate / 100)

    @property
    def profit(self) -> float:
        return (self.unit_price - self.purchase_price) * self.quantity


class InvoiceTotals(BaseModel):
    """Subtotal, VAT and grand total of a list of items."""

    model_config = ConfigDict(frozen=True)

    subtotal: float = 0.0
    vat_total: float = 0.0
    total: float = 0.0

    @classmethod
    def from_items(cls, items: list[InvoiceItem]) -> "InvoiceTotals":
        subtotal = sum(i.line_total for i in items)
        vat_total = sum(i.vat_amount for i in items)
        return cls(subtotal=subtotal, vat_total=vat_total, total=subtotal + vat_total)


class Invoice(BaseModel):
    """
    A sales document (invoice, quote or receipt) with its line items.

    Totals are computed once at creation and stored; they are not derived
    again when the document is loaded.
    """

    id: int | None = None
    number: str
    issue_date: date
    due_date: date
    client_id: int
    type: DocumentType = DocumentType.FACTURE
    items: list[InvoiceItem] = Field(default_factory=list)
    subtotal: float = 0.0
    vat_total: float = 0.0
    total: float = 0.0
    paid_amount: float = 0.0
    is_paid: bool = False
    status: InvoiceStatus = InvoiceStatus.VALIDE
    payment_method: PaymentMethod | None = None
    paid_at: datetime | None = None
    notes: str = ""
    domain: BusinessDomain = BusinessDomain.COMMERCE
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def balance_due(self) -> float:
        return self.total - self.paid_amount

    @property
    def profit(self) -> float:
        return sum(i.profit for i in self.items)

    @property
    def counts_as_sale(self) -> bool:
        """Cancelled and draft documents are ignored by sales figures."""
        return self.status not in (InvoiceStatus.ANNULE, InvoiceStatus.BROUILLON)
