"""Business profile (singleton settings record)."""

from pydantic import BaseModel, Field

from madafacture.core.entities.invoice import BusinessDomain


class UserSettings(BaseModel):
    """Business identity, numbering state and feature flags."""

    id: int | None = None
    business_name: str
    nif: str = ""
    stat: str = ""
    rcs: str = ""
    bank_info: str | None = None
    address: str = ""
    phone: str = ""
    email: str = ""
    logo_path: str | None = None

    default_vat: float = Field(default=0.0, ge=0)
    currency: str = "Ar"
    currency_name: str = "Ariary"
    domain: BusinessDomain = BusinessDomain.COMMERCE

    # Numbering state, advanced only by the invoice and closing engines
    invoice_prefix: str = "FACT-"
    next_invoice_number: int = Field(default=1, ge=1)
    next_closing_number: int = Field(default=1, ge=1)

    shop_mode_enabled: bool = True
    show_profits: bool = True
