"""Client domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class ClientType(str, Enum):
    """Legal form of a client."""

    INDIVIDUAL = "Individuel"
    COMPANY = "Société"


class FiscalIdentifiers(BaseModel):
    """Tax registration numbers of a company client."""

    nif: str | None = None
    stat: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.nif or self.stat)


class Client(BaseModel):
    """A customer invoices are addressed to."""

    id: int | None = None
    name: str = Field(..., min_length=1)
    type: ClientType = ClientType.INDIVIDUAL
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    fiscal: FiscalIdentifiers | None = None  # companies only
    notes: str = ""
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_fiscal_identifiers(self) -> "Client":
        """Only companies may carry NIF/STAT numbers."""
        if self.type != ClientType.COMPANY and self.fiscal and not self.fiscal.is_empty:
            raise ValueError("fiscal identifiers are only valid for company clients")
        return self

    @property
    def is_company(self) -> bool:
        return self.type == ClientType.COMPANY
