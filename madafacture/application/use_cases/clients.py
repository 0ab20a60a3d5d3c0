"""Client use cases: registration, notes, account position."""

from dataclasses import dataclass

from madafacture.application.dto.requests import CreateClientRequest
from madafacture.config import get_logger
from madafacture.core.entities.client import Client, ClientType, FiscalIdentifiers
from madafacture.core.entities.invoice import Invoice
from madafacture.core.exceptions import ClientNotFoundError, ValidationError
from madafacture.core.interfaces import IClientStore, IInvoiceStore
from madafacture.core.services.reports import summarize_client_account

logger = get_logger(__name__)


class CreateClientUseCase:
    """Register a client. Fiscal identifiers are accepted for companies only."""

    def __init__(self, client_store: IClientStore | None = None):
        self._client_store = client_store

    async def _get_client_store(self) -> IClientStore:
        if self._client_store is None:
            from madafacture.infrastructure.storage.sqlite import get_client_store

            self._client_store = await get_client_store()
        return self._client_store

    async def execute(self, request: CreateClientRequest) -> Client:
        fiscal = FiscalIdentifiers(nif=request.nif or None, stat=request.stat or None)
        if fiscal.is_empty:
            fiscal = None
        elif request.type != ClientType.COMPANY:
            raise ValidationError(
                "type", "NIF/STAT are only accepted for company clients", request.type.value
            )

        client = Client(
            name=request.name,
            type=request.type,
            email=request.email,
            phone=request.phone,
            address=request.address,
            fiscal=fiscal,
            notes=request.notes,
        )
        store = await self._get_client_store()
        return await store.create_client(client)


class UpdateClientNotesUseCase:
    """Replace the free-text note of a client."""

    def __init__(self, client_store: IClientStore | None = None):
        self._client_store = client_store

    async def _get_client_store(self) -> IClientStore:
        if self._client_store is None:
            from madafacture.infrastructure.storage.sqlite import get_client_store

            self._client_store = await get_client_store()
        return self._client_store

    async def execute(self, client_id: int, notes: str) -> Client:
        store = await self._get_client_store()
        client = await store.get_client(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)

        await store.update_notes(client_id, notes)
        client.notes = notes
        return client


@dataclass
class ClientAccountResult:
    """A client with their document history and money position."""

    client: Client
    invoices: list[Invoice]
    total_paid: float
    total_due: float
    invoice_count: int


class GetClientAccountUseCase:
    """Document history and paid/due totals of one client."""

    def __init__(
        self,
        client_store: IClientStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._client_store = client_store
        self._invoice_store = invoice_store

    async def _get_client_store(self) -> IClientStore:
        if self._client_store is None:
            from madafacture.infrastructure.storage.sqlite import get_client_store

            self._client_store = await get_client_store()
        return self._client_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from madafacture.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, client_id: int) -> ClientAccountResult:
        client_store = await self._get_client_store()
        client = await client_store.get_client(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)

        invoice_store = await self._get_invoice_store()
        invoices = await invoice_store.list_by_client(client_id)
        account = summarize_client_account(invoices)

        logger.debug(
            "client_account_computed",
            client_id=client_id,
            invoices=account.invoice_count,
            total_due=account.total_due,
        )
        return ClientAccountResult(
            client=client,
            invoices=invoices,
            total_paid=account.total_paid,
            total_due=account.total_due,
            invoice_count=account.invoice_count,
        )
