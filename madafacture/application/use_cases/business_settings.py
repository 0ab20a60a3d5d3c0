"""Business profile use cases."""

from madafacture.application.dto.requests import UpdateSettingsRequest
from madafacture.config import Settings, get_logger, get_settings
from madafacture.core.entities.invoice import BusinessDomain
from madafacture.core.entities.user_settings import UserSettings
from madafacture.core.exceptions import SettingsNotInitializedError
from madafacture.core.interfaces import ISettingsStore

logger = get_logger(__name__)


class InitializeSettingsUseCase:
    """
    Seed the business profile from configuration on first run.

    Returns the existing record untouched when one is already stored.
    """

    def __init__(
        self,
        settings_store: ISettingsStore | None = None,
        app_settings: Settings | None = None,
    ):
        self._settings_store = settings_store
        self._app_settings = app_settings

    async def _get_settings_store(self) -> ISettingsStore:
        if self._settings_store is None:
            from madafacture.infrastructure.storage.sqlite import get_settings_store

            self._settings_store = await get_settings_store()
        return self._settings_store

    async def execute(self) -> UserSettings:
        store = await self._get_settings_store()
        existing = await store.get_settings()
        if existing is not None:
            return existing

        business = (self._app_settings or get_settings()).business
        profile = UserSettings(
            business_name=business.business_name,
            nif=business.nif,
            stat=business.stat,
            rcs=business.rcs,
            bank_info=business.bank_info,
            address=business.address,
            phone=business.phone,
            email=business.email,
            logo_path=business.logo_path,
            default_vat=business.default_vat,
            currency=business.currency,
            currency_name=business.currency_name,
            domain=BusinessDomain(business.domain),
            invoice_prefix=business.invoice_prefix,
            next_invoice_number=business.first_invoice_number,
            shop_mode_enabled=business.shop_mode_enabled,
            show_profits=business.show_profits,
        )
        profile = await store.create_settings(profile)
        logger.info("settings_initialized", settings_id=profile.id)
        return profile


class UpdateSettingsUseCase:
    """Edit the business profile. Sequence counters cannot be changed here."""

    def __init__(self, settings_store: ISettingsStore | None = None):
        self._settings_store = settings_store

    async def _get_settings_store(self) -> ISettingsStore:
        if self._settings_store is None:
            from madafacture.infrastructure.storage.sqlite import get_settings_store

            self._settings_store = await get_settings_store()
        return self._settings_store

    async def execute(self, request: UpdateSettingsRequest) -> UserSettings:
        store = await self._get_settings_store()
        current = await store.get_settings()
        if current is None:
            raise SettingsNotInitializedError()

        changes = request.model_dump(exclude_unset=True)
        updated = UserSettings.model_validate({**current.model_dump(), **changes})
        return await store.update_settings(updated)
