"""Services of the account sprinkle."""

import copy
import logging

from sprinkles.core import SprinkleError
from sprinkles.core import ServicesProvider as BaseServicesProvider

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_SETTINGS = {
    "session_key": "account",
    "registration": {"enabled": True, "require_email_verification": True},
}


class ServicesProvider(BaseServicesProvider):
    """Registers account settings on top of the core configuration."""

    def register(self, container):
        manager = container.get("sprinkle_manager") if container.has("sprinkle_manager") else None
        if manager is not None and not manager.is_available("core"):
            raise SprinkleError("The account sprinkle requires the core sprinkle")

        def account_settings(ci):
            settings = copy.deepcopy(DEFAULT_ACCOUNT_SETTINGS)
            if ci.has("config"):
                settings.update(ci.config.get("account", {}) or {})
            return settings

        container.register("account_settings", account_settings)
        logger.debug("Registered account settings service")
