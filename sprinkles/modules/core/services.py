"""Services of the core sprinkle."""

from sprinkles.core import ServicesProvider as BaseServicesProvider
from sprinkles.core.config_repository import ConfigRepository


class ServicesProvider(BaseServicesProvider):
    """Registers the services every other sprinkle relies on."""

    def register(self, container):
        def config(ci):
            settings = ci.get("settings") if ci.has("settings") else {}
            return ConfigRepository.from_locator(ci.locator, settings.get("environment"))

        container.register("config", config)
