"""Core sprinkle initializer."""

import logging

from sprinkles.core import Sprinkle
from sprinkles.core.events import SPRINKLES_ADD_RESOURCES, SPRINKLES_INITIALIZED

logger = logging.getLogger(__name__)


class Core(Sprinkle):
    """Bootstrapper for the core sprinkle."""

    def __init__(self, container):
        super().__init__(container)
        self.loaded_sprinkles = []
        self.streams = []

    def get_subscribed_events(self):
        return {
            SPRINKLES_INITIALIZED: ("on_sprinkles_initialized", 100),
            SPRINKLES_ADD_RESOURCES: "on_sprinkles_add_resources",
        }

    def on_sprinkles_initialized(self, event, event_name, dispatcher):
        self.loaded_sprinkles = list(event.payload.get("sprinkles", []))
        logger.info(f"Core sees {len(self.loaded_sprinkles)} sprinkles")

    def on_sprinkles_add_resources(self, event, event_name, dispatcher):
        locator = event.payload.get("locator")
        if locator is None:
            return
        self.streams = locator.schemes()
        # Templates are looked up by the view layer; nothing to render without them
        if not locator.find_resource("templates://"):
            logger.warning("No templates directory found in any sprinkle")
