"""Application startup: builds the container and boots every sprinkle."""

import logging
from pathlib import Path
from typing import Any, Dict

from sprinkles.core import (
    EventDispatcher,
    ServiceContainer,
    SprinkleManager,
    SprinkleRegistry,
    UniformResourceLocator,
)
from sprinkles.core.registry import DEFAULT_NAMESPACE
from sprinkles.core.events import (
    SPRINKLES_ADD_RESOURCES,
    SPRINKLES_INITIALIZED,
    SPRINKLES_REGISTER_SERVICES,
    Event,
)

logger = logging.getLogger(__name__)


def setup_logging(settings: Dict[str, Any], debug: bool = False):
    """Configure the root logger from the ``logging`` settings section."""
    log_settings = settings.get("logging") or {}
    level = "DEBUG" if debug else str(log_settings.get("level", "INFO")).upper()

    handlers = [logging.StreamHandler()]
    if log_settings.get("file"):
        Path(log_settings["file"]).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_settings["file"]))

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def create_container(settings: Dict[str, Any], registry=None) -> ServiceContainer:
    """
    Create the service container holding the bootstrap services.

    Args:
        settings: Loaded application settings (see :mod:`sprinkles.config`)
        registry: Sprinkle registration table; by default a new one scoped
            to this container, searching ``sprinkles.namespace``

    Returns:
        Container with ``settings``, ``sprinkle_registry``, ``locator``,
        ``event_dispatcher`` and ``sprinkle_manager``
    """
    sprinkle_settings = settings.get("sprinkles") or {}
    if registry is None:
        registry = SprinkleRegistry(namespace=sprinkle_settings.get("namespace", DEFAULT_NAMESPACE))

    container = ServiceContainer()
    container.set("settings", settings)
    container.set("sprinkle_registry", registry)
    container.register("locator", lambda ci: UniformResourceLocator())
    container.register("event_dispatcher", lambda ci: EventDispatcher())
    container.register(
        "sprinkle_manager",
        lambda ci: SprinkleManager(
            ci,
            sprinkles_path=sprinkle_settings.get("path", "app/sprinkles"),
            registry=registry,
        ),
    )
    return container


def boot(settings: Dict[str, Any], container: ServiceContainer = None) -> ServiceContainer:
    """
    Boot every sprinkle of the load-order document named in the settings.

    Sprinkles are initialized, their resources are mounted, then their
    services are registered; an event is dispatched after each step.
    """
    if container is None:
        container = create_container(settings)

    manager = container.sprinkle_manager
    dispatcher = container.event_dispatcher
    schema = (settings.get("sprinkles") or {}).get("schema", "app/sprinkles.json")

    manager.init_from_schema(schema)
    dispatcher.dispatch(SPRINKLES_INITIALIZED, Event(payload={"sprinkles": manager.get_sprinkle_names()}))

    manager.add_resources()
    dispatcher.dispatch(SPRINKLES_ADD_RESOURCES, Event(payload={"locator": container.locator}))

    manager.register_all_services()
    dispatcher.dispatch(SPRINKLES_REGISTER_SERVICES, Event(payload={"container": container}))

    logger.info(f"Booted sprinkles: {', '.join(manager.get_sprinkle_names())}")
    return container
