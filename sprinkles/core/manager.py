"""Sprinkle manager: loads sprinkles and mounts their resources."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import NotFoundError
from .registry import Resolution, SprinkleRegistry, registry as default_registry

logger = logging.getLogger(__name__)

DEFAULT_SPRINKLES_PATH = Path("app") / "sprinkles"


class SprinkleManager:
    """
    Loads a series of sprinkles, running their bootstrapping code and
    publishing their resource directories.
    """

    def __init__(self, container, locator=None, dispatcher=None,
                 sprinkles_path=None, registry: SprinkleRegistry = None):
        """
        Create the manager.

        Args:
            container: The service container shared by all sprinkles
            locator: Resource locator; defaults to the container's ``locator``
            dispatcher: Event dispatcher; defaults to the container's
                ``event_dispatcher``
            sprinkles_path: Directory holding one subdirectory per sprinkle
            registry: Registration table used to resolve sprinkle names
        """
        self.ci = container
        self._locator = locator
        self._dispatcher = dispatcher
        self.sprinkles_path = Path(sprinkles_path) if sprinkles_path is not None else DEFAULT_SPRINKLES_PATH
        self.registry = registry or default_registry
        self._sprinkles: Dict[str, Optional[Any]] = {}

    @property
    def locator(self):
        if self._locator is None:
            self._locator = self.ci.get("locator")
        return self._locator

    @property
    def dispatcher(self):
        if self._dispatcher is None:
            self._dispatcher = self.ci.get("event_dispatcher")
        return self._dispatcher

    # Loading ----------------------------------------------------------------
    def load_schema(self, schema_path) -> List[str]:
        """
        Load the list of base sprinkles from a load-order document.

        JSON documents (``.json``) and YAML documents are accepted; the
        ``base`` field holds the ordered list of sprinkle names.

        Args:
            schema_path: Path to the document, e.g. ``app/sprinkles.json``

        Returns:
            Sprinkle names in load order

        Raises:
            NotFoundError: If the document cannot be read
        """
        schema_path = Path(schema_path)
        try:
            content = schema_path.read_text(encoding="utf-8")
        except OSError as e:
            raise NotFoundError("Error: Unable to determine Sprinkle load order.", schema_path) from e

        if schema_path.suffix.lower() == ".json":
            document = json.loads(content)
        else:
            document = yaml.safe_load(content)

        return list(document["base"])

    def resolve(self, name: str) -> Resolution:
        """Look up the initializer factory of a sprinkle without creating it."""
        return self.registry.resolve_sprinkle(name)

    def resolve_services(self, name: str) -> Resolution:
        """Look up the services provider factory of a sprinkle without creating it."""
        return self.registry.resolve_services(name)

    def boot_sprinkle(self, name: str):
        """
        Create the initializer of a sprinkle, if it defines one.

        Args:
            name: Sprinkle name; capitalization is normalized to StudlyCase

        Returns:
            The initializer instance, or None
        """
        resolution = self.resolve(name)
        if not resolution.found:
            logger.debug(f"Sprinkle {name} has no initializer")
            return None
        return resolution.value(self.ci)

    def init_from_schema(self, schema_path):
        """
        Boot every sprinkle listed in a load-order document.

        Each initializer found is subscribed to the event dispatcher. Every
        listed name is recorded, with or without an initializer.
        """
        sprinkle_names = self.load_schema(schema_path)

        sprinkles = {}
        for sprinkle_name in sprinkle_names:
            sprinkle = self.boot_sprinkle(sprinkle_name)

            if sprinkle is not None:
                self.dispatcher.add_subscriber(sprinkle)

            sprinkles[sprinkle_name] = sprinkle

        self._sprinkles = sprinkles

        logger.info(f"Loaded {len(sprinkle_names)} sprinkles: {', '.join(sprinkle_names)}")

    # Services ---------------------------------------------------------------
    def register_services(self, name: str) -> bool:
        """
        Register the services of a sprinkle, if it defines a services provider.

        Returns:
            True if a services provider was found and run
        """
        resolution = self.resolve_services(name)
        if not resolution.found:
            return False

        provider = resolution.value()
        provider.register(self.ci)
        logger.info(f"Registered services for sprinkle: {name}")
        return True

    def register_all_services(self):
        for sprinkle_name in self.get_sprinkle_names():
            self.register_services(sprinkle_name)

    # Resources --------------------------------------------------------------
    def _add_stream_path(self, stream: str, directory: str, name: str) -> Optional[str]:
        path = self.sprinkles_path / name / directory
        self.locator.add_path(stream, "", str(path))
        return self.locator.find_resource(f"{stream}://", True, False)

    def add_config(self, name: str) -> Optional[str]:
        """
        Add a sprinkle's config directory to the ``config://`` stream.

        Returns:
            The highest priority existing config directory, or None
        """
        return self._add_stream_path("config", "config", name)

    def add_assets(self, name: str) -> Optional[str]:
        """Add a sprinkle's assets directory to the ``assets://`` stream."""
        return self._add_stream_path("assets", "assets", name)

    def add_extras(self, name: str) -> Optional[str]:
        """Add a sprinkle's extras directory to the ``extra://`` stream."""
        return self._add_stream_path("extra", "extras", name)

    def add_locale(self, name: str) -> Optional[str]:
        """Add a sprinkle's locale directory to the ``locale://`` stream."""
        return self._add_stream_path("locale", "locale", name)

    def add_routes(self, name: str) -> Optional[str]:
        """Add a sprinkle's routes directory to the ``routes://`` stream."""
        return self._add_stream_path("routes", "routes", name)

    def add_schema(self, name: str) -> Optional[str]:
        """Add a sprinkle's request schema directory to the ``schema://`` stream."""
        return self._add_stream_path("schema", "schema", name)

    def add_templates(self, name: str) -> Optional[str]:
        """Add a sprinkle's templates directory to the ``templates://`` stream."""
        return self._add_stream_path("templates", "templates", name)

    def add_resources(self):
        """Register the resource streams of every loaded sprinkle, in load order."""
        for sprinkle_name in self._sprinkles:
            self.add_config(sprinkle_name)
            self.add_assets(sprinkle_name)
            self.add_extras(sprinkle_name)
            self.add_locale(sprinkle_name)
            self.add_routes(sprinkle_name)
            self.add_schema(sprinkle_name)
            self.add_templates(sprinkle_name)

        logger.info(f"Added resources for {len(self._sprinkles)} sprinkles")

    # Accessors --------------------------------------------------------------
    def set_sprinkles(self, sprinkles: Dict[str, Optional[Any]]):
        """Replace the loaded sprinkles with a name -> initializer mapping."""
        self._sprinkles = dict(sprinkles)
        return self

    def get_sprinkles(self) -> Dict[str, Optional[Any]]:
        return self._sprinkles

    def get_sprinkle_names(self) -> List[str]:
        return list(self._sprinkles)

    def is_available(self, name: str) -> bool:
        """
        Whether a sprinkle is loaded.

        Sprinkles use this to check that their dependencies are met.
        """
        return name in self._sprinkles

    def __repr__(self):
        return f"<SprinkleManager: {', '.join(self._sprinkles) or 'no sprinkles'}>"
