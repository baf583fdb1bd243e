"""Registration table mapping sprinkle identifiers to their factories."""

import importlib
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Set

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "sprinkles.modules"


def studly(name: str) -> str:
    """
    Convert a sprinkle name to its canonical StudlyCase identifier.

    Dashes and underscores separate words; the first letter of every word is
    upper-cased and the rest is kept as written, so ``"userAuth"``,
    ``"UserAuth"`` and ``"user_auth"`` all become ``"UserAuth"``.
    """
    words = re.split(r"[\s_-]+", name)
    return "".join(word[:1].upper() + word[1:] for word in words)


def snake(name: str) -> str:
    """Convert a sprinkle name to the package name it is imported from."""
    canonical = studly(name)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", canonical).lower()


@dataclass(frozen=True)
class Resolution:
    """Outcome of looking up a sprinkle name; ``value`` is None when absent."""

    name: str
    canonical: str
    value: Optional[Any] = None

    @property
    def found(self) -> bool:
        return self.value is not None


class SprinkleRegistry:
    """Registry of sprinkle initializers and services providers."""

    def __init__(self, namespace: Optional[str] = DEFAULT_NAMESPACE):
        """
        Initialize the registry.

        Args:
            namespace: Package searched for sprinkle packages that have not
                registered themselves yet, or None to disable discovery
        """
        self.namespace = namespace
        self._sprinkles: Dict[str, Callable[..., Any]] = {}
        self._services: Dict[str, Callable[..., Any]] = {}
        self._discovered: Set[str] = set()

    # Registration ---------------------------------------------------------
    def add_sprinkle(self, name: str, factory: Callable[..., Any]):
        """
        Register the initializer factory for a sprinkle.

        Args:
            name: Sprinkle name in any capitalization
            factory: Callable taking the service container and returning
                the sprinkle initializer
        """
        canonical = studly(name)
        if canonical in self._sprinkles:
            logger.warning(f"Sprinkle {canonical} already registered, replacing")
        self._sprinkles[canonical] = factory
        logger.debug(f"Registered sprinkle initializer: {canonical}")

    def add_services(self, name: str, factory: Callable[..., Any]):
        """
        Register the services provider factory for a sprinkle.

        Args:
            name: Sprinkle name in any capitalization
            factory: Callable taking no arguments and returning an object
                with a ``register(container)`` method
        """
        canonical = studly(name)
        if canonical in self._services:
            logger.warning(f"Services provider {canonical} already registered, replacing")
        self._services[canonical] = factory
        logger.debug(f"Registered services provider: {canonical}")

    def register_sprinkle(self, name: str):
        """Class decorator form of :meth:`add_sprinkle`."""
        def decorator(factory):
            self.add_sprinkle(name, factory)
            return factory
        return decorator

    def register_services(self, name: str):
        """Class decorator form of :meth:`add_services`."""
        def decorator(factory):
            self.add_services(name, factory)
            return factory
        return decorator

    def unregister(self, name: str):
        """Remove both factories of a sprinkle."""
        canonical = studly(name)
        self._sprinkles.pop(canonical, None)
        self._services.pop(canonical, None)

    # Lookup ---------------------------------------------------------------
    def resolve_sprinkle(self, name: str) -> Resolution:
        """Look up the initializer factory registered for ``name``."""
        self.discover(name)
        canonical = studly(name)
        return Resolution(name, canonical, self._sprinkles.get(canonical))

    def resolve_services(self, name: str) -> Resolution:
        """Look up the services provider factory registered for ``name``."""
        self.discover(name)
        canonical = studly(name)
        return Resolution(name, canonical, self._services.get(canonical))

    def sprinkle_ids(self) -> List[str]:
        return list(self._sprinkles)

    def services_ids(self) -> List[str]:
        return list(self._services)

    def discover(self, name: str) -> bool:
        """
        Import the package of a sprinkle and let it register itself.

        After the import, the package's ``register(registry)`` hook is called
        with this registry, so every registry instance gets the package's
        factories, even when the package was already imported for another
        registry. Each package is discovered at most once per registry. A
        package that does not exist is not an error: sprinkles without Python
        code are legal.

        Args:
            name: Sprinkle name in any capitalization

        Returns:
            True if the package was imported and registered
        """
        if not self.namespace:
            return False

        module_path = f"{self.namespace}.{snake(name)}"
        if module_path in self._discovered:
            return False

        try:
            module = importlib.import_module(module_path)
        except ModuleNotFoundError as e:
            # Only a missing sprinkle package (or namespace) means absence;
            # a missing dependency inside the package must surface.
            if e.name and (module_path == e.name or module_path.startswith(e.name + ".")):
                logger.debug(f"No Python package for sprinkle {name} at {module_path}")
                self._discovered.add(module_path)
                return False
            raise

        hook = getattr(module, "register", None)
        if callable(hook):
            hook(self)
        else:
            logger.warning(f"Sprinkle package {module_path} has no register() hook")

        self._discovered.add(module_path)
        logger.info(f"Imported sprinkle package: {module_path}")
        return True


# Global sprinkle registry instance
registry = SprinkleRegistry()
