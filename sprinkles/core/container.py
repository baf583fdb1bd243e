"""Service container shared by all sprinkles."""

import logging
from typing import Any, Callable, Dict, List

from .errors import ServiceNotFoundError

logger = logging.getLogger(__name__)


class ServiceDescriptor:
    """Records how a service is created and caches its shared instance."""

    __slots__ = ("factory", "shared", "instance", "resolved")

    def __init__(self, factory: Callable[["ServiceContainer"], Any], shared: bool = True):
        self.factory = factory
        self.shared = shared
        self.instance: Any = None
        self.resolved = False


class ServiceContainer:
    """
    Named service container.

    Services providers receive the container and add bindings to it with
    :meth:`register` (lazy factories) or :meth:`set` (ready instances).
    Services are read back with :meth:`get` or as attributes, so
    ``container.locator`` is ``container.get("locator")``.
    """

    def __init__(self, services: Dict[str, Any] = None):
        object.__setattr__(self, "_services", {})
        for name, instance in (services or {}).items():
            self.set(name, instance)

    def register(self, name: str, factory: Callable[["ServiceContainer"], Any], shared: bool = True):
        """
        Register a service factory.

        Args:
            name: Service name
            factory: Callable receiving the container and returning the service
            shared: Create the service once and reuse it on every lookup
        """
        if name in self._services:
            logger.debug(f"Service {name} already registered, replacing")
        self._services[name] = ServiceDescriptor(factory, shared)
        logger.debug(f"Registered service: {name} (shared={shared})")

    def set(self, name: str, instance: Any):
        """Register an existing instance as a shared service."""
        descriptor = ServiceDescriptor(lambda container: instance, shared=True)
        descriptor.instance = instance
        descriptor.resolved = True
        self._services[name] = descriptor

    def extend(self, name: str, decorator: Callable[[Any, "ServiceContainer"], Any]):
        """
        Wrap an already registered service.

        The decorator receives the original service and the container and
        returns the replacement. Sprinkles loaded later use this to override
        services of earlier ones.
        """
        if name not in self._services:
            raise ServiceNotFoundError(name)
        previous = self._services[name]

        def factory(container):
            return decorator(self._build(previous), container)

        self._services[name] = ServiceDescriptor(factory, previous.shared)

    def get(self, name: str) -> Any:
        """Resolve a service by name."""
        descriptor = self._services.get(name)
        if descriptor is None:
            raise ServiceNotFoundError(name)
        return self._build(descriptor)

    def has(self, name: str) -> bool:
        return name in self._services

    def names(self) -> List[str]:
        return list(self._services)

    def _build(self, descriptor: ServiceDescriptor) -> Any:
        if not descriptor.shared:
            return descriptor.factory(self)
        if not descriptor.resolved:
            descriptor.instance = descriptor.factory(self)
            descriptor.resolved = True
        return descriptor.instance

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.get(name)
        except ServiceNotFoundError:
            raise AttributeError(f"Container has no service '{name}'") from None

    def __setattr__(self, name: str, value: Any):
        self.set(name, value)

    def __repr__(self):
        return f"<ServiceContainer: {len(self._services)} services>"
