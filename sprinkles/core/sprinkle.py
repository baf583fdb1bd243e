"""Base classes sprinkle packages extend."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class Sprinkle:
    """
    Base class for sprinkle initializers.

    A sprinkle package adds a subclass to the registry from its
    ``register(registry)`` hook. The manager creates it
    with the shared service container and subscribes it to the event
    dispatcher, so the events returned by :meth:`get_subscribed_events` are
    routed to its methods.
    """

    def __init__(self, container):
        """
        Initialize the sprinkle.

        Args:
            container: The service container shared by all sprinkles
        """
        self.ci = container

    @property
    def name(self) -> str:
        """Sprinkle name (canonical identifier)."""
        return type(self).__name__

    def get_subscribed_events(self) -> Dict[str, Any]:
        """
        Get the events this sprinkle listens to.

        Returns:
            Dict mapping event names to a method name, a
            ``(method_name, priority)`` tuple, or a list of those
        """
        return {}

    def __repr__(self):
        return f"<Sprinkle: {self.name}>"


class ServicesProvider(ABC):
    """Base class for the object that adds a sprinkle's services to the container."""

    @abstractmethod
    def register(self, container):
        """
        Register services.

        Args:
            container: The service container shared by all sprinkles
        """
        pass
