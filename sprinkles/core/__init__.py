"""Core sprinkle bootstrap functionality."""

from .container import ServiceContainer
from .errors import InvalidUriError, NotFoundError, ServiceNotFoundError, SprinkleError
from .events import Event, EventDispatcher
from .locator import UniformResourceLocator
from .manager import SprinkleManager
from .registry import (
    Resolution,
    SprinkleRegistry,
    registry,
    studly,
)
from .sprinkle import ServicesProvider, Sprinkle

__all__ = [
    "ServiceContainer",
    "SprinkleError",
    "NotFoundError",
    "ServiceNotFoundError",
    "InvalidUriError",
    "Event",
    "EventDispatcher",
    "UniformResourceLocator",
    "SprinkleManager",
    "Resolution",
    "SprinkleRegistry",
    "registry",
    "studly",
    "Sprinkle",
    "ServicesProvider",
]
