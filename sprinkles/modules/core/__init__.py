"""Core sprinkle."""

from .services import ServicesProvider
from .sprinkle import Core

__all__ = ["Core", "ServicesProvider", "register"]


def register(registry):
    """Add the core sprinkle's factories to a sprinkle registry."""
    registry.add_sprinkle("core", Core)
    registry.add_services("core", ServicesProvider)
