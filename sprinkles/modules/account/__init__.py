"""Account sprinkle: services only, no initializer."""

from .services import ServicesProvider

__all__ = ["ServicesProvider", "register"]


def register(registry):
    """Add the account sprinkle's services provider to a sprinkle registry."""
    registry.add_services("account", ServicesProvider)
