"""Exceptions raised by the sprinkle bootstrap layer."""


class SprinkleError(Exception):
    """Base class for sprinkle bootstrap errors."""


class NotFoundError(SprinkleError, FileNotFoundError):
    """The sprinkle load-order document could not be read."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path

    def __str__(self):
        if self.path is None:
            return self.args[0]
        return f"{self.args[0]} ({self.path})"


class ServiceNotFoundError(SprinkleError, KeyError):
    """No service with the requested name is registered in the container."""

    def __str__(self):
        return f"Service not found in container: {self.args[0]}"


class InvalidUriError(SprinkleError, ValueError):
    """A stream URI could not be parsed."""
