"""Sprinkle bootstrap layer: loads plugins and mounts their resource streams."""

__version__ = "1.0.0"
