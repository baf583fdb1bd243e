"""Sprinkles bundled with the framework."""
