"""Shared test fixtures for the sprinkle bootstrap test suite."""

import json
import os
import sys

import pytest

# Add parent directory to path so we can import the sprinkles package
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sprinkles.core import (
    EventDispatcher,
    ServiceContainer,
    SprinkleManager,
    SprinkleRegistry,
    UniformResourceLocator,
)


@pytest.fixture
def sprinkles_root(tmp_path):
    """Create a sprinkles directory with core and site sprinkles."""
    root = tmp_path / "app" / "sprinkles"
    for name in ["core", "site"]:
        (root / name / "config").mkdir(parents=True)
        (root / name / "templates" / "pages").mkdir(parents=True)
        (root / name / "templates" / "pages" / "index.html.twig").write_text(f"{name} home")
    (root / "core" / "templates" / "pages" / "about.html.twig").write_text("core about")
    (root / "core" / "locale").mkdir()
    (root / "core" / "config" / "default.yaml").write_text(
        "site:\n  title: Core title\n  author: Core author\ntimezone: UTC\n"
    )
    (root / "site" / "config" / "default.yaml").write_text("site:\n  title: Site title\n")
    return root


@pytest.fixture
def write_schema(tmp_path):
    """Return a helper writing a load-order document and returning its path."""
    def _write(names, filename="sprinkles.json"):
        path = tmp_path / filename
        path.write_text(json.dumps({"base": names}))
        return path
    return _write


@pytest.fixture
def test_registry():
    """Create an empty registry with package discovery disabled."""
    return SprinkleRegistry(namespace=None)


@pytest.fixture
def container():
    """Create a container holding a locator and an event dispatcher."""
    ci = ServiceContainer()
    ci.set("locator", UniformResourceLocator())
    ci.set("event_dispatcher", EventDispatcher())
    return ci


@pytest.fixture
def manager(container, sprinkles_root, test_registry):
    """Create a sprinkle manager over the temporary sprinkles directory."""
    sprinkle_manager = SprinkleManager(
        container, sprinkles_path=sprinkles_root, registry=test_registry
    )
    container.set("sprinkle_manager", sprinkle_manager)
    return sprinkle_manager
