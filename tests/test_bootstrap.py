"""End-to-end tests booting the bundled application."""

from pathlib import Path

import pytest

from sprinkles.bootstrap import boot, create_container
from sprinkles.core import SprinkleError, SprinkleRegistry, registry
from sprinkles.core.events import SPRINKLES_INITIALIZED
from sprinkles.modules.account.services import DEFAULT_ACCOUNT_SETTINGS
from sprinkles.modules.core import Core

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def settings():
    return {
        "sprinkles": {
            "path": str(PROJECT_ROOT / "app" / "sprinkles"),
            "schema": str(PROJECT_ROOT / "app" / "sprinkles.json"),
            "namespace": "sprinkles.modules",
        },
        "environment": None,
        "logging": {"level": "INFO", "file": None},
    }


class TestBoot:
    """Test the full startup sequence."""

    def test_sprinkles_loaded_in_order(self, settings):
        container = boot(settings)
        manager = container.sprinkle_manager

        assert manager.get_sprinkle_names() == ["core", "account", "site"]
        sprinkles = manager.get_sprinkles()
        assert isinstance(sprinkles["core"], Core)
        assert sprinkles["account"] is None
        assert sprinkles["site"] is None
        assert manager.is_available("site")

    def test_core_receives_boot_events(self, settings):
        container = boot(settings)
        core = container.sprinkle_manager.get_sprinkles()["core"]

        assert core.loaded_sprinkles == ["core", "account", "site"]
        assert "templates" in core.streams

    def test_site_overrides_core(self, settings):
        container = boot(settings)

        assert container.config.get("site.title") == "Exercise"
        assert container.config.get("address_book.admin.name") == "dam"
        assert container.config.get("timezone") == "Europe/London"
        home = container.locator.find_resource("templates://pages/index.html.twig")
        assert Path(home).parent.parent.parent.name == "site"

    def test_account_services(self, settings):
        container = boot(settings)

        account = container.account_settings
        assert account["session_key"] == "account"
        assert account["registration"]["enabled"] is True

    def test_account_requires_core(self, settings, tmp_path):
        schema = tmp_path / "sprinkles.json"
        schema.write_text('{"base": ["account"]}')
        settings["sprinkles"]["schema"] = str(schema)

        with pytest.raises(SprinkleError):
            boot(settings)

    def test_container_services(self, settings):
        container = create_container(settings)

        assert {"settings", "locator", "event_dispatcher", "sprinkle_manager"} <= set(container.names())
        assert container.sprinkle_manager.locator is container.locator
        assert container.sprinkle_manager.dispatcher is container.event_dispatcher

    def test_custom_listener_sees_initialized_event(self, settings):
        container = create_container(settings)
        seen = []
        container.event_dispatcher.add_listener(
            SPRINKLES_INITIALIZED, lambda event, name, dispatcher: seen.append(event.payload["sprinkles"])
        )

        boot(settings, container)

        assert seen == [["core", "account", "site"]]

    def test_account_settings_do_not_share_defaults(self, settings):
        first = boot(settings)
        first.account_settings["registration"]["enabled"] = False

        second = boot(settings)

        assert second.account_settings["registration"]["enabled"] is True
        assert DEFAULT_ACCOUNT_SETTINGS["registration"]["enabled"] is True


class TestRegistryScope:
    """Test that each container resolves sprinkles through its own registry."""

    def test_boot_with_fresh_registry(self, settings):
        local = SprinkleRegistry(namespace="sprinkles.modules")
        container = boot(settings, create_container(settings, registry=local))

        assert isinstance(container.sprinkle_manager.get_sprinkles()["core"], Core)
        assert container.has("config")
        assert container.has("account_settings")
        assert container.sprinkle_registry is local

    def test_default_registry_is_scoped_to_container(self, settings):
        first = create_container(settings)
        second = create_container(settings)

        assert first.sprinkle_registry is not registry
        assert first.sprinkle_registry is not second.sprinkle_registry
        assert first.sprinkle_manager.registry is first.sprinkle_registry

    def test_namespace_setting_leaves_global_registry_alone(self, settings):
        settings["sprinkles"]["namespace"] = "other.ns"

        container = create_container(settings)

        assert container.sprinkle_registry.namespace == "other.ns"
        assert registry.namespace == "sprinkles.modules"
