"""Tests for the service container."""

import pytest

from sprinkles.core import ServiceContainer, ServiceNotFoundError


class TestServiceContainer:
    """Test registering and resolving services."""

    def test_shared_service_created_once(self):
        container = ServiceContainer()
        calls = []
        container.register("db", lambda ci: calls.append(1) or object())

        assert container.get("db") is container.get("db")
        assert len(calls) == 1

    def test_non_shared_service_created_each_time(self):
        container = ServiceContainer()
        container.register("request", lambda ci: object(), shared=False)
        assert container.get("request") is not container.get("request")

    def test_factory_receives_container(self):
        container = ServiceContainer({"name": "site"})
        container.register("title", lambda ci: ci.name.upper())
        assert container.title == "SITE"

    def test_attribute_assignment_sets_service(self):
        container = ServiceContainer()
        container.locator = "locator"
        assert container.get("locator") == "locator"
        assert "locator" in container
        assert container.names() == ["locator"]

    def test_unknown_service(self):
        container = ServiceContainer()
        with pytest.raises(ServiceNotFoundError):
            container.get("missing")
        with pytest.raises(KeyError):
            container.get("missing")
        with pytest.raises(AttributeError):
            container.missing
        assert not container.has("missing")

    def test_extend_wraps_previous_service(self):
        container = ServiceContainer()
        container.register("greeting", lambda ci: "hello")
        container.extend("greeting", lambda previous, ci: previous + " world")

        assert container.greeting == "hello world"

    def test_extend_unknown_service(self):
        with pytest.raises(ServiceNotFoundError):
            ServiceContainer().extend("missing", lambda previous, ci: previous)

    def test_later_registration_wins(self):
        container = ServiceContainer()
        container.register("theme", lambda ci: "core")
        container.register("theme", lambda ci: "site")
        assert container.theme == "site"
