"""Tests for application settings loading."""

import pytest
import yaml

from sprinkles import config


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    monkeypatch.setattr(config, "_config", {})
    monkeypatch.setattr(config, "_base_path", None)


def write_config(tmp_path, data):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    path = config_dir / "config.yaml"
    path.write_text(yaml.dump(data))
    return path


class TestLoadConfig:
    """Test reading config.yaml."""

    def test_defaults_and_resolved_paths(self, tmp_path):
        path = write_config(tmp_path, {"logging": {"level": "DEBUG"}})
        settings = config.load_config(str(path))

        root = tmp_path.resolve()
        assert settings["sprinkles"]["path"] == str(root / "app" / "sprinkles")
        assert settings["sprinkles"]["schema"] == str(root / "app" / "sprinkles.json")
        assert settings["sprinkles"]["namespace"] == "sprinkles.modules"
        assert settings["logging"]["level"] == "DEBUG"
        assert settings["logging"]["file"] is None

    def test_absolute_paths_kept(self, tmp_path):
        schema = tmp_path / "elsewhere" / "order.yaml"
        path = write_config(tmp_path, {"sprinkles": {"schema": str(schema)}, "logging": {"file": "logs/app.log"}})
        config.load_config(str(path))

        assert config.get("sprinkles.schema") == str(schema)
        assert config.get("logging.file") == str(tmp_path.resolve() / "logs" / "app.log")

    def test_dot_notation_default(self, tmp_path):
        config.load_config(str(write_config(tmp_path, {"environment": "production"})))
        assert config.get("environment") == "production"
        assert config.get("sprinkles.missing", "fallback") == "fallback"
        assert config.get_config()["environment"] == "production"

    def test_no_config_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        with pytest.raises(FileNotFoundError):
            config.load_config()
