"""
Unit tests for ConfigService.
"""

import pytest
import json

import yaml

from src.services.config_service import ConfigService, MockConfigService
from src.models.config import EventsConfig, CONFIG_VERSION, DEFAULT_IGNORED_ATTRS
from src.events.errors import ConfigError


class TestConfigService:
    """Tests for ConfigService."""

    def test_load_creates_default_when_missing(self):
        """Should return default config when file doesn't exist."""
        service = ConfigService("/nonexistent/path/events.json")
        config = service.load()

        assert isinstance(config, EventsConfig)
        assert config.ignored_attrs == DEFAULT_IGNORED_ATTRS
        assert config.strict_lifecycle is True

    def test_load_json(self, temp_events_json):
        """Should load settings from a JSON file and default the rest."""
        with open(temp_events_json, 'w') as f:
            json.dump({
                "_version": 1,
                "ignored_attrs": ["onLoad", "onRender"],
                "strict_lifecycle": False,
            }, f)

        config = ConfigService(temp_events_json).load()

        assert config.ignored_attrs == ("onLoad", "onRender")
        assert config.strict_lifecycle is False
        assert config.log_events is False

    def test_load_yaml(self, temp_events_yaml):
        """Should load settings from a YAML file."""
        with open(temp_events_yaml, 'w') as f:
            f.write(
                "ignored_attrs:\n"
                "  - onceOnIdle\n"
                "debug_logging: true\n"
            )

        config = ConfigService(temp_events_yaml).load()

        assert config.ignored_attrs == ("onceOnIdle",)
        assert config.debug_logging is True

    def test_empty_yaml_gives_defaults(self, temp_events_yaml):
        """An empty YAML file gives the default config."""
        open(temp_events_yaml, 'w').close()

        config = ConfigService(temp_events_yaml).load()
        assert config == EventsConfig()

    def test_save_json_round_trip(self, temp_events_json):
        """Saved JSON carries the version and loads back unchanged."""
        service = ConfigService(temp_events_json)
        service.save(EventsConfig(ignored_attrs=("onFoo",), log_events=True))

        with open(temp_events_json) as f:
            raw = json.load(f)
        assert raw["ignored_attrs"] == ["onFoo"]
        assert raw["_version"] == CONFIG_VERSION

        loaded = ConfigService(temp_events_json).load()
        assert loaded.ignored_attrs == ("onFoo",)
        assert loaded.log_events is True

    def test_save_yaml(self, temp_events_yaml):
        """Should write YAML when the path has a .yaml suffix."""
        ConfigService(temp_events_yaml).save(EventsConfig(strict_lifecycle=False))

        with open(temp_events_yaml) as f:
            raw = yaml.safe_load(f)
        assert raw["strict_lifecycle"] is False

    def test_corrupted_json_raises(self, temp_events_json):
        """Malformed JSON raises ConfigError."""
        with open(temp_events_json, 'w') as f:
            f.write("{ invalid json content")

        with pytest.raises(ConfigError):
            ConfigService(temp_events_json).load()

    def test_corrupted_yaml_raises(self, temp_events_yaml):
        """Malformed YAML raises ConfigError."""
        with open(temp_events_yaml, 'w') as f:
            f.write("ignored_attrs: [onLoad\n")

        with pytest.raises(ConfigError):
            ConfigService(temp_events_yaml).load()

    def test_non_mapping_raises(self, temp_events_json):
        """A top-level list is rejected."""
        with open(temp_events_json, 'w') as f:
            json.dump(["onLoad"], f)

        with pytest.raises(ConfigError, match="must contain a mapping"):
            ConfigService(temp_events_json).load()

    def test_bad_ignored_attrs_raises(self, temp_events_json):
        """ignored_attrs given as a string is rejected."""
        with open(temp_events_json, 'w') as f:
            json.dump({"ignored_attrs": "onLoad"}, f)

        with pytest.raises(ConfigError, match="ignored_attrs"):
            ConfigService(temp_events_json).load()

    def test_config_path(self, temp_events_yaml):
        """The path given at construction is reported, events.json otherwise."""
        assert ConfigService(temp_events_yaml).get_config_path() == temp_events_yaml
        assert ConfigService().get_config_path() == "events.json"


class TestMockConfigService:
    """Tests for MockConfigService."""

    def test_records_saves(self):
        """Saves are kept in memory and returned by load()."""
        service = MockConfigService()
        service.save(EventsConfig(log_events=True))

        assert service.load().log_events is True
        assert service.get_saved_configs()[0]["log_events"] is True
