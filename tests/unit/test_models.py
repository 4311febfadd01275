"""
Unit tests for data models.
"""

import pytest

from src.models.config import EventsConfig, DEFAULT_IGNORED_ATTRS
from src.models.listener import ListenerBinding, RegistryState


class TestEventsConfig:
    """Tests for EventsConfig model."""

    def test_defaults(self):
        """Defaults match the documented values."""
        config = EventsConfig()
        assert config.ignored_attrs == DEFAULT_IGNORED_ATTRS
        assert config.strict_lifecycle is True
        assert config.log_events is False
        assert config.debug_logging is False
        assert config.log_to_console is False

    def test_list_converted_to_tuple(self):
        """ignored_attrs given as a list is stored as a tuple."""
        config = EventsConfig(ignored_attrs=["onLoad"])
        assert config.ignored_attrs == ("onLoad",)

    def test_from_dict_missing_fields(self):
        """Missing keys fall back to defaults."""
        config = EventsConfig.from_dict({})
        assert config == EventsConfig()

    def test_to_dict(self):
        """to_dict() writes every field, with ignored_attrs as a list."""
        data = EventsConfig(ignored_attrs=("onA",)).to_dict()
        assert data["ignored_attrs"] == ["onA"]
        assert set(data) == {"_version", "ignored_attrs", "strict_lifecycle", "log_events", "debug_logging", "log_to_console"}


class TestListenerBinding:
    """Tests for ListenerBinding model."""

    def test_remove_optional(self):
        """A binding may have no removal callback."""
        binding = ListenerBinding(name="click", listener=object())
        assert binding.remove is None

    def test_states(self):
        """Registry states have stable string values."""
        assert [s.value for s in RegistryState] == ["uninitialized", "active", "torn_down"]
