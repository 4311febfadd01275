"""
Configuration models for map event registration.

These models handle the events config file structure.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Tuple


# Current config version - increment when schema changes
CONFIG_VERSION = 1

# Attributes that start with "on" but are component hooks, not map events
DEFAULT_IGNORED_ATTRS: Tuple[str, ...] = (
    "onLoad",
    "onceOnIdle",
    "on_load",
    "once_on_idle",
)


@dataclass
class EventsConfig:
    """
    Settings shared by every map component's event registration.

    Migration support: add new fields with defaults, never remove fields.
    """
    _version: int = CONFIG_VERSION

    # Attribute names never treated as event handlers
    ignored_attrs: Tuple[str, ...] = field(default=DEFAULT_IGNORED_ATTRS)

    # Raise LifecycleError on bind/release outside the legal states
    strict_lifecycle: bool = True

    # Record bus events for debugging
    log_events: bool = False

    debug_logging: bool = False

    # Attach a console handler to the map_events logger
    log_to_console: bool = False

    def __post_init__(self):
        # Lists come back from JSON/YAML
        if not isinstance(self.ignored_attrs, tuple):
            self.ignored_attrs = tuple(self.ignored_attrs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_version": self._version,
            "ignored_attrs": list(self.ignored_attrs),
            "strict_lifecycle": self.strict_lifecycle,
            "log_events": self.log_events,
            "debug_logging": self.debug_logging,
            "log_to_console": self.log_to_console,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventsConfig":
        return cls(
            _version=data.get("_version", CONFIG_VERSION),
            ignored_attrs=tuple(data.get("ignored_attrs", DEFAULT_IGNORED_ATTRS)),
            strict_lifecycle=data.get("strict_lifecycle", True),
            log_events=data.get("log_events", False),
            debug_logging=data.get("debug_logging", False),
            log_to_console=data.get("log_to_console", False),
        )
