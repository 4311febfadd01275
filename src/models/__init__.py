"""
Models - Pure Python dataclasses representing event registration state.

No Qt dependencies in this package.
"""

from .listener import ListenerBinding, RegistryState
from .config import EventsConfig, CONFIG_VERSION, DEFAULT_IGNORED_ATTRS

__all__ = [
    "ListenerBinding",
    "RegistryState",
    "EventsConfig",
    "CONFIG_VERSION",
    "DEFAULT_IGNORED_ATTRS",
]
