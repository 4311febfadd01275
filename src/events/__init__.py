"""
Map event registration: resolving "on*" handlers and managing listeners.
"""

from .event_bus import (
    EventBus,
    MapEvent,
    ListenersBoundEvent,
    ListenersReleasedEvent,
    HandlerDispatchedEvent,
    ErrorEvent,
)
from .errors import MapEventsError, LifecycleError, ListenerBindingError, ConfigError
from .resolver import resolve_events, is_event_attr, event_name_for
from .payload import build_dispatch_payload, make_callback
from .registry import ListenerRegistry
from .register_events import RegisterEventsMixin

__all__ = [
    "EventBus",
    "MapEvent",
    "ListenersBoundEvent",
    "ListenersReleasedEvent",
    "HandlerDispatchedEvent",
    "ErrorEvent",
    "MapEventsError",
    "LifecycleError",
    "ListenerBindingError",
    "ConfigError",
    "resolve_events",
    "is_event_attr",
    "event_name_for",
    "build_dispatch_payload",
    "make_callback",
    "ListenerRegistry",
    "RegisterEventsMixin",
]
