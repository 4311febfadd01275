"""
Tests for EventBus routing.
"""

import pytest

from src.events.event_bus import (
    EventBus,
    ListenersBoundEvent,
    ListenersReleasedEvent,
    HandlerDispatchedEvent,
    ErrorEvent,
)


class TestEventBus:
    """Tests for EventBus signal routing and logging."""

    def test_routes_to_matching_signal(self, event_bus):
        """Each event type is emitted on its own signal."""
        bound, released = [], []
        event_bus.listeners_bound.connect(bound.append)
        event_bus.listeners_released.connect(released.append)

        event_bus.emit(ListenersBoundEvent(component_id="m", event_names=["click"]))
        event_bus.emit(ListenersReleasedEvent(component_id="m", count=1))

        assert len(bound) == 1 and bound[0].event_names == ["click"]
        assert len(released) == 1 and released[0].count == 1

    def test_emit_error(self, event_bus):
        """emit_error() builds and emits an ErrorEvent."""
        errors = []
        event_bus.error.connect(errors.append)
        exc = RuntimeError("x")

        event_bus.emit_error("failed", exception=exc, recoverable=False)

        assert errors == [ErrorEvent(message="failed", exception=exc, recoverable=False)]

    def test_event_log(self, event_bus):
        """Emitted events are logged and the log can be cleared."""
        event = HandlerDispatchedEvent(component_id="m", event_name="click")
        event_bus.emit(event)

        assert event_bus.get_event_log() == [event]
        event_bus.clear_event_log()
        assert event_bus.get_event_log() == []

    def test_logging_disabled_by_default(self):
        """Nothing is recorded unless logging is enabled."""
        bus = EventBus()
        bus.emit(HandlerDispatchedEvent(component_id="m", event_name="click"))
        assert bus.get_event_log() == []

    def test_singleton(self):
        """instance() always returns the same bus."""
        EventBus.reset_instance()
        try:
            assert EventBus.instance() is EventBus.instance()
        finally:
            EventBus.reset_instance()
