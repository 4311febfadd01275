"""
MapEventService - Native listener primitive for the embedded map.

QtMapEventApi attaches listeners to objects exposing a `map_event`
signal (see MapBridge). MockMapEventApi keeps listeners in memory and
lets tests fire events by hand.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..events.logging import get_logger

logger = get_logger("map_event_service")


class QtMapsEventListener:
    """Handle for one listener connected to a target's map_event signal."""

    def __init__(self, target: Any, event_name: str, slot: Callable[[str, Any], None]):
        self.target = target
        self.event_name = event_name
        self._slot = slot
        self._connected = True

    @property
    def connected(self) -> bool:
        return self._connected

    def remove(self) -> None:
        """Disconnect the listener from the target."""
        if not self._connected:
            return
        self._connected = False
        try:
            self.target.map_event.disconnect(self._slot)
        except (TypeError, RuntimeError) as e:
            # Target already destroyed or slot disconnected elsewhere
            logger.debug(f"Disconnect of '{self.event_name}' failed: {e}")


class QtMapEventApi:
    """
    Listener primitive backed by Qt signals.

    Equivalent of google.maps.event.addDomListener for targets that
    relay their events through a MapBridge-style map_event signal.
    """

    def __init__(self):
        self._dispatching_target: Optional[Any] = None

    def add_listener(
        self,
        target: Any,
        event_name: str,
        callback: Callable[[Any], None],
    ) -> QtMapsEventListener:
        """
        Connect callback to target for one event name.

        Raises:
            TypeError: If target does not expose a map_event signal
        """
        signal = getattr(target, "map_event", None)
        if signal is None:
            raise TypeError(f"{type(target).__name__} has no map_event signal")

        def slot(name: str, data: Any) -> None:
            if name != event_name:
                return
            previous = self._dispatching_target
            self._dispatching_target = target
            try:
                callback(data)
            finally:
                self._dispatching_target = previous

        signal.connect(slot)
        return QtMapsEventListener(target, event_name, slot)

    def current_event(self) -> Optional[Any]:
        """DOM event of the target currently dispatching, if any."""
        return getattr(self._dispatching_target, "current_dom_event", None)


# ============================================================================
# Mock Implementation for Testing
# ============================================================================


@dataclass(eq=False)
class MockMapsEventListener:
    """In-memory listener handle."""
    api: "MockMapEventApi"
    target: Any
    event_name: str
    callback: Callable[[Any], None]
    remove_calls: int = 0

    def remove(self) -> None:
        self.remove_calls += 1
        self.api._detach(self)


@dataclass(eq=False)
class MockMapEventApi:
    """
    Mock listener primitive for testing.

    Records every listener added and removed, and lets tests trigger
    events on a target.
    """
    listeners: List[MockMapsEventListener] = field(default_factory=list)
    removed: List[MockMapsEventListener] = field(default_factory=list)
    ambient_event: Optional[Any] = None
    fail_on: Dict[str, Exception] = field(default_factory=dict)

    def add_listener(
        self,
        target: Any,
        event_name: str,
        callback: Callable[[Any], None],
    ) -> MockMapsEventListener:
        if event_name in self.fail_on:
            raise self.fail_on[event_name]

        listener = MockMapsEventListener(self, target, event_name, callback)
        self.listeners.append(listener)
        return listener

    def current_event(self) -> Optional[Any]:
        return self.ambient_event

    def trigger(self, target: Any, event_name: str, native_event: Any = None) -> int:
        """
        Invoke every live listener for event_name on target.

        Returns:
            Number of listeners invoked
        """
        matching = [
            listener for listener in self.listeners
            if listener.target is target and listener.event_name == event_name
        ]
        for listener in matching:
            listener.callback(native_event)
        return len(matching)

    def listener_count(self, target: Any = None) -> int:
        if target is None:
            return len(self.listeners)
        return sum(1 for listener in self.listeners if listener.target is target)

    def event_names(self, target: Any = None) -> List[str]:
        return [
            listener.event_name for listener in self.listeners
            if target is None or listener.target is target
        ]

    def _detach(self, listener: MockMapsEventListener) -> None:
        self.removed.append(listener)
        if listener in self.listeners:
            self.listeners.remove(listener)

    def detach_calls(self) -> List[Tuple[str, int]]:
        """(event name, remove() call count) for each removed listener."""
        return [(listener.event_name, listener.remove_calls) for listener in self.removed]
