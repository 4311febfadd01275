"""
EventBus - Central dispatcher for map component lifecycle notifications.

Components report listener registration, teardown and handler dispatch
here so that status widgets and debugging tools can observe them without
holding references to the components.
"""

from dataclasses import dataclass, field
from typing import Optional, List

from PyQt5.QtCore import QObject, pyqtSignal


# ============================================================================
# Event Data Classes
# ============================================================================


@dataclass
class MapEvent:
    """Base class for map component notifications."""
    pass


@dataclass
class ListenersBoundEvent(MapEvent):
    """Emitted after a component bound its handlers to the map."""
    component_id: str
    event_names: List[str] = field(default_factory=list)


@dataclass
class ListenersReleasedEvent(MapEvent):
    """Emitted after a component released its listeners at teardown."""
    component_id: str
    count: int


@dataclass
class HandlerDispatchedEvent(MapEvent):
    """Emitted when a deferred handler ran on the owning run loop."""
    component_id: str
    event_name: str


@dataclass
class ErrorEvent(MapEvent):
    """Emitted when an error occurs."""
    message: str
    exception: Optional[Exception] = None
    recoverable: bool = True


# ============================================================================
# Event Bus Implementation
# ============================================================================


class EventBus(QObject):
    """
    Central event dispatcher using Qt signals.

    Usage:
        bus = EventBus.instance()

        # Subscribe
        bus.listeners_bound.connect(my_handler)

        # Emit
        bus.emit(ListenersBoundEvent(component_id="marker-1", event_names=["click"]))
    """

    listeners_bound = pyqtSignal(object)     # ListenersBoundEvent
    listeners_released = pyqtSignal(object)  # ListenersReleasedEvent
    handler_dispatched = pyqtSignal(object)  # HandlerDispatchedEvent
    error = pyqtSignal(object)               # ErrorEvent

    # Singleton instance
    _instance: Optional["EventBus"] = None

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._event_log: List[MapEvent] = []
        self._log_events = False

    @classmethod
    def instance(cls) -> "EventBus":
        """Get the singleton EventBus instance."""
        if cls._instance is None:
            cls._instance = EventBus()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None

    def enable_logging(self, enable: bool = True) -> None:
        """Enable/disable event logging for debugging."""
        self._log_events = enable

    def get_event_log(self) -> List[MapEvent]:
        """Get logged events (for debugging/testing)."""
        return list(self._event_log)

    def clear_event_log(self) -> None:
        """Clear the event log."""
        self._event_log.clear()

    def emit(self, event: MapEvent) -> None:
        """
        Emit an event to the appropriate signal.

        Args:
            event: Event instance to emit
        """
        if self._log_events:
            self._event_log.append(event)

        if isinstance(event, ListenersBoundEvent):
            self.listeners_bound.emit(event)
        elif isinstance(event, ListenersReleasedEvent):
            self.listeners_released.emit(event)
        elif isinstance(event, HandlerDispatchedEvent):
            self.handler_dispatched.emit(event)
        elif isinstance(event, ErrorEvent):
            self.error.emit(event)

    def emit_error(
        self,
        message: str,
        exception: Optional[Exception] = None,
        recoverable: bool = True,
    ) -> None:
        """Emit an error event."""
        self.emit(ErrorEvent(
            message=message,
            exception=exception,
            recoverable=recoverable,
        ))
