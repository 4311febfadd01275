"""
Service interfaces (Protocols) for dependency injection and testing.

These protocols define the contracts of the collaborators the event
registry depends on: the map widget's listener primitive and the
owning run loop.
"""

from typing import Protocol, Any, Callable, Optional

from ..models.config import EventsConfig


class IMapsEventListener(Protocol):
    """Handle returned by the map widget for one native listener."""

    def remove(self) -> None:
        """Detach the native listener."""
        ...


class IMapEventApi(Protocol):
    """Interface for the map widget's native event primitive."""

    def add_listener(
        self,
        target: Any,
        event_name: str,
        callback: Callable[[Any], None],
    ) -> IMapsEventListener:
        """
        Attach a native listener.

        Args:
            target: Map or map object emitting the event
            event_name: Lowercase event name with no "on" prefix
            callback: Called with the native event object

        Returns:
            Handle whose remove() detaches the listener
        """
        ...

    def current_event(self) -> Optional[Any]:
        """Get the platform event being dispatched, if any."""
        ...


class IRunLoop(Protocol):
    """Interface for the owning single-threaded scheduling context."""

    def schedule(self, owner: Any, fn: Callable[[Any], None], args: Any) -> None:
        """
        Schedule fn(args) to run later, FIFO relative to other work.

        Args:
            owner: Object the work belongs to (used for cancellation)
            fn: Callable to run
            args: Single argument passed to fn
        """
        ...

    def cancel(self, owner: Any) -> int:
        """
        Drop pending work scheduled for owner.

        Returns:
            Number of tasks dropped
        """
        ...

    def flush(self) -> int:
        """
        Run all pending work now.

        Returns:
            Number of tasks run
        """
        ...


class IConfigService(Protocol):
    """Interface for events configuration persistence."""

    def load(self) -> EventsConfig:
        """Load configuration from disk."""
        ...

    def save(self, config: EventsConfig) -> None:
        """Save configuration to disk."""
        ...

    def get_config_path(self) -> str:
        """Get the path to the configuration file."""
        ...
