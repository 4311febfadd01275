"""
RegisterEventsMixin - Bind Google Maps events on any map component.

The mixin filters the component's declared attributes for those that begin
with "on" and are not in the ignored list. The "on" prefix is dropped and
the rest is decamelized to get the event name; the attribute's function is
then bound to that event.

For example, passing `onClick` adds a `click` listener that calls the
function passed as `onClick`.

Host components provide:
- `attrs`: mapping of declared attributes
- `events`: optional explicit mapping of raw name -> handler
- `event_target`: the object listeners are attached to
- `map`, `public_api`: included in every dispatch payload
- `component_id`: used in bus notifications

Lifecycle hooks:
- init_events(): call once from the component's initializer
- register_events(): call once the target exists
- teardown_events(): call once when the component is destroyed
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from ..models.config import EventsConfig
from ..models.listener import ListenerBinding
from .event_bus import EventBus, ListenersBoundEvent, ListenersReleasedEvent, HandlerDispatchedEvent
from .errors import LifecycleError
from .registry import ListenerRegistry
from .resolver import is_event_attr, resolve_events
from .logging import get_logger

logger = get_logger("register_events")


class RegisterEventsMixin:
    """Mixin wiring declarative "on*" attributes to map listeners."""

    attrs: Mapping[str, Any]
    events: Optional[Mapping[str, Callable]] = None
    map: Any = None
    component_id: str = ""

    _event_listeners: Optional[ListenerRegistry] = None

    def init_events(
        self,
        api: Any,
        run_loop: Any,
        config: Optional[EventsConfig] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        """Create the listener registry. Call once from __init__."""
        self._events_config = config or EventsConfig()
        self._bus = bus or EventBus.instance()
        self._event_listeners = ListenerRegistry(
            api,
            run_loop,
            owner=self,
            strict=self._events_config.strict_lifecycle,
        )

    # =========================================================================
    # Resolution
    # =========================================================================

    @property
    def ignored_attrs(self) -> tuple:
        return self._events_config.ignored_attrs

    @property
    def event_target(self) -> Any:
        """Object listeners are attached to. Defaults to the map."""
        return self.map

    @property
    def public_api(self) -> Any:
        return None

    @property
    def event_attrs(self) -> List[str]:
        """Declared attribute names that are event handlers."""
        return [name for name in self.attrs if is_event_attr(name, self.ignored_attrs)]

    @property
    def resolved_events(self) -> Dict[str, Callable]:
        """Explicit events combined with attribute handlers, by event name."""
        return resolve_events(
            self.events,
            list(self.attrs),
            self.attrs.get,
            self.ignored_attrs,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def register_events(self) -> List[ListenerBinding]:
        """Register a listener on event_target for each resolved event."""
        if self._event_listeners is None:
            raise LifecycleError("init_events() must be called before register_events()")

        mapping = {
            name: self._notifying(name, handler)
            for name, handler in self.resolved_events.items()
        }
        payload = {
            "public_api": self.public_api,
            "map": self.map,
        }

        bindings = self._event_listeners.bind(self.event_target, mapping, payload)
        if bindings:
            self._bus.emit(ListenersBoundEvent(
                component_id=self.component_id,
                event_names=[b.name for b in bindings],
            ))
        return bindings

    def teardown_events(self) -> int:
        """Remove every listener this component registered."""
        if self._event_listeners is None:
            return 0

        count = self._event_listeners.release_all()
        self._bus.emit(ListenersReleasedEvent(component_id=self.component_id, count=count))
        return count

    def _notifying(self, event_name: str, handler: Callable) -> Callable:
        def run(params: Dict[str, Any]) -> Any:
            try:
                result = handler(params)
            except Exception as e:
                self._bus.emit_error(f"Handler for '{event_name}' failed: {e}", exception=e)
                raise

            self._bus.emit(HandlerDispatchedEvent(
                component_id=self.component_id,
                event_name=event_name,
            ))
            return result

        return run
