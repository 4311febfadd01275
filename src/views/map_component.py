"""
MapComponent - Declarative component backed by the embedded map.

Handlers are declared as attributes at construction time:

    component = MapComponent(
        attrs={"onClick": on_click, "onBoundsChanged": on_bounds, "zoom": 12},
        map=bridge,
    )
    component.did_insert()     # binds click, bounds_changed
    ...
    component.will_destroy()   # removes both listeners
"""

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from ..events.event_bus import EventBus
from ..events.register_events import RegisterEventsMixin
from ..models.config import EventsConfig
from ..services.map_event_service import QtMapEventApi
from ..services.run_loop import RunLoop

_component_ids = itertools.count(1)


@dataclass(frozen=True)
class MapPublicAPI:
    """Read-only view of a component handed to event handlers."""
    component_id: str
    map: Any
    target: Any


class MapComponent(RegisterEventsMixin):
    """
    A map component whose "on*" attributes become map event listeners.

    Listeners live from did_insert() until will_destroy().
    """

    def __init__(
        self,
        attrs: Optional[Mapping[str, Any]] = None,
        events: Optional[Mapping[str, Callable]] = None,
        map: Any = None,
        target: Any = None,
        api: Any = None,
        run_loop: Optional[RunLoop] = None,
        config: Optional[EventsConfig] = None,
        bus: Optional[EventBus] = None,
        component_id: Optional[str] = None,
    ):
        """
        Initialize the component.

        Args:
            attrs: Declared attributes, including "on*" handlers
            events: Explicit raw name -> handler mapping
            map: The map (usually a MapBridge)
            target: Object to listen on; defaults to the map
            api: Map event primitive (QtMapEventApi if not provided)
            run_loop: Run loop handlers are scheduled on
            config: Event registration settings
            bus: EventBus instance (uses singleton if not provided)
            component_id: Identifier used in bus notifications
        """
        self.attrs = dict(attrs or {})
        self.events = dict(events) if events else None
        self.map = map
        self.component_id = component_id or f"{type(self).__name__.lower()}-{next(_component_ids)}"
        self._target = target
        self._inserted = False
        self._destroyed = False

        self.init_events(
            api if api is not None else QtMapEventApi(),
            run_loop if run_loop is not None else RunLoop(),
            config=config,
            bus=bus,
        )

    @property
    def event_target(self) -> Any:
        return self._target if self._target is not None else self.map

    @property
    def public_api(self) -> MapPublicAPI:
        return MapPublicAPI(
            component_id=self.component_id,
            map=self.map,
            target=self.event_target,
        )

    @property
    def is_inserted(self) -> bool:
        return self._inserted

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def did_insert(self) -> None:
        """Called once the map target exists; binds the event handlers."""
        if self._inserted:
            return
        self._inserted = True
        self.register_events()

    def will_destroy(self) -> None:
        """Called when the component is removed; releases all listeners."""
        if self._destroyed:
            return
        self._destroyed = True
        self.teardown_events()
