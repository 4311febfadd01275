"""
MapEventsController - Creates map components and owns their shared services.

This controller orchestrates:
- Loading EventsConfig and applying its logging settings
- One map event primitive and one run loop shared by all components
- Tearing components down, individually or all at once

Events Emitted (by the components it creates):
- ListenersBoundEvent - handlers bound on insert
- ListenersReleasedEvent - listeners released on destroy
- HandlerDispatchedEvent - a deferred handler ran
- ErrorEvent - a handler raised
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, TYPE_CHECKING

from ..events.event_bus import EventBus
from ..events.logging import configure_logging, get_logger, set_debug_enabled
from ..models.config import EventsConfig
from ..services.config_service import ConfigService
from ..services.map_event_service import QtMapEventApi
from ..services.run_loop import RunLoop
from ..views.map_component import MapComponent

if TYPE_CHECKING:
    from ..services.interfaces import IConfigService, IMapEventApi

logger = get_logger("controller")


class MapEventsController:
    """
    Controller for map component event registration.

    Coordinates between:
    - ConfigService (ignored attributes, strict lifecycle, logging)
    - QtMapEventApi (native listeners)
    - RunLoop (deferred handler execution)
    - UI (via EventBus events)
    """

    def __init__(
        self,
        config_service: Optional["IConfigService"] = None,
        api: Optional["IMapEventApi"] = None,
        run_loop: Optional[RunLoop] = None,
        event_bus: Optional[EventBus] = None,
        config_path: Optional[str] = None,
    ):
        """
        Initialize the MapEventsController.

        Args:
            config_service: Service for events configuration (creates one if not provided)
            api: Map event primitive (QtMapEventApi if not provided)
            run_loop: Run loop shared by all components
            event_bus: EventBus instance (uses singleton if not provided)
            config_path: Path to config file (only used if creating new service)
        """
        self._service = config_service or ConfigService(config_path)
        self._api = api if api is not None else QtMapEventApi()
        self._run_loop = run_loop if run_loop is not None else RunLoop()
        self._bus = event_bus or EventBus.instance()
        self._config: Optional[EventsConfig] = None
        self._components: Dict[str, MapComponent] = {}

    @property
    def config(self) -> EventsConfig:
        """Get the current configuration, loading and applying it if necessary."""
        if self._config is None:
            self._config = self._service.load()
            self._apply(self._config)
        return self._config

    @property
    def run_loop(self) -> RunLoop:
        return self._run_loop

    @property
    def components(self) -> List[MapComponent]:
        return list(self._components.values())

    def reload(self) -> EventsConfig:
        """Reload configuration from disk. Applies to components created afterwards."""
        self._config = self._service.load()
        self._apply(self._config)
        logger.info(f"Reloaded events config from {self._service.get_config_path()}")
        return self._config

    def _apply(self, config: EventsConfig) -> None:
        if config.log_to_console:
            configure_logging(logging.DEBUG if config.debug_logging else logging.WARNING)
        else:
            set_debug_enabled(config.debug_logging)
        self._bus.enable_logging(config.log_events)

    # =========================================================================
    # Components
    # =========================================================================

    def create_component(
        self,
        attrs: Optional[Mapping[str, Any]] = None,
        events: Optional[Mapping[str, Callable]] = None,
        map: Any = None,
        target: Any = None,
        component_id: Optional[str] = None,
        insert: bool = True,
    ) -> MapComponent:
        """
        Create a component sharing this controller's services.

        Args:
            attrs: Declared attributes, including "on*" handlers
            events: Explicit raw name -> handler mapping
            map: The map (usually a MapBridge)
            target: Object to listen on; defaults to the map
            component_id: Identifier; generated if not provided
            insert: Bind handlers immediately

        Returns:
            The new MapComponent
        """
        component = MapComponent(
            attrs=attrs,
            events=events,
            map=map,
            target=target,
            api=self._api,
            run_loop=self._run_loop,
            config=self.config,
            bus=self._bus,
            component_id=component_id,
        )
        if component.component_id in self._components:
            raise ValueError(f"Duplicate component id: {component.component_id}")

        self._components[component.component_id] = component
        if insert:
            component.did_insert()
        return component

    def get_component(self, component_id: str) -> Optional[MapComponent]:
        return self._components.get(component_id)

    def destroy_component(self, component_id: str) -> bool:
        """
        Tear down one component.

        Returns:
            True if the component existed
        """
        component = self._components.pop(component_id, None)
        if component is None:
            return False
        component.will_destroy()
        return True

    def destroy_all(self) -> int:
        """Tear down every component. Returns the number destroyed."""
        ids = list(self._components)
        for component_id in ids:
            self.destroy_component(component_id)

        logger.debug(f"Destroyed {len(ids)} component(s)")
        return len(ids)
