"""
ListenerRegistry - Owns a component's native map listeners.

Each component creates one registry when it is initialized, binds its
resolved handlers through it, and releases everything through it exactly
once at teardown. The registry stores one removal callback per event name.

State machine:
    UNINITIALIZED -> ACTIVE -> TORN_DOWN
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from ..models.listener import ListenerBinding, RegistryState
from .errors import LifecycleError, ListenerBindingError
from .logging import get_logger
from .payload import make_callback

logger = get_logger("registry")


class ListenerRegistry:
    """
    Binds handlers to a map target and tracks how to remove them.

    Handlers never run inside the map widget's callback. The callback
    queues them on the run loop under `owner`, which lets teardown cancel
    invocations that are queued but have not run yet.
    """

    def __init__(
        self,
        api: Any,
        run_loop: Any,
        owner: Any = None,
        ambient_event: Optional[Callable[[], Any]] = None,
        strict: bool = True,
        activate: bool = True,
    ):
        """
        Initialize the registry.

        Args:
            api: Map event primitive (IMapEventApi)
            run_loop: Owning scheduling context (IRunLoop)
            owner: Object the scheduled work belongs to (defaults to self)
            ambient_event: Returns the platform event in flight. Defaults to
                api.current_event when the api provides one.
            strict: Raise LifecycleError on misuse instead of logging
            activate: Start in ACTIVE state
        """
        self._api = api
        self._run_loop = run_loop
        self._owner = owner if owner is not None else self
        self._strict = strict

        if ambient_event is None:
            ambient_event = getattr(api, "current_event", None)
        self._ambient_event = ambient_event

        self._listeners: Dict[str, Optional[Callable[[], None]]] = {}
        self._state = RegistryState.UNINITIALIZED
        if activate:
            self.activate()

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == RegistryState.ACTIVE

    @property
    def event_names(self) -> List[str]:
        """Event names with a stored removal callback, in binding order."""
        return list(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, event_name: object) -> bool:
        return event_name in self._listeners

    def activate(self) -> None:
        """Move from UNINITIALIZED to ACTIVE."""
        if self._state == RegistryState.ACTIVE:
            return
        if self._state == RegistryState.TORN_DOWN:
            self._misuse("activate() called after teardown")
            return
        self._listeners = {}
        self._state = RegistryState.ACTIVE

    def _misuse(self, message: str) -> None:
        if self._strict:
            raise LifecycleError(message)
        logger.warning(message)

    # =========================================================================
    # Binding
    # =========================================================================

    def bind(
        self,
        target: Any,
        mapping: Mapping[str, Callable],
        payload: Optional[Mapping[str, Any]] = None,
    ) -> List[ListenerBinding]:
        """
        Add a native listener on target for each event in mapping.

        Failures from the map widget propagate to the caller. Listeners
        bound before the failure stay registered and are released at
        teardown.

        Args:
            target: Map or map object to listen on
            mapping: Event name -> handler, bound in order
            payload: Extra keys included in every dispatch payload

        Returns:
            Bindings created by this call

        Raises:
            LifecycleError: If the registry is not ACTIVE (strict mode)
            ListenerBindingError: If the widget returns a handle without remove()
        """
        if self._state != RegistryState.ACTIVE:
            self._misuse(f"bind() called in state {self._state.value}")
            return []

        extra = dict(payload or {})
        bindings = []
        for event_name, handler in mapping.items():
            binding = self._add_listener(target, event_name, handler, extra)
            self._store(binding)
            bindings.append(binding)

        logger.debug(
            f"Bound {len(bindings)} listener(s) on {type(target).__name__}: "
            f"{[b.name for b in bindings]}"
        )
        return bindings

    def _add_listener(
        self,
        target: Any,
        event_name: str,
        handler: Callable,
        payload: Mapping[str, Any],
    ) -> ListenerBinding:
        callback = make_callback(
            target,
            event_name,
            handler,
            payload,
            schedule=self._schedule,
            ambient_event=self._ambient_event,
            is_live=lambda: self.is_active,
        )

        listener = self._api.add_listener(target, event_name, callback)

        remove = getattr(listener, "remove", None)
        if not callable(remove):
            raise ListenerBindingError(
                f"Listener for '{event_name}' returned by "
                f"{type(self._api).__name__} has no remove()"
            )

        return ListenerBinding(name=event_name, listener=listener, remove=remove)

    def _store(self, binding: ListenerBinding) -> None:
        previous = self._listeners.get(binding.name)
        if previous is not None:
            logger.debug(f"Replacing listener for '{binding.name}'")
            self._invoke_remove(binding.name, previous)
        self._listeners[binding.name] = binding.remove

    def _schedule(self, handler: Callable, params: Dict[str, Any]) -> None:
        self._run_loop.schedule(self._owner, self._guarded(handler), params)

    def _guarded(self, handler: Callable) -> Callable[[Dict[str, Any]], Any]:
        def run(params: Dict[str, Any]) -> Any:
            if not self.is_active:
                logger.debug(f"Skipping '{params.get('event_name')}' handler after teardown")
                return None
            return handler(params)

        return run

    # =========================================================================
    # Teardown
    # =========================================================================

    def release_all(self) -> int:
        """
        Remove every stored listener and move to TORN_DOWN.

        Each removal callback is called at most once. Missing callbacks are
        skipped and failing ones are logged, so one bad listener never
        blocks cleanup of the others. Calling again is a no-op.

        Returns:
            Number of removal callbacks invoked

        Raises:
            LifecycleError: If called before the registry is ACTIVE (strict mode)
        """
        if self._state == RegistryState.UNINITIALIZED:
            self._misuse("release_all() called before initialization")
            return 0

        listeners, self._listeners = self._listeners, {}
        self._state = RegistryState.TORN_DOWN

        cancel = getattr(self._run_loop, "cancel", None)
        if cancel is not None:
            try:
                cancel(self._owner)
            except Exception as e:
                logger.error(f"Failed to cancel pending handlers: {e}", exc_info=True)

        count = 0
        for event_name, remove in listeners.items():
            if remove is None:
                continue
            if self._invoke_remove(event_name, remove):
                count += 1

        if count:
            logger.debug(f"Released {count} listener(s)")
        return count

    def _invoke_remove(self, event_name: str, remove: Callable[[], None]) -> bool:
        try:
            remove()
        except Exception as e:
            logger.error(f"Failed to remove listener for '{event_name}': {e}", exc_info=True)
            return False
        return True
