"""
Dispatch payload and callback construction.

The payload handed to a user handler combines the platform event, the
native map event, the event name and target, and the component's extra
keys (public_api, map).
"""

from typing import Any, Callable, Dict, Mapping, Optional

from .logging import get_logger

logger = get_logger("payload")

# Derived keys a caller-supplied payload may not override
PROTECTED_KEYS = ("event_name", "target")


def build_dispatch_payload(
    ambient_event: Any,
    native_event: Any,
    event_name: str,
    target: Any,
    extra: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Assemble the argument passed to an event handler.

    Caller keys are applied last and may replace `event` and
    `google_event`, but never `event_name` or `target`.
    """
    payload = {
        "event": ambient_event,
        "google_event": native_event,
        "event_name": event_name,
        "target": target,
    }

    for key, value in (extra or {}).items():
        if key in PROTECTED_KEYS:
            logger.warning(
                f"Ignoring payload key '{key}' for '{event_name}': "
                f"it is derived from the binding"
            )
            continue
        payload[key] = value

    return payload


def make_callback(
    target: Any,
    event_name: str,
    handler: Callable[[Dict[str, Any]], Any],
    payload: Optional[Mapping[str, Any]],
    schedule: Callable[[Callable, Dict[str, Any]], None],
    ambient_event: Optional[Callable[[], Any]] = None,
    is_live: Optional[Callable[[], bool]] = None,
) -> Callable[[Any], None]:
    """
    Build the callback the map widget invokes for one event.

    The handler is never called from the widget's call stack; the callback
    hands it to `schedule` together with the assembled payload.

    Args:
        target: Object the listener is attached to
        event_name: Derived map event name
        handler: User handler, called with the dispatch payload
        payload: Extra keys merged into every dispatch payload
        schedule: Queues handler(payload) on the owning run loop
        ambient_event: Returns the platform event in flight, if any
        is_live: Returns False once the owner is torn down
    """

    def callback(native_event: Any = None) -> None:
        if is_live is not None and not is_live():
            logger.debug(f"Dropping '{event_name}' received after teardown")
            return

        params = build_dispatch_payload(
            ambient_event() if ambient_event is not None else None,
            native_event,
            event_name,
            target,
            payload,
        )
        schedule(handler, params)

    return callback
