"""
Event resolution - which handlers a component binds, and under which names.

Handlers come from two places: an explicit `events` mapping passed to the
component, and declared attributes whose name starts with "on". Attribute
handlers take precedence over explicit ones with the same raw name. Event
names are derived only after the merge.
"""

from typing import Any, Callable, Collection, Dict, Iterable, Mapping, Optional

from ..utils.strings import decamelize
from .logging import get_logger

logger = get_logger("resolver")

EVENT_PREFIX = "on"


def is_event_attr(name: str, ignored_names: Collection[str] = ()) -> bool:
    """
    Return True if the attribute name matches the syntax for an event.

    The name must begin with "on" and not be explicitly ignored.
    """
    return name[:2] == EVENT_PREFIX and name not in ignored_names


def event_name_for(raw_name: str) -> str:
    """
    Derive the map event name from a handler attribute name.

    Examples:
        onClick -> click
        onBoundsChanged -> bounds_changed
        on_dblclick -> dblclick
    """
    if raw_name.startswith(EVENT_PREFIX):
        raw_name = raw_name[len(EVENT_PREFIX):]
    return decamelize(raw_name).lstrip("_")


def resolve_events(
    explicit_events: Optional[Mapping[str, Callable]],
    property_names: Iterable[str],
    property_lookup: Callable[[str], Any],
    ignored_names: Collection[str] = (),
) -> Dict[str, Callable]:
    """
    Combine explicit and attribute-derived handlers into event bindings.

    Args:
        explicit_events: Raw name -> handler, passed as component config
        property_names: Declared attribute names, in declaration order
        property_lookup: Returns the current value of an attribute
        ignored_names: Attribute names never treated as handlers

    Returns:
        Event name -> handler, in merge order. Entries without a handler
        are dropped.
    """
    extracted: Dict[str, Callable] = {}
    for name in property_names:
        if not is_event_attr(name, ignored_names):
            continue
        handler = property_lookup(name)
        if handler is None:
            logger.debug(f"Attribute {name} has no handler, skipping")
            continue
        extracted[name] = handler

    merged: Dict[str, Callable] = {}
    for name, handler in (explicit_events or {}).items():
        if handler is not None:
            merged[name] = handler
    merged.update(extracted)

    resolved: Dict[str, Callable] = {}
    sources: Dict[str, str] = {}
    for raw_name, handler in merged.items():
        event_name = event_name_for(raw_name)
        if event_name in resolved:
            logger.warning(
                f"{raw_name} and {sources[event_name]} both map to "
                f"'{event_name}'; using {raw_name}"
            )
        resolved[event_name] = handler
        sources[event_name] = raw_name

    return resolved
