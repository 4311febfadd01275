"""
Listener-related models for map event bindings.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional
from enum import Enum


class RegistryState(Enum):
    """Lifecycle states of a component's listener registry."""
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    TORN_DOWN = "torn_down"


@dataclass
class ListenerBinding:
    """
    One event name bound on a map target.

    `remove` detaches the native listener. The underlying widget does not
    guarantee it is idempotent, so it must be called at most once.
    """
    name: str
    listener: Any
    remove: Optional[Callable[[], None]] = None
