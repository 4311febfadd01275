"""
Exceptions raised by the map event system.
"""


class MapEventsError(Exception):
    """Base exception for map event operations."""
    pass


class LifecycleError(MapEventsError):
    """An operation was called outside its legal lifecycle state."""
    pass


class ListenerBindingError(MapEventsError):
    """The map widget returned a listener handle that cannot be removed."""
    pass


class ConfigError(MapEventsError):
    """Event configuration could not be loaded or is malformed."""
    pass
