"""
Controllers - Coordinate between services and views.
"""

from .map_events_controller import MapEventsController

__all__ = [
    "MapEventsController",
]
