"""
Views - Map components and the Qt bridge to the embedded map.
"""

from .widgets import MapBridge
from .map_component import MapComponent, MapPublicAPI

__all__ = [
    "MapBridge",
    "MapComponent",
    "MapPublicAPI",
]
