"""
Reusable Qt objects for the embedded map.
"""

from .map_bridge import MapBridge

__all__ = [
    "MapBridge",
]
