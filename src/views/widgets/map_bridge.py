"""
MapBridge - Receives Google Maps events from the embedded web view.

The page registers the bridge on its QWebChannel and forwards every map
event it is told about through dispatch(). Python listeners connect to
the map_event signal.
"""

from typing import Any, Optional

from PyQt5.QtCore import QObject, pyqtSignal, pyqtSlot


class MapBridge(QObject):
    """Expose map interaction events to Qt."""

    map_event = pyqtSignal(str, object)  # event name, native event data

    def __init__(self, name: str = "map", parent: Optional[QObject] = None):
        super().__init__(parent)
        self.setObjectName(name)
        self._current_dom_event: Optional[Any] = None

    @property
    def current_dom_event(self) -> Optional[Any]:
        """DOM event of the dispatch in progress, None outside a dispatch."""
        return self._current_dom_event

    @pyqtSlot(str, "QVariant")
    def dispatch(self, event_name: str, data: Any = None) -> None:
        """Called from JavaScript for each map event."""
        if not event_name:
            return

        dom_event = data.get("domEvent") if isinstance(data, dict) else None
        previous = self._current_dom_event
        self._current_dom_event = dom_event
        try:
            self.map_event.emit(event_name, data)
        finally:
            self._current_dom_event = previous
