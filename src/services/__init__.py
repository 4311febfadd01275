"""
Services - Collaborators the event registry depends on.

Each service has a Mock counterpart for unit tests.
"""

from .interfaces import IMapsEventListener, IMapEventApi, IRunLoop, IConfigService
from .map_event_service import (
    QtMapEventApi,
    QtMapsEventListener,
    MockMapEventApi,
    MockMapsEventListener,
)
from .run_loop import RunLoop
from .config_service import ConfigService, MockConfigService

__all__ = [
    # Interfaces
    "IMapsEventListener",
    "IMapEventApi",
    "IRunLoop",
    "IConfigService",
    # Services
    "QtMapEventApi",
    "QtMapsEventListener",
    "RunLoop",
    "ConfigService",
    # Mocks for testing
    "MockMapEventApi",
    "MockMapsEventListener",
    "MockConfigService",
]
