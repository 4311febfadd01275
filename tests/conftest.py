"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
import time
import tempfile

# No display needed; only QtCore is used
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture(scope="session")
def qapp():
    """Create a QCoreApplication for tests that need the Qt event loop."""
    from PyQt5.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


def process_events_until(predicate, timeout: float = 1.0) -> bool:
    """Pump the Qt event loop until predicate() is true or timeout expires."""
    from PyQt5.QtCore import QCoreApplication

    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QCoreApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


@pytest.fixture
def pump_events(qapp):
    """Helper that pumps the Qt event loop until a condition holds."""
    return process_events_until


@pytest.fixture
def event_bus():
    """Fresh EventBus with event logging enabled."""
    from src.events.event_bus import EventBus

    bus = EventBus()
    bus.enable_logging(True)
    return bus


@pytest.fixture
def mock_map_api():
    """In-memory map event primitive."""
    from src.services.map_event_service import MockMapEventApi
    return MockMapEventApi()


@pytest.fixture
def manual_run_loop():
    """Run loop that only runs work when flush() is called."""
    from src.services.run_loop import RunLoop
    return RunLoop(auto_flush=False)


@pytest.fixture
def map_target():
    """Stand-in for a Google Maps object."""
    return object()


@pytest.fixture
def temp_events_json():
    """Path for a temporary JSON events config, removed afterwards."""
    with tempfile.NamedTemporaryFile(suffix='.json', delete=False) as f:
        temp_path = f.name
    os.remove(temp_path)

    yield temp_path

    if os.path.exists(temp_path):
        os.remove(temp_path)


@pytest.fixture
def temp_events_yaml():
    """Path for a temporary YAML events config, removed afterwards."""
    with tempfile.NamedTemporaryFile(suffix='.yaml', delete=False) as f:
        temp_path = f.name
    os.remove(temp_path)

    yield temp_path

    if os.path.exists(temp_path):
        os.remove(temp_path)
