import pytest

from weekwise.application.planner_service import PlannerService
from weekwise.application.slot_store import SlotStore
from weekwise.infrastructure.adapters.storage import InMemoryKeyValueStore


@pytest.fixture
def storage():
    """A fresh in-memory persistence boundary."""
    return InMemoryKeyValueStore()


@pytest.fixture
def store(storage):
    return SlotStore(storage)


@pytest.fixture
def planner(store):
    return PlannerService(store)


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Isolate config files and the default data directory
    monkeypatch.setenv("HOME", str(home))
    for var in ("WEEKWISE_DATA_DIR", "WEEKWISE_BACKEND", "WEEKWISE_STORAGE_KEY"):
        monkeypatch.delenv(var, raising=False)
    return home
