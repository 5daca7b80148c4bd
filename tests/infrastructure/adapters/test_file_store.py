import pytest

from weekwise.infrastructure.adapters.storage import FileKeyValueStore, InMemoryKeyValueStore


@pytest.fixture
def file_store(tmp_path):
    return FileKeyValueStore(tmp_path / "data")


def test_read_missing_key(file_store):
    assert file_store.read("WEEKWISE_SLOTS_V2") is None


def test_write_creates_directory_and_round_trips(file_store, tmp_path):
    file_store.write("WEEKWISE_SLOTS_V2", '{"Monday__20": {}}')
    assert (tmp_path / "data" / "WEEKWISE_SLOTS_V2.json").exists()
    assert file_store.read("WEEKWISE_SLOTS_V2") == '{"Monday__20": {}}'


def test_write_replaces_without_leftovers(file_store, tmp_path):
    file_store.write("k", "one")
    file_store.write("k", "two")
    assert file_store.read("k") == "two"
    assert [p.name for p in (tmp_path / "data").iterdir()] == ["k.json"]


def test_remove_is_idempotent(file_store):
    file_store.write("k", "v")
    file_store.remove("k")
    file_store.remove("k")
    assert file_store.read("k") is None


def test_unreadable_file_reads_as_absent(file_store, tmp_path):
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "k.json").write_bytes(b"\xff\xfe\x00bad")
    assert file_store.read("k") is None


@pytest.mark.parametrize("key", ["../escape", "a/b", ".hidden", ""])
def test_rejects_unsafe_keys(file_store, key):
    with pytest.raises(ValueError):
        file_store.read(key)


def test_memory_store():
    store = InMemoryKeyValueStore({"a": "1"})
    assert store.read("a") == "1"
    store.write("b", "2")
    store.remove("a")
    store.remove("missing")
    assert store.data == {"b": "2"}
