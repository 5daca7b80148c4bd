# Infrastructure Storage Adapters Package
from .file_store import FileKeyValueStore
from .memory_store import InMemoryKeyValueStore

__all__ = ["FileKeyValueStore", "InMemoryKeyValueStore"]
