"""
Ports (interfaces) for the planner's outside world.

These define the contract that infrastructure adapters must implement.
Application services depend on these abstractions, not concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class KeyValueStore(ABC):
    """
    Port for the local persistence boundary: string values under string keys.

    Implementations:
        - FileKeyValueStore: One JSON file per key in a data directory.
        - InMemoryKeyValueStore: Process-local dict, used for tests and --ephemeral.
    """

    @abstractmethod
    def read(self, key: str) -> str | None:
        """
        Return the value stored under key, or None when absent or unreadable.
        """
        pass

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """
        Store value under key, replacing any previous value.
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """
        Delete the value under key. Removing an absent key is a no-op.
        """
        pass


class SystemClock:
    """Time source used to highlight the current hour."""

    def now(self) -> datetime:
        return datetime.now()
