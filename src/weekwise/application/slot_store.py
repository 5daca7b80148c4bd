"""Slot Store: the in-memory week, persisted after every change."""

import json
import logging
from typing import Any

from weekwise.domain.constants import STORAGE_KEY
from weekwise.domain.errors import InvalidSlotError
from weekwise.domain.schedule.geometry import parse_slot_identifier, slot_identifier
from weekwise.domain.schedule.models import Day, Slot
from weekwise.domain.schedule.ports import KeyValueStore

logger = logging.getLogger(__name__)


class SlotStore:
    """
    Owns the mapping from slot identifier to Slot.

    The mapping is loaded once on construction. Each mutator writes the whole
    mapping back to the KeyValueStore before returning, so memory and storage
    never diverge. Default slots are never stored: absence means default.
    """

    def __init__(self, storage: KeyValueStore, key: str = STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._slots: dict[str, Slot] = self.load()

    def load(self) -> dict[str, Slot]:
        """
        Read the persisted week.

        Returns an empty mapping when the record is missing, is not valid JSON,
        or is not an object of objects. Never raises.
        """
        raw = self._storage.read(self._key)
        if not raw:
            return {}

        try:
            data: Any = json.loads(raw)
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning(f"Discarding unreadable planner data under {self._key}: {e}")
            return {}

        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            logger.warning(f"Discarding malformed planner data under {self._key}")
            return {}

        slots: dict[str, Slot] = {}
        for key, value in data.items():
            try:
                canonical = slot_identifier(*parse_slot_identifier(key))
            except InvalidSlotError:
                logger.debug(f"Skipping unscheduled slot key {key!r}")
                continue
            slot = Slot.from_dict(value)
            if not slot.is_default:
                slots[canonical] = slot
        return slots

    def _persist(self) -> None:
        if not self._slots:
            self._storage.remove(self._key)
            return
        payload = {key: slot.to_dict() for key, slot in self._slots.items()}
        self._storage.write(self._key, json.dumps(payload, ensure_ascii=False))

    def get(self, day: Day | str, hour: int) -> Slot:
        return self._slots.get(slot_identifier(day, hour), Slot.default())

    def set(self, day: Day | str, hour: int, slot: Slot) -> None:
        key = slot_identifier(day, hour)
        if slot.is_default:
            self._slots.pop(key, None)
        else:
            self._slots[key] = slot
        self._persist()
        logger.debug(f"Set {key} -> {slot.type.value}")

    def delete(self, day: Day | str, hour: int) -> None:
        key = slot_identifier(day, hour)
        self._slots.pop(key, None)
        self._persist()
        logger.debug(f"Deleted {key}")

    def clear(self) -> None:
        self._slots = {}
        self._storage.remove(self._key)
        logger.debug("Cleared all slots")

    def snapshot(self) -> dict[str, Slot]:
        return dict(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, key: object) -> bool:
        return key in self._slots
