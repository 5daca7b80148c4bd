"""
Planner Factory
Centralizes the logic for selecting the storage adapter and wiring the service.
"""

import logging

from weekwise.application.config import AppConfig
from weekwise.application.planner_service import PlannerService
from weekwise.application.slot_store import SlotStore
from weekwise.domain.schedule.ports import KeyValueStore
from weekwise.infrastructure.adapters.storage import FileKeyValueStore, InMemoryKeyValueStore

logger = logging.getLogger(__name__)


def get_key_value_store(config: AppConfig) -> KeyValueStore:
    """
    Returns the KeyValueStore implementation selected by config.backend.
    """
    if config.backend == "memory":
        logger.debug("Storage: in-memory")
        return InMemoryKeyValueStore()

    logger.debug(f"Storage: {config.data_dir}")
    return FileKeyValueStore(config.data_dir)


def get_planner_service(config: AppConfig) -> PlannerService:
    store = SlotStore(get_key_value_store(config), key=config.storage_key)
    return PlannerService(store)
