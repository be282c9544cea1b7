"""Événements publiés par le DataManager"""

from dataclasses import dataclass
from typing import Any, List


@dataclass(frozen=True)
class EntitiesLoaded:
    collection: str  # "tasks", "categories", "notes"
    items: List[dict]


@dataclass(frozen=True)
class StatsLoaded:
    stats: dict


@dataclass(frozen=True)
class EntityCreated:
    collection: str
    item: dict


@dataclass(frozen=True)
class EntityUpdated:
    collection: str
    item: dict


@dataclass(frozen=True)
class EntityDeleted:
    collection: str
    entity_id: str


@dataclass(frozen=True)
class OperationFailed:
    operation: str  # ex: "create_task"
    error: Any
