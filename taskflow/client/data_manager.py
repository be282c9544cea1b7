"""
Cache local des données de l'API.

Le DataManager reçoit son ApiService à la construction (pas d'instance
globale). Chaque opération publie un événement typé aux abonnés; en cas
d'erreur, OperationFailed est publié puis l'exception est relancée.
"""

import logging
from collections import defaultdict
from datetime import date, datetime, timezone
from typing import Callable, Dict, List, Optional, Set, Type

from taskflow.client.api_service import ApiService
from taskflow.client.events import (
    EntitiesLoaded,
    EntityCreated,
    EntityDeleted,
    EntityUpdated,
    OperationFailed,
    StatsLoaded,
)

logger = logging.getLogger(__name__)


def _same_id(item: dict, entity_id: str) -> bool:
    return item.get("_id") == entity_id or item.get("id") == entity_id


def _parse_date(value: str) -> Optional[date]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


class DataManager:
    def __init__(self, api: ApiService):
        self.api = api
        self.tasks: List[dict] = []
        self.categories: List[dict] = []
        self.notes: List[dict] = []
        self.stats: Optional[dict] = None
        self._subscribers: Dict[type, List[Callable]] = defaultdict(list)

    # ---------- abonnements ----------

    def subscribe(self, event_type: Type, callback: Callable) -> Callable[[], None]:
        self._subscribers[event_type].append(callback)
        return lambda: self.unsubscribe(event_type, callback)

    def unsubscribe(self, event_type: Type, callback: Callable):
        subs = self._subscribers.get(event_type, [])
        if callback in subs:
            subs.remove(callback)

    def notify(self, event):
        for callback in list(self._subscribers.get(type(event), [])):
            callback(event)

    # ---------- lectures du cache ----------

    def get_task_by_id(self, task_id: str) -> Optional[dict]:
        return next((t for t in self.tasks if _same_id(t, task_id)), None)

    def get_category_by_id(self, category_id: str) -> Optional[dict]:
        return next((c for c in self.categories if _same_id(c, category_id)), None)

    def get_note_by_id(self, note_id: str) -> Optional[dict]:
        return next((n for n in self.notes if _same_id(n, note_id)), None)

    # ---------- helpers génériques ----------

    def _run(self, operation: str, call: Callable):
        try:
            return call()
        except Exception as e:
            logger.warning(f"{operation} failed: {e}")
            self.notify(OperationFailed(operation=operation, error=e))
            raise

    def _load(self, collection: str, fetch: Callable) -> List[dict]:
        items = self._run(f"load_{collection}", fetch)
        setattr(self, collection, items)
        self.notify(EntitiesLoaded(collection=collection, items=items))
        return items

    def _create(self, collection: str, operation: str, call: Callable, prepend: bool) -> dict:
        item = self._run(operation, call)
        items = getattr(self, collection)
        if prepend:
            items.insert(0, item)
        else:
            items.append(item)
        self.notify(EntityCreated(collection=collection, item=item))
        return item

    def _update(self, collection: str, operation: str, entity_id: str, call: Callable) -> dict:
        item = self._run(operation, call)
        items = getattr(self, collection)
        for index, existing in enumerate(items):
            if _same_id(existing, entity_id):
                items[index] = item
                break
        self.notify(EntityUpdated(collection=collection, item=item))
        return item

    def _delete(self, collection: str, operation: str, entity_id: str, call: Callable) -> bool:
        self._run(operation, call)
        setattr(self, collection, [i for i in getattr(self, collection) if not _same_id(i, entity_id)])
        self.notify(EntityDeleted(collection=collection, entity_id=entity_id))
        return True

    # ---------- chargement ----------

    def load_tasks(self, filters: Optional[dict] = None) -> List[dict]:
        return self._load("tasks", lambda: self.api.get_tasks(filters))

    def load_categories(self) -> List[dict]:
        return self._load("categories", self.api.get_categories)

    def load_notes(self, filters: Optional[dict] = None) -> List[dict]:
        return self._load("notes", lambda: self.api.get_notes(filters))

    def load_stats(self) -> dict:
        self.stats = self._run("load_stats", self.api.get_stats)
        self.notify(StatsLoaded(stats=self.stats))
        return self.stats

    # ---------- tasks ----------

    def create_task(self, data: dict) -> dict:
        return self._create("tasks", "create_task", lambda: self.api.create_task(data), prepend=True)

    def update_task(self, task_id: str, data: dict) -> dict:
        return self._update("tasks", "update_task", task_id, lambda: self.api.update_task(task_id, data))

    def delete_task(self, task_id: str) -> bool:
        return self._delete("tasks", "delete_task", task_id, lambda: self.api.delete_task(task_id))

    # ---------- categories ----------

    def create_category(self, data: dict) -> dict:
        return self._create("categories", "create_category", lambda: self.api.create_category(data), prepend=False)

    def update_category(self, category_id: str, data: dict) -> dict:
        return self._update(
            "categories", "update_category", category_id,
            lambda: self.api.update_category(category_id, data)
        )

    def delete_category(self, category_id: str) -> bool:
        return self._delete(
            "categories", "delete_category", category_id,
            lambda: self.api.delete_category(category_id)
        )

    # ---------- notes ----------

    def create_note(self, data: dict) -> dict:
        return self._create("notes", "create_note", lambda: self.api.create_note(data), prepend=True)

    def update_note(self, note_id: str, data: dict) -> dict:
        return self._update("notes", "update_note", note_id, lambda: self.api.update_note(note_id, data))

    def delete_note(self, note_id: str) -> bool:
        return self._delete("notes", "delete_note", note_id, lambda: self.api.delete_note(note_id))

    # ---------- filtres locaux ----------

    def filter_tasks(
        self,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[dict]:
        result = list(self.tasks)
        if status:
            result = [t for t in result if t.get("status") == status]
        if priority:
            result = [t for t in result if t.get("priority") == priority]
        if category:
            result = [t for t in result if t.get("category") == category]
        if search:
            # en local on cherche aussi dans la description
            needle = search.lower()
            result = [
                t for t in result
                if needle in (t.get("title") or "").lower()
                or needle in (t.get("description") or "").lower()
            ]
        return result

    def tasks_by_date(self, day: date) -> List[dict]:
        return [t for t in self.tasks if _parse_date(t.get("dueDate")) == day]

    def task_dates(self) -> Set[str]:
        dates = set()
        for task in self.tasks:
            due = _parse_date(task.get("dueDate"))
            if due is not None:
                dates.add(due.isoformat())
        return dates

    def search_notes(self, query: str) -> List[dict]:
        needle = query.lower()
        return [
            n for n in self.notes
            if needle in (n.get("title") or "").lower()
            or needle in (n.get("content") or "").lower()
        ]

    def export_data(self) -> dict:
        return {
            "tasks": self.tasks,
            "categories": self.categories,
            "notes": self.notes,
            "exportedAt": datetime.now(timezone.utc).isoformat(),
        }
