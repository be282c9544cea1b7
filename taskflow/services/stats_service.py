"""
Service de statistiques.

Les comptages sont indépendants: chacun tourne dans son propre thread avec sa
propre session (une Session SQLAlchemy ne se partage pas entre threads).
Si un seul comptage échoue, l'exception remonte et aucun résultat partiel
n'est renvoyé.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Type

from sqlalchemy.orm import Session

from taskflow.core.config import settings
from taskflow.core.database import Base
from taskflow.models.category import Category
from taskflow.models.note import Note
from taskflow.models.task import Task
from taskflow.schemas.stats import PriorityCounts, StatsResponse, TaskCounts

logger = logging.getLogger(__name__)

# clé -> (modèle, critères d'égalité)
COUNT_QUERIES = {
    "total": (Task, {}),
    "pending": (Task, {"status": "pending"}),
    "in_progress": (Task, {"status": "in-progress"}),
    "completed": (Task, {"status": "completed"}),
    "high": (Task, {"priority": "high"}),
    "medium": (Task, {"priority": "medium"}),
    "low": (Task, {"priority": "low"}),
    "categories": (Category, {}),
    "notes": (Note, {}),
}


def count_documents(bind, model: Type[Base], criteria: dict) -> int:
    with Session(bind=bind) as session:
        query = session.query(model)
        for field, value in criteria.items():
            query = query.filter(getattr(model, field) == value)
        return query.count()


def collect_stats(db: Session, max_workers: int = None) -> StatsResponse:
    bind = db.get_bind()
    workers = max_workers or settings.STATS_WORKERS

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            key: executor.submit(count_documents, bind, model, criteria)
            for key, (model, criteria) in COUNT_QUERIES.items()
        }
        # result() relance la première erreur rencontrée
        counts = {key: future.result() for key, future in futures.items()}

    logger.debug(f"Stats computed: {counts}")

    return StatsResponse(
        tasks=TaskCounts(
            total=counts["total"],
            pending=counts["pending"],
            in_progress=counts["in_progress"],
            completed=counts["completed"],
        ),
        priority=PriorityCounts(
            high=counts["high"],
            medium=counts["medium"],
            low=counts["low"],
        ),
        categories=counts["categories"],
        notes=counts["notes"],
    )
