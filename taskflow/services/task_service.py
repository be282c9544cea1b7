"""Task service"""

from sqlalchemy.orm import Session
from typing import List, Optional
from taskflow.models.task import Task
from taskflow.services.search_service import contains_ignore_case


def list_tasks(
    db: Session,
    category: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Task]:
    query = db.query(Task)

    # chaque filtre absent ou vide ne contraint rien
    if category:
        query = query.filter(Task.category == category)
    if status:
        query = query.filter(Task.status == status)
    if priority:
        query = query.filter(Task.priority == priority)
    if search:
        query = query.filter(contains_ignore_case(Task.title, search))

    # plus récentes d'abord, l'id départage deux créations simultanées
    return query.order_by(Task.created_at.desc(), Task.id.desc()).all()
