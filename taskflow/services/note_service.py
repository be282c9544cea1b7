"""Note service"""

from sqlalchemy.orm import Session
from typing import List, Optional
from taskflow.core.errors import Operation
from taskflow.core.ids import DocumentId
from taskflow.models.note import Note
from taskflow.services.search_service import contains_ignore_case


def list_notes(db: Session, task_id: Optional[str] = None, search: Optional[str] = None) -> List[Note]:
    query = db.query(Note)

    if task_id:
        query = query.filter(Note.task_id == str(DocumentId.parse(task_id, Operation.READ)))
    if search:
        query = query.filter(contains_ignore_case(Note.content, search))

    # épinglées d'abord, puis les plus récentes
    return query.order_by(Note.pinned.desc(), Note.created_at.desc(), Note.id.desc()).all()
