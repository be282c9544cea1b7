from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime
import logging

from taskflow.core.database import get_db
from taskflow.core.errors import Operation
from taskflow.models.note import Note
from taskflow.schemas.note import NoteCreate, NoteUpdate, NoteResponse
from taskflow.services.document_service import find_by_id, merge_fields, touch, delete_by_id, store_error_message
from taskflow.services.note_service import list_notes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=List[NoteResponse])
def get_notes(
    db: Session = Depends(get_db),
    task_id: Optional[str] = Query(None, alias="taskId"),
    search: Optional[str] = Query(None)
):
    return list_notes(db, task_id=task_id, search=search)


@router.get("/{note_id}", response_model=NoteResponse)
def get_note(note_id: str, db: Session = Depends(get_db)):
    note = find_by_id(db, Note, note_id, Operation.READ)
    if not note:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    return note


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def create_note(note_data: NoteCreate, db: Session = Depends(get_db)):
    now = datetime.utcnow()
    new_note = Note(
        task_id=note_data.task_id,
        title=note_data.title,
        content=note_data.content,
        color=note_data.color,
        pinned=note_data.pinned,
        created_at=now,
        updated_at=now
    )
    try:
        db.add(new_note)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Note creation failed: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=store_error_message(e))
    db.refresh(new_note)
    logger.info(f"Note created: {new_note.id}")
    return new_note


@router.put("/{note_id}", response_model=NoteResponse)
def update_note(note_id: str, note_data: NoteUpdate, db: Session = Depends(get_db)):
    note = find_by_id(db, Note, note_id, Operation.UPDATE)
    if not note:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")

    merge_fields(note, note_data.model_dump(exclude_unset=True))
    touch(note)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=store_error_message(e))
    db.refresh(note)
    return note


# Supprimer une note ne touche pas à la tâche liée
@router.delete("/{note_id}")
def delete_note(note_id: str, db: Session = Depends(get_db)):
    note = delete_by_id(db, Note, note_id)
    if not note:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    logger.info(f"Note deleted: {note_id}")
    return {"message": "Note deleted successfully"}
