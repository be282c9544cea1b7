from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime
import logging

from taskflow.core.database import get_db
from taskflow.core.errors import Operation
from taskflow.models.task import Task
from taskflow.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from taskflow.services.document_service import find_by_id, merge_fields, touch, delete_by_id, store_error_message
from taskflow.services.task_service import list_tasks

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
def get_tasks(
    db: Session = Depends(get_db),
    category: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    priority_filter: Optional[str] = Query(None, alias="priority"),
    search: Optional[str] = Query(None)
):
    return list_tasks(db, category=category, status=status_filter, priority=priority_filter, search=search)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, db: Session = Depends(get_db)):
    task = find_by_id(db, Task, task_id, Operation.READ)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    now = datetime.utcnow()
    new_task = Task(
        title=task_data.title,
        description=task_data.description,
        category=task_data.category,
        priority=task_data.priority,
        status=task_data.status,
        due_date=task_data.due_date,
        created_at=now,
        updated_at=now
    )
    try:
        db.add(new_task)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Task creation failed: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=store_error_message(e))
    db.refresh(new_task)
    logger.info(f"Task created: {new_task.id}")
    return new_task


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: str, task_data: TaskUpdate, db: Session = Depends(get_db)):
    task = find_by_id(db, Task, task_id, Operation.UPDATE)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")

    # merge brut: pas de contrôle priority/status ici
    merge_fields(task, task_data.model_dump(exclude_unset=True))
    touch(task)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=store_error_message(e))
    db.refresh(task)
    return task


@router.delete("/{task_id}")
def delete_task(task_id: str, db: Session = Depends(get_db)):
    task = delete_by_id(db, Task, task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    logger.info(f"Task deleted: {task_id}")
    return {"message": "Task deleted successfully"}
