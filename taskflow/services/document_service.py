"""Opérations communes à toutes les collections (lookup par id, merge, suppression)"""

from datetime import datetime, timedelta
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional, Type

from taskflow.core.database import Base
from taskflow.core.errors import Operation
from taskflow.core.ids import DocumentId


def find_by_id(db: Session, model: Type[Base], raw_id: str, operation: Operation) -> Optional[Base]:
    # lève InvalidIdError si l'id ne peut pas être parsé
    doc_id = DocumentId.parse(raw_id, operation)
    return db.query(model).filter(model.id == str(doc_id)).first()


def merge_fields(document: Base, fields: dict) -> Base:
    # seuls les champs envoyés changent, sans re-validation
    for field, value in fields.items():
        setattr(document, field, value)
    return document


def touch(document: Base) -> Base:
    # les dates sortent à la milliseconde: updated_at doit avancer d'au moins 1 ms
    now = datetime.utcnow()
    previous = document.updated_at
    if previous is not None and now.replace(microsecond=now.microsecond // 1000 * 1000) <= previous:
        now = previous + timedelta(milliseconds=1)
    document.updated_at = now
    return document


def delete_by_id(db: Session, model: Type[Base], raw_id: str) -> Optional[Base]:
    document = find_by_id(db, model, raw_id, Operation.DELETE)
    if document is None:
        return None
    try:
        db.delete(document)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return document


def store_error_message(error: Exception) -> str:
    # message du driver si dispo (ex: "UNIQUE constraint failed: users.email")
    return str(getattr(error, "orig", None) or error)
