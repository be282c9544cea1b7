from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, Dict, List
import logging

from taskflow.core.database import get_db
from taskflow.core.errors import Operation
from taskflow.models.user import User
from taskflow.schemas.user import UserCreate, UserUpdate, UserResponse
from taskflow.services.document_service import find_by_id, delete_by_id, store_error_message
from taskflow.services.user_service import get_user_by_email, list_users, build_user, apply_user_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
def get_users(db: Session = Depends(get_db)):
    return list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: Session = Depends(get_db)):
    user = find_by_id(db, User, user_id, Operation.READ)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """Créer un nouvel utilisateur"""

    # Vérifie si l'email existe déjà, avant toute validation du reste du body
    email = payload.get("email")
    if isinstance(email, str) and get_user_by_email(db, email):
        logger.info(f"Email already exists: {email}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists")

    try:
        user_data = UserCreate.model_validate(payload)
    except ValidationError as e:
        # même format que les erreurs de validation de FastAPI
        raise RequestValidationError([{**err, "loc": ("body", *err["loc"])} for err in e.errors()])

    new_user = build_user(user_data)
    try:
        db.add(new_user)
        db.commit()
    except IntegrityError:
        # création concurrente avec le même email
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"User creation failed: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=store_error_message(e))
    db.refresh(new_user)
    logger.info(f"User created: {new_user.id}")
    return new_user


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: str, user_data: UserUpdate, db: Session = Depends(get_db)):
    user = find_by_id(db, User, user_id, Operation.UPDATE)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    apply_user_update(user, user_data)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=store_error_message(e))
    db.refresh(user)
    return user


@router.delete("/{user_id}")
def delete_user(user_id: str, db: Session = Depends(get_db)):
    user = delete_by_id(db, User, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    logger.info(f"User deleted: {user_id}")
    return {"message": "User deleted successfully"}
