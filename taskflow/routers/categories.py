from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from taskflow.core.database import get_db
from taskflow.core.errors import Operation
from taskflow.models.category import Category
from taskflow.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from taskflow.services.document_service import find_by_id, merge_fields, delete_by_id, store_error_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    # tri alphabétique, pas de filtre
    return db.query(Category).order_by(Category.name.asc(), Category.id.asc()).all()


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, db: Session = Depends(get_db)):
    category = find_by_id(db, Category, category_id, Operation.READ)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


# Pas de contrôle d'unicité sur le nom
@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    new_category = Category(
        name=category_data.name,
        color=category_data.color,
        icon=category_data.icon
    )
    try:
        db.add(new_category)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Category creation failed: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=store_error_message(e))
    db.refresh(new_category)
    logger.info(f"Category created: {new_category.id}")
    return new_category


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(category_id: str, category_data: CategoryUpdate, db: Session = Depends(get_db)):
    category = find_by_id(db, Category, category_id, Operation.UPDATE)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")

    merge_fields(category, category_data.model_dump(exclude_unset=True))

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=store_error_message(e))
    db.refresh(category)
    return category


@router.delete("/{category_id}")
def delete_category(category_id: str, db: Session = Depends(get_db)):
    category = delete_by_id(db, Category, category_id)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    logger.info(f"Category deleted: {category_id}")
    return {"message": "Category deleted successfully"}
