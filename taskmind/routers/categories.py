from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskmind.core.database import get_db
from taskmind.core.dependencies import get_current_user
from taskmind.models.category import Category
from taskmind.models.user import User
from taskmind.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from taskmind.services.category_service import (
    CategoryConflict,
    create_category,
    delete_category,
    list_categories,
    update_category,
)

router = APIRouter(prefix="/categories", tags=["categories"])


def _get_owned_category(db: Session, user: User, category_id: int) -> Category:
    category = db.query(Category).filter(
        Category.id == category_id,
        Category.user_id == user.id
    ).first()
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.get("", response_model=List[CategoryResponse])
def list_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return list_categories(db, current_user.id)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create(
    category_data: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    try:
        return create_category(db, current_user.id, category_data.name, category_data.color)
    except CategoryConflict as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put("/{category_id}", response_model=CategoryResponse)
def update(
    category_id: int,
    category_data: CategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    category = _get_owned_category(db, current_user, category_id)
    try:
        return update_category(db, category, name=category_data.name, color=category_data.color)
    except CategoryConflict as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    category = _get_owned_category(db, current_user, category_id)
    delete_category(db, category)
