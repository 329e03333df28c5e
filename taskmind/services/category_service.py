"""Category service - une catégorie est unique par (user, nom)"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from taskmind.models.category import Category, DEFAULT_COLOR
from taskmind.models.task import Task

logger = logging.getLogger(__name__)


class CategoryConflict(Exception):
    """Une catégorie du même nom existe déjà pour cet utilisateur"""


def find_category(db: Session, user_id: int, name: str) -> Optional[Category]:
    return db.query(Category).filter(
        Category.user_id == user_id,
        Category.name == name
    ).first()


def list_categories(db: Session, user_id: int) -> List[Category]:
    return db.query(Category).filter(Category.user_id == user_id).order_by(Category.name.asc()).all()


def get_or_create_category(db: Session, user_id: int, name: str) -> Category:
    # Résout un nom en catégorie, la crée au premier usage (sans commit)
    name = name.strip()
    category = find_category(db, user_id, name)
    if category:
        return category

    logger.info("Creating category %r for user %s", name, user_id)
    category = Category(user_id=user_id, name=name, color=DEFAULT_COLOR)
    db.add(category)
    db.flush()
    return category


def create_category(db: Session, user_id: int, name: str, color: str = DEFAULT_COLOR) -> Category:
    name = name.strip()
    if find_category(db, user_id, name):
        raise CategoryConflict(f"Category '{name}' already exists")

    category = Category(user_id=user_id, name=name, color=color)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def update_category(db: Session, category: Category, name: Optional[str] = None, color: Optional[str] = None) -> Category:
    if name is not None:
        name = name.strip()
        existing = find_category(db, category.user_id, name)
        if existing and existing.id != category.id:
            raise CategoryConflict(f"Category '{name}' already exists")
        category.name = name
    if color is not None:
        category.color = color

    db.commit()
    db.refresh(category)
    return category


def delete_category(db: Session, category: Category) -> None:
    # Les tâches sont détachées (ON DELETE SET NULL), SQLite n'applique pas les FK par défaut
    db.query(Task).filter(Task.category_id == category.id).update(
        {Task.category_id: None}, synchronize_session=False
    )
    db.delete(category)
    db.commit()
