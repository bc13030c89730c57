# app/repositories/base.py
from __future__ import annotations
from typing import Generic, TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style.

    The session is the store handle; repositories never open their own.
    Store errors (SQLAlchemyError) are not caught here.
    """
    def __init__(self, db: Session):
        self.db = db

    def add_and_commit(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity
