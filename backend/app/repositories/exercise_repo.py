from __future__ import annotations
from typing import Optional
from uuid import UUID
from sqlalchemy import select
from app.models import Exercise
from app.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    def get(self, exercise_id: UUID) -> Optional[Exercise]:
        return self.db.get(Exercise, exercise_id)

    def list(self) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc(), Exercise.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def create(self, *, name: str) -> Exercise:
        return self.add_and_commit(Exercise(name=name))
