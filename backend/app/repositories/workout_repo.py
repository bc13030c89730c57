# app/repositories/workout_repo.py
from __future__ import annotations
from datetime import date, datetime, tzinfo
from typing import Any, Mapping, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models import Workout, WorkoutExercise
from app.repositories.base import BaseRepository
from app.timeutils import UTC, day_window, to_utc, utcnow

# Fields a caller may change on an existing workout
UPDATABLE_FIELDS = ("name", "started_at")

def _with_exercises():
    # workout -> workout_exercises (by order) -> exercise + sets (by set_number);
    # the ordering itself is declared on the relationships
    return selectinload(Workout.workout_exercises).options(
        selectinload(WorkoutExercise.exercise),
        selectinload(WorkoutExercise.sets),
    )

class WorkoutRepository(BaseRepository[Workout]):
    """Workouts scoped to their owning user. Anything owned by someone else is "not found"."""

    # READS
    def get_workouts_by_date(self, user_id: str, day: date | datetime, *, tz: tzinfo = UTC) -> list[Workout]:
        """All of the user's workouts started on `day` (in `tz`), most recent first.

        The window is 00:00:00.000 through 23:59:59.999, inclusive at both ends.
        """
        start, end = day_window(day, tz)
        stmt = (
            select(Workout)
            .where(
                Workout.user_id == user_id,
                Workout.started_at >= start,
                Workout.started_at <= end,
            )
            .options(_with_exercises())
            .order_by(Workout.started_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_workout_by_id(self, user_id: str, workout_id: UUID) -> Optional[Workout]:
        stmt = (
            select(Workout)
            .where(Workout.id == workout_id, Workout.user_id == user_id)
            .options(_with_exercises())
        )
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create_workout(self, *, user_id: str, started_at: datetime, name: str | None = None) -> Workout:
        workout = Workout(user_id=user_id, name=name, started_at=started_at)
        return self.add_and_commit(workout)

    def update_workout(self, user_id: str, workout_id: UUID, changes: Mapping[str, Any]) -> Optional[Workout]:
        """Apply the supplied `name`/`started_at` values. None when no owned row matches."""
        workout = self.get_workout_by_id(user_id, workout_id)
        if not workout:
            return None
        for field in UPDATABLE_FIELDS:
            if field in changes:
                value = changes[field]
                if field == "started_at":
                    value = to_utc(value)
                setattr(workout, field, value)
        workout.updated_at = utcnow()
        self.db.commit()
        return workout
