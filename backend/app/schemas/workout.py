from typing import Annotated
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, Field, ValidationInfo, computed_field, field_validator

from app.schemas.exercise import ExerciseRead
from app.schemas.exercise_set import SetRead
from app.timeutils import UTC, checked_utc

OptionalName = Annotated[str | None, Field(max_length=255)]

def _blank_to_none(v):
    # forms send "" for an untouched name field
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v

def _started_at_utc(v: datetime, info: ValidationInfo) -> datetime:
    # local zone for naive input comes in through the validation context
    tz = (info.context or {}).get("tz", UTC)
    return checked_utc(v, tz)

class WorkoutCreate(BaseModel):
    name: OptionalName = None
    started_at: datetime

    @field_validator("name", mode="before")
    @classmethod
    def name_blank_to_none(cls, v):
        return _blank_to_none(v)

    @field_validator("started_at")
    @classmethod
    def started_at_in_utc(cls, v, info: ValidationInfo):
        return _started_at_utc(v, info)

class WorkoutUpdate(BaseModel):
    workout_id: UUID
    name: OptionalName = None
    started_at: datetime

    @field_validator("name", mode="before")
    @classmethod
    def name_blank_to_none(cls, v):
        return _blank_to_none(v)

    @field_validator("started_at")
    @classmethod
    def started_at_in_utc(cls, v, info: ValidationInfo):
        return _started_at_utc(v, info)

    @field_validator("workout_id", mode="before")
    @classmethod
    def workout_id_is_uuid(cls, v):
        if isinstance(v, UUID):
            return v
        try:
            return UUID(str(v))
        except ValueError:
            raise ValueError("Invalid workout ID")

class WorkoutExerciseRead(BaseModel):
    id: UUID
    exercise_id: UUID
    order: int
    exercise: ExerciseRead
    sets: list[SetRead] = []

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def completed_sets(self) -> int:
        return sum(1 for s in self.sets if s.completed)

class WorkoutRead(BaseModel):
    id: UUID
    user_id: str
    name: str | None = None
    started_at: datetime
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    workout_exercises: list[WorkoutExerciseRead] = []

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def exercise_count(self) -> int:
        return len(self.workout_exercises)

class WorkoutCreated(BaseModel):
    id: UUID
    date: str  # YYYY-MM-DD, for navigating to the day view

class WorkoutUpdated(BaseModel):
    id: UUID
