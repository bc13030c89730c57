"""
Workout actions: the boundary between untrusted input and the repository.

Every action returns an ActionSuccess or an ActionFailure and never raises.
Store errors are logged and reported with a generic message so internals do
not leak to the caller.
"""
from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Any, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.repositories.workout_repo import WorkoutRepository
from app.schemas.action import ActionFailure, ActionResult, ActionSuccess, FailureReason
from app.schemas.workout import WorkoutCreate, WorkoutCreated, WorkoutUpdate, WorkoutUpdated
from app.timeutils import UTC, date_key

logger = logging.getLogger(__name__)

def unauthorized() -> ActionFailure:
    return ActionFailure(error="Unauthorized", reason=FailureReason.unauthorized)

def validation_message(exc: ValidationError) -> str:
    """Flatten pydantic errors into one readable line, e.g. "started_at: Field required"."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        ctx_error = (err.get("ctx") or {}).get("error")
        msg = str(ctx_error) if ctx_error else err.get("msg", "invalid")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid input"

def create_workout_action(
    db: Session,
    user_id: Optional[str],
    payload: Mapping[str, Any],
    *,
    tz: tzinfo = UTC,
) -> ActionResult[WorkoutCreated]:
    if not user_id:
        return unauthorized()

    try:
        data = WorkoutCreate.model_validate(payload, context={"tz": tz})
    except ValidationError as e:
        return ActionFailure(error=validation_message(e), reason=FailureReason.validation_failed)

    # already normalised to UTC by the schema
    started_at = data.started_at
    try:
        workout = WorkoutRepository(db).create_workout(
            user_id=user_id,
            name=data.name,
            started_at=started_at,
        )
    except SQLAlchemyError:
        db.rollback()
        logger.exception("create workout failed user=%s", user_id)
        return ActionFailure(error="Failed to create workout", reason=FailureReason.store_failure)

    logger.info("workout created id=%s user=%s", workout.id, user_id)
    return ActionSuccess[WorkoutCreated](
        data=WorkoutCreated(id=workout.id, date=date_key(started_at, tz)),
    )

def update_workout_action(
    db: Session,
    user_id: Optional[str],
    payload: Mapping[str, Any],
    *,
    tz: tzinfo = UTC,
) -> ActionResult[WorkoutUpdated]:
    if not user_id:
        return unauthorized()

    try:
        data = WorkoutUpdate.model_validate(payload, context={"tz": tz})
    except ValidationError as e:
        return ActionFailure(error=validation_message(e), reason=FailureReason.validation_failed)

    changes: dict[str, Any] = {"started_at": data.started_at}
    # an omitted name keeps the stored one; an explicit blank clears it
    if "name" in data.model_fields_set:
        changes["name"] = data.name

    try:
        workout = WorkoutRepository(db).update_workout(user_id, data.workout_id, changes)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("update workout failed id=%s user=%s", data.workout_id, user_id)
        return ActionFailure(error="Failed to update workout", reason=FailureReason.store_failure)

    if not workout:
        return ActionFailure(error="Workout not found", reason=FailureReason.not_found)

    logger.info("workout updated id=%s user=%s", workout.id, user_id)
    return ActionSuccess[WorkoutUpdated](data=WorkoutUpdated(id=workout.id))
