from datetime import date, datetime, tzinfo
from typing import Any, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.actions.workouts import create_workout_action, update_workout_action
from app.db import get_db
from app.deps.auth import get_current_user_id, get_optional_user_id
from app.repositories.workout_repo import WorkoutRepository
from app.schemas.action import ActionFailure, FailureReason
from app.schemas.workout import WorkoutRead
from app.timeutils import local_zone

router = APIRouter(prefix="/workouts", tags=["workouts"])

FAILURE_STATUS = {
    FailureReason.unauthorized: status.HTTP_401_UNAUTHORIZED,
    FailureReason.validation_failed: status.HTTP_400_BAD_REQUEST,
    FailureReason.not_found: status.HTTP_404_NOT_FOUND,
    FailureReason.store_failure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

def get_local_tz(request: Request) -> tzinfo:
    return local_zone(request.app.state.settings.TIMEZONE)

def _respond(result, success_status: int) -> JSONResponse:
    if isinstance(result, ActionFailure):
        code = FAILURE_STATUS[result.reason]
    else:
        code = success_status
    return JSONResponse(status_code=code, content=result.model_dump(mode="json"))

@router.get("", response_model=list[WorkoutRead])
def list_workouts_for_day(
    day: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    tz: tzinfo = Depends(get_local_tz),
):
    if day is None:
        day = datetime.now(tz).date()
    try:
        return WorkoutRepository(db).get_workouts_by_date(user_id, day, tz=tz)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(
    workout_id: UUID,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    workout = WorkoutRepository(db).get_workout_by_id(user_id, workout_id)
    if not workout:
        # also covers workouts owned by someone else
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return workout

@router.post("")
def create_workout(
    payload: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    tz: tzinfo = Depends(get_local_tz),
):
    result = create_workout_action(db, user_id, payload, tz=tz)
    return _respond(result, status.HTTP_201_CREATED)

@router.patch("/{workout_id}")
def update_workout(
    workout_id: str,
    payload: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    tz: tzinfo = Depends(get_local_tz),
):
    # the path id is validated by the action, not by FastAPI, so a bad id is a 400 failure body
    result = update_workout_action(db, user_id, {**payload, "workout_id": workout_id}, tz=tz)
    return _respond(result, status.HTTP_200_OK)
