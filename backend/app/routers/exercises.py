from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import get_current_user_id
from app.repositories.exercise_repo import ExerciseRepository
from app.schemas.exercise import ExerciseCreate, ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(db: Session = Depends(get_db), _user: str = Depends(get_current_user_id)):
    return ExerciseRepository(db).list()

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(
    payload: ExerciseCreate,
    db: Session = Depends(get_db),
    _user: str = Depends(get_current_user_id),
):
    return ExerciseRepository(db).create(name=payload.name)
