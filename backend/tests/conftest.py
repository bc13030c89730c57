"""
Each test gets its own SQLite file: the app (via its lifespan) and the
`db` fixture open separate engines on the same database.
"""
import uuid

import pytest
from fastapi.testclient import TestClient

from app.db import Base, build_session_factory, create_db_engine
from app.main import create_app
from app.models import Exercise, ExerciseSet, Workout, WorkoutExercise
from app.security import create_access_token
from app.settings import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(DB_URL=f"sqlite+pysqlite:///{tmp_path / 'test.db'}", AUTO_CREATE_TABLES=True, TIMEZONE="UTC")


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings.DATABASE_URL)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    SessionLocal = build_session_factory(engine)
    with SessionLocal() as session:
        yield session


@pytest.fixture
def client(settings, engine):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def user_id():
    return f"user_{uuid.uuid4().hex[:10]}"


@pytest.fixture
def auth_headers():
    def _headers(sub):
        return {"Authorization": f"Bearer {create_access_token(sub)}"}
    return _headers


@pytest.fixture
def make_workout(db):
    """
    make_workout("u1", at(...), exercises=[("Squat", [1, 2]), ...])
    Exercises get order 0, 1, ... in list order unless given as (name, sets, order).
    """
    def _make(user_id, started_at, name=None, exercises=()):
        w = Workout(user_id=user_id, started_at=started_at, name=name)
        db.add(w)
        for i, entry in enumerate(exercises):
            ex_name, set_numbers = entry[0], entry[1]
            order = entry[2] if len(entry) > 2 else i
            we = WorkoutExercise(workout=w, exercise=Exercise(name=ex_name), order=order)
            for n in set_numbers:
                we.sets.append(ExerciseSet(set_number=n, reps=5, completed=n % 2 == 1))
            db.add(we)
        db.commit()
        db.refresh(w)
        return w
    return _make
