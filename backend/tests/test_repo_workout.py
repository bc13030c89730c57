from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo
import uuid

from app.repositories.workout_repo import WorkoutRepository

def at(y, mo, d, h=0, mi=0, s=0, us=0):
    return datetime(y, mo, d, h, mi, s, us, tzinfo=timezone.utc)

def test_workouts_by_date_scenario(db, make_workout):
    morning = make_workout("u1", at(2024, 3, 1, 8), name="AM")
    evening = make_workout("u1", at(2024, 3, 1, 18), name="PM")
    make_workout("u2", at(2024, 3, 1, 9), name="someone else")

    found = WorkoutRepository(db).get_workouts_by_date("u1", date(2024, 3, 1))
    assert [w.id for w in found] == [evening.id, morning.id]
    assert [w.started_at for w in found] == [at(2024, 3, 1, 18), at(2024, 3, 1, 8)]

def test_day_window_is_inclusive_to_the_last_millisecond(db, make_workout):
    first = make_workout("u1", at(2024, 3, 1, 0, 0, 0, 0))
    last = make_workout("u1", at(2024, 3, 1, 23, 59, 59, 999000))
    make_workout("u1", at(2024, 2, 29, 23, 59, 59, 999000))
    make_workout("u1", at(2024, 3, 2, 0, 0, 0, 0))

    found = WorkoutRepository(db).get_workouts_by_date("u1", date(2024, 3, 1))
    assert {w.id for w in found} == {first.id, last.id}

def test_day_window_uses_local_zone(db, make_workout):
    ny = ZoneInfo("America/New_York")
    # 2024-03-01 22:00 in New York is already Mar 2 in UTC
    late = make_workout("u1", at(2024, 3, 2, 3))
    make_workout("u1", at(2024, 3, 1, 4))  # Feb 29 23:00 in New York

    found = WorkoutRepository(db).get_workouts_by_date("u1", date(2024, 3, 1), tz=ny)
    assert [w.id for w in found] == [late.id]

def test_datetime_argument_is_truncated_to_its_day(db, make_workout):
    w = make_workout("u1", at(2024, 3, 1, 6))
    found = WorkoutRepository(db).get_workouts_by_date("u1", at(2024, 3, 1, 21, 30))
    assert [x.id for x in found] == [w.id]

def test_nested_exercises_and_sets_are_ordered(db, make_workout):
    w = make_workout(
        "u1",
        at(2024, 3, 1, 10),
        exercises=[("Deadlift", [3, 1, 2], 2), ("Squat", [2, 1], 0), ("Bench Press", [1], 1)],
    )
    db.expunge_all()

    (found,) = WorkoutRepository(db).get_workouts_by_date("u1", date(2024, 3, 1))
    assert found.id == w.id
    assert [we.order for we in found.workout_exercises] == [0, 1, 2]
    assert [we.exercise.name for we in found.workout_exercises] == ["Squat", "Bench Press", "Deadlift"]
    assert [s.set_number for s in found.workout_exercises[2].sets] == [1, 2, 3]

def test_create_then_get_round_trip(db):
    repo = WorkoutRepository(db)
    started = at(2024, 3, 1, 7, 15, 30, 250000)
    created = repo.create_workout(user_id="u1", name="Leg Day", started_at=started)
    assert created.id is not None
    assert created.created_at is not None and created.updated_at is not None

    db.expunge_all()
    got = repo.get_workout_by_id("u1", created.id)
    assert got.name == "Leg Day"
    assert got.started_at == started
    assert got.completed_at is None
    assert got.workout_exercises == []

def test_get_by_id_hides_other_users_workouts(db, make_workout):
    w = make_workout("u1", at(2024, 3, 1, 8))
    repo = WorkoutRepository(db)
    assert repo.get_workout_by_id("u2", w.id) is None
    assert repo.get_workout_by_id("u1", uuid.uuid4()) is None
    assert repo.get_workout_by_id("u1", w.id).id == w.id

def test_update_applies_only_supplied_fields(db, make_workout):
    w = make_workout("u1", at(2024, 3, 1, 8), name="Push")
    before = w.updated_at

    updated = WorkoutRepository(db).update_workout("u1", w.id, {"started_at": at(2024, 3, 1, 9)})
    assert updated.name == "Push"
    assert updated.started_at == at(2024, 3, 1, 9)
    assert updated.updated_at > before

    renamed = WorkoutRepository(db).update_workout("u1", w.id, {"name": "Pull"})
    assert renamed.name == "Pull"
    assert renamed.started_at == at(2024, 3, 1, 9)

def test_update_ignores_fields_that_are_not_editable(db, make_workout):
    w = make_workout("u1", at(2024, 3, 1, 8))
    updated = WorkoutRepository(db).update_workout("u1", w.id, {"user_id": "u2", "name": "x"})
    assert updated.user_id == "u1"
    assert updated.name == "x"

def test_update_without_matching_owner_is_not_found_and_mutates_nothing(db, make_workout):
    w = make_workout("u1", at(2024, 3, 1, 8), name="Mine")
    before = w.updated_at
    repo = WorkoutRepository(db)

    assert repo.update_workout("u2", w.id, {"name": "Stolen"}) is None
    assert repo.update_workout("u1", uuid.uuid4(), {"name": "Ghost"}) is None

    db.expunge_all()
    again = repo.get_workout_by_id("u1", w.id)
    assert again.name == "Mine"
    assert again.updated_at == before

def test_update_returns_workout_with_nested_exercises(db, make_workout):
    w = make_workout("u1", at(2024, 3, 1, 8), exercises=[("Row", [2, 1], 1), ("Squat", [1], 0)])
    db.expunge_all()

    # naive values are taken as UTC at this layer
    updated = WorkoutRepository(db).update_workout("u1", w.id, {"started_at": datetime(2024, 3, 1, 9)})
    assert updated.started_at == at(2024, 3, 1, 9)
    assert [we.exercise.name for we in updated.workout_exercises] == ["Squat", "Row"]
    assert [s.set_number for s in updated.workout_exercises[1].sets] == [1, 2]
