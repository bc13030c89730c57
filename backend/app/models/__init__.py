from app.models.exercise import Exercise
from app.models.exercise_set import ExerciseSet
from app.models.workout import Workout
from app.models.workout_exercise import WorkoutExercise

__all__ = ["Exercise", "ExerciseSet", "Workout", "WorkoutExercise"]
