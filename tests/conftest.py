import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from training_engine.models import (
    CatalogExercise,
    CompletedExercise,
    CompletedSet,
    CompletedWorkout,
)

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)

CATALOG = [
    # chest
    CatalogExercise('default_bench_press', 'Barbell Bench Press', 'chest', ('chest', 'triceps', 'shoulders'), 'barbell'),
    CatalogExercise('default_incline_bench_press', 'Incline Bench Press', 'chest', ('chest', 'shoulders', 'triceps'), 'barbell'),
    CatalogExercise('default_push_up', 'Push Up', 'chest', ('chest', 'triceps'), 'bodyweight'),
    CatalogExercise('dumbbell_fly', 'Dumbbell Fly', 'chest', ('chest',), 'dumbbell'),
    # shoulders
    CatalogExercise('default_overhead_press', 'Overhead Press', 'shoulders', ('shoulders', 'triceps'), 'barbell'),
    CatalogExercise('lateral_raise', 'Lateral Raise', 'shoulders', ('shoulders',), 'dumbbell'),
    # arms
    CatalogExercise('tricep_pushdown', 'Cable Pushdown', 'arms', ('triceps',), 'cable'),
    CatalogExercise('bench_dip', 'Bench Dip', 'arms', (), 'bodyweight'),
    CatalogExercise('skull_crusher', 'Skull Crusher', 'arms', ('triceps',), 'barbell'),
    CatalogExercise('barbell_curl', 'Barbell Curl', 'arms', ('biceps',), 'barbell'),
    CatalogExercise('hammer_curl', 'Hammer Curl', 'arms', ('forearms',), 'dumbbell'),
    CatalogExercise('wrist_roller', 'Wrist Roller', 'arms', ('forearms',), 'other'),
    # back
    CatalogExercise('default_barbell_row', 'Barbell Row', 'back', ('back', 'biceps'), 'barbell'),
    CatalogExercise('default_pull_up', 'Pull Up', 'back', ('back', 'biceps'), 'bodyweight'),
    CatalogExercise('default_lat_pulldown', 'Lat Pulldown', 'back', ('back', 'biceps'), 'cable'),
    CatalogExercise('face_pull', 'Face Pull', 'back', ('shoulders',), 'cable'),
    # legs
    CatalogExercise('default_squat', 'Barbell Squat', 'legs', ('quadriceps', 'glutes', 'hamstrings'), 'barbell'),
    CatalogExercise('default_deadlift', 'Deadlift', 'legs', ('hamstrings', 'glutes', 'back'), 'barbell'),
    CatalogExercise('default_leg_press', 'Leg Press', 'legs', ('quadriceps', 'glutes'), 'machine'),
    CatalogExercise('leg_curl', 'Leg Curl', 'legs', ('hamstrings',), 'machine'),
    CatalogExercise('calf_raise', 'Calf Raise', 'legs', ('calves',), 'machine'),
    # core
    CatalogExercise('plank', 'Plank', 'core', ('core',), 'bodyweight'),
    CatalogExercise('cable_crunch', 'Cable Crunch', 'core', (), 'cable'),
]


def sets(count, weight=50.0, reps=10, rpe=8):
    return tuple(CompletedSet(weight=weight, reps=reps, rpe=rpe) for _ in range(count))


def workout(days_ago, *exercises, hours_ago=0):
    """Build a workout finished `days_ago` days (plus `hours_ago` hours) before NOW.

    Each exercise is (exercise_id, set_count) or (exercise_id, tuple_of_sets).
    """
    completed = []
    for exercise_id, performed in exercises:
        if isinstance(performed, int):
            performed = sets(performed)
        completed.append(CompletedExercise(exercise_id=exercise_id, sets=performed))
    return CompletedWorkout(
        finished_at=NOW - timedelta(days=days_ago, hours=hours_ago),
        exercises=tuple(completed),
    )


@pytest.fixture
def catalog():
    return list(CATALOG)


@pytest.fixture
def catalog_by_id():
    return {exercise.id: exercise for exercise in CATALOG}


@pytest.fixture
def upper_body_yesterday():
    """Heavy upper body work one day ago; everything else untouched"""
    return [
        workout(1, ('default_bench_press', 12), ('default_barbell_row', 12)),
    ]
