"""
History Statistics
Personal records and volume trends derived from completed workouts

CONCEPTS DEMONSTRATED:
1. Per-session summaries - one row per exercise performed in a workout
2. Personal records - heaviest weight, ties broken by reps at that weight
3. Time buckets - trailing 7-day windows for trend charts
"""

import pandas as pd
from datetime import datetime, timedelta
from typing import Dict, List, Mapping, Optional, Sequence

from .config import DEFAULT_SETTINGS, EngineSettings
from .models import CatalogExercise, CompletedExercise, CompletedWorkout
from .strength import estimate_1rm, round_to_increment

SESSION_COLUMNS = [
    'workout_index',
    'finished_at',
    'exercise_id',
    'category',
    'max_weight',
    'reps_at_max_weight',
    'total_volume',
    'total_sets',
    'total_reps',
]


def _summarize_exercise(exercise: CompletedExercise) -> Dict:
    max_weight = 0
    reps_at_max_weight = 0
    total_volume = 0
    total_reps = 0

    for completed_set in exercise.sets:
        weight = completed_set.weight or 0
        reps = completed_set.reps or 0
        total_volume += weight * reps
        total_reps += reps

        if weight > max_weight:
            max_weight = weight
            reps_at_max_weight = reps
        elif weight == max_weight and reps > reps_at_max_weight:
            reps_at_max_weight = reps

    return {
        'max_weight': max_weight,
        'reps_at_max_weight': reps_at_max_weight,
        'total_volume': total_volume,
        'total_sets': len(exercise.sets),
        'total_reps': total_reps,
    }


def exercise_session_summaries(workouts: Sequence[CompletedWorkout],
                               catalog: Optional[Mapping[str, CatalogExercise]] = None) -> pd.DataFrame:
    """
    One row per exercise per workout, in history order.

    Missing weights and reps count as zero. The category comes from the
    logged exercise, falling back to the catalog entry when given.
    """
    catalog = catalog or {}
    rows = []
    for workout_index, workout in enumerate(workouts):
        for exercise in workout.exercises:
            entry = catalog.get(exercise.exercise_id)
            category = exercise.category or (entry.category if entry else None)
            rows.append({
                'workout_index': workout_index,
                'finished_at': workout.finished_at,
                'exercise_id': exercise.exercise_id,
                'category': category,
                **_summarize_exercise(exercise),
            })
    return pd.DataFrame(rows, columns=SESSION_COLUMNS)


def record_1rm(weight: float, reps: int) -> float:
    """Whole-number Epley estimate as shown on record boards"""
    if reps == 1:
        return weight
    if reps == 0 or weight == 0:
        return 0
    return round_to_increment(estimate_1rm(weight, reps), 1)


def personal_records(workouts: Sequence[CompletedWorkout]) -> List[Dict]:
    """
    Best session per exercise, heaviest first.

    Heavier weight wins, and at equal weight more reps wins. Matching a
    record does not replace it, so a full tie keeps the earliest session.

    Args:
        workouts: Completed workouts, newest first

    Returns:
        List of dicts with exercise_id, max_weight, max_reps_at_weight,
        achieved_at and estimated_1rm
    """
    sessions = exercise_session_summaries(workouts)
    if sessions.empty:
        return []

    # Oldest first so the stable sort keeps the session that set the record
    ranked = sessions.iloc[::-1].sort_values(
        ['max_weight', 'reps_at_max_weight'], ascending=False, kind='mergesort'
    )
    best = ranked.drop_duplicates('exercise_id', keep='first')
    best = best.sort_values('max_weight', ascending=False, kind='mergesort')

    records = []
    for row in best.itertuples(index=False):
        max_weight = float(row.max_weight)
        reps = int(row.reps_at_max_weight)
        records.append({
            'exercise_id': row.exercise_id,
            'max_weight': max_weight,
            'max_reps_at_weight': reps,
            'achieved_at': pd.Timestamp(row.finished_at).to_pydatetime(),
            'estimated_1rm': float(record_1rm(max_weight, reps)),
        })
    return records


def recent_personal_records(workouts: Sequence[CompletedWorkout],
                            now: datetime,
                            days: int = 30) -> List[Dict]:
    """Personal records achieved within the last `days` days, newest first"""
    cutoff = now - timedelta(days=days)
    recent = [r for r in personal_records(workouts) if r['achieved_at'] >= cutoff]
    return sorted(recent, key=lambda r: r['achieved_at'], reverse=True)


def _week_label(weeks_back: int) -> str:
    if weeks_back == 0:
        return "this week"
    if weeks_back == 1:
        return "last week"
    return f"{weeks_back + 1} weeks ago"


def weekly_volume_trend(workouts: Sequence[CompletedWorkout],
                        now: datetime,
                        weeks: int = 4) -> List[Dict]:
    """
    Total volume and workout count per trailing 7-day bucket.

    Returns:
        Oldest bucket first, each {'week', 'volume', 'workouts'}
    """
    sessions = exercise_session_summaries(workouts)
    per_workout = pd.DataFrame({
        'finished_at': [w.finished_at for w in workouts],
        'volume': (
            sessions.groupby('workout_index')['total_volume'].sum()
            .reindex(range(len(workouts)), fill_value=0)
            .tolist()
        ),
    })

    trend = []
    for weeks_back in range(weeks):
        week_end = now - timedelta(days=7 * weeks_back)
        week_start = now - timedelta(days=7 * (weeks_back + 1))
        if per_workout.empty:
            in_week = per_workout
        else:
            in_week = per_workout[
                (per_workout['finished_at'] >= week_start) & (per_workout['finished_at'] < week_end)
            ]
        trend.insert(0, {
            'week': _week_label(weeks_back),
            'volume': float(in_week['volume'].sum()),
            'workouts': len(in_week),
        })
    return trend


def weekly_category_sets(workouts: Sequence[CompletedWorkout],
                         now: datetime,
                         catalog: Optional[Mapping[str, CatalogExercise]] = None,
                         settings: EngineSettings = DEFAULT_SETTINGS) -> Dict[str, int]:
    """Sets per exercise category inside the weekly volume window"""
    sessions = exercise_session_summaries(workouts, catalog)
    if sessions.empty:
        return {}

    cutoff = now - timedelta(days=settings.volume_window_days)
    recent = sessions[(sessions['finished_at'] >= cutoff) & sessions['category'].notna()]
    totals = recent.groupby('category', sort=False)['total_sets'].sum()
    return {category: int(total) for category, total in totals.items()}
