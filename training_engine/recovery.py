"""
Recovery Clock
Tracks when each muscle was last trained and whether it has recovered
"""

import pandas as pd
from datetime import datetime
from typing import Dict, Mapping, Optional, Sequence

from .config import DEFAULT_SETTINGS, EngineSettings
from .models import CatalogExercise, CompletedWorkout, RecoveryStatus
from .volume import build_muscle_frame

SECONDS_PER_HOUR = 60 * 60


class RecoveryClock:
    """
    Last-trained times per muscle, measured against a fixed "now".

    History is scanned newest first, so the first workout found for a
    muscle is its most recent one.
    """

    def __init__(self,
                 muscle_frame: pd.DataFrame,
                 now: datetime,
                 settings: EngineSettings = DEFAULT_SETTINGS):
        self.now = now
        self.settings = settings
        self.last_trained = self._last_trained(muscle_frame)

    @classmethod
    def from_history(cls,
                     workouts: Sequence[CompletedWorkout],
                     catalog: Mapping[str, CatalogExercise],
                     now: datetime,
                     settings: EngineSettings = DEFAULT_SETTINGS) -> 'RecoveryClock':
        return cls(build_muscle_frame(workouts, catalog), now, settings)

    @staticmethod
    def _last_trained(frame: pd.DataFrame) -> Dict[str, datetime]:
        if frame.empty:
            return {}
        first_seen = frame.groupby('muscle', sort=False)['finished_at'].first()
        return {
            muscle: pd.Timestamp(finished_at).to_pydatetime()
            for muscle, finished_at in first_seen.items()
        }

    def last_performed(self, muscle: str) -> Optional[datetime]:
        return self.last_trained.get(muscle)

    def hours_since_trained(self, muscle: str) -> Optional[float]:
        last = self.last_performed(muscle)
        if last is None:
            return None
        return (self.now - last).total_seconds() / SECONDS_PER_HOUR

    def days_since_trained(self, muscle: str) -> Optional[float]:
        hours = self.hours_since_trained(muscle)
        if hours is None:
            return None
        return hours / 24

    def recovery_status(self, muscle: str) -> RecoveryStatus:
        """fresh if never trained, recovered once the required hours have passed"""
        hours = self.hours_since_trained(muscle)
        if hours is None:
            return RecoveryStatus.FRESH
        if hours >= self.settings.required_recovery_hours(muscle):
            return RecoveryStatus.RECOVERED
        return RecoveryStatus.RECOVERING


def exercise_last_performed(workouts: Sequence[CompletedWorkout]) -> Dict[str, datetime]:
    """
    Most recent finish time per exercise id.

    Args:
        workouts: Completed workouts, newest first

    Returns:
        Dict of exercise_id -> finish time of the first workout containing it
    """
    last_performed = {}
    for workout in workouts:
        for exercise in workout.exercises:
            last_performed.setdefault(exercise.exercise_id, workout.finished_at)
    return last_performed
