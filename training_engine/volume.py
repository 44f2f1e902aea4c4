"""
Weekly Volume Tracking
Counts set-equivalents per muscle over the trailing week

CONCEPTS DEMONSTRATED:
1. Flattening nested history into a tidy DataFrame
2. Indirect stimulus - secondary muscles of a compound lift count half
3. Target ranges - classifying volume as low / optimal / high
"""

import pandas as pd
import numpy as np
import logging
from datetime import datetime, timedelta
from typing import Dict, Mapping, Sequence

from .config import DEFAULT_SETTINGS, EngineSettings
from .models import CatalogExercise, CompletedWorkout, VolumeStatus

logger = logging.getLogger(__name__)

MUSCLE_FRAME_COLUMNS = [
    'workout_index',
    'finished_at',
    'exercise_id',
    'muscle',
    'position',
    'set_count',
    'is_compound',
]


def build_muscle_frame(workouts: Sequence[CompletedWorkout],
                       catalog: Mapping[str, CatalogExercise]) -> pd.DataFrame:
    """
    One row per (workout, exercise, muscle tag), in history order.

    Exercises missing from the catalog are left out. When an entry has no
    muscle tags, its category stands in as the only muscle.

    Args:
        workouts: Completed workouts, newest first
        catalog: Exercise catalog keyed by id

    Returns:
        DataFrame with MUSCLE_FRAME_COLUMNS
    """
    rows = []
    for workout_index, workout in enumerate(workouts):
        for exercise in workout.exercises:
            entry = catalog.get(exercise.exercise_id)
            if entry is None:
                logger.debug("Skipping exercise %s: not in catalog", exercise.exercise_id)
                continue

            muscles = entry.muscle_groups or (exercise.category or entry.category,)
            is_compound = len(muscles) > 1
            for position, muscle in enumerate(muscles):
                rows.append({
                    'workout_index': workout_index,
                    'finished_at': workout.finished_at,
                    'exercise_id': exercise.exercise_id,
                    'muscle': muscle,
                    'position': position,
                    'set_count': len(exercise.sets),
                    'is_compound': is_compound,
                })

    return pd.DataFrame(rows, columns=MUSCLE_FRAME_COLUMNS)


class VolumeTracker:
    """
    Weekly training volume per muscle.

    The first muscle of an exercise gets a full set per set performed, the
    others get the indirect factor (0.5 by default).
    """

    def __init__(self,
                 muscle_frame: pd.DataFrame,
                 now: datetime,
                 settings: EngineSettings = DEFAULT_SETTINGS):
        self.now = now
        self.settings = settings
        self.volume = self._weekly_volume(muscle_frame)

    @classmethod
    def from_history(cls,
                     workouts: Sequence[CompletedWorkout],
                     catalog: Mapping[str, CatalogExercise],
                     now: datetime,
                     settings: EngineSettings = DEFAULT_SETTINGS) -> 'VolumeTracker':
        return cls(build_muscle_frame(workouts, catalog), now, settings)

    def _weekly_volume(self, frame: pd.DataFrame) -> Dict[str, float]:
        if frame.empty:
            return {}

        cutoff = self.now - timedelta(days=self.settings.volume_window_days)
        recent = frame[frame['finished_at'] >= cutoff]
        if recent.empty:
            return {}

        is_direct = (recent['position'] == 0) | ~recent['is_compound'].astype(bool)
        factor = np.where(is_direct, 1.0, self.settings.indirect_volume_factor)
        contribution = recent['set_count'] * factor

        totals = contribution.groupby(recent['muscle'], sort=False).sum()
        return {muscle: float(total) for muscle, total in totals.items()}

    def volume_for(self, muscle: str) -> float:
        return self.volume.get(muscle, 0.0)

    def volume_status(self, muscle: str) -> VolumeStatus:
        """Compare a muscle's weekly volume to its target range"""
        sets = self.volume_for(muscle)
        target = self.settings.volume_target(muscle)

        if sets < target['min']:
            return VolumeStatus.LOW
        if sets > target['max']:
            return VolumeStatus.HIGH
        return VolumeStatus.OPTIMAL
