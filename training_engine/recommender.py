"""
Training Recommendations Service
Entry point tying the recommendation pipelines together

CONCEPTS DEMONSTRATED:
1. Rule-based Systems - Encoding domain knowledge
2. Data-driven Recommendations - Based on the user's own history
3. Balancing Multiple Factors - Volume, recovery, staleness

Two independent pipelines:
- history + catalog -> volume/recovery -> split scoring -> exercise selection
- last set -> 1RM estimate -> next set options
"""

import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_SETTINGS, EngineSettings
from .exercise_selector import ExerciseSelector
from .models import CatalogExercise, CompletedWorkout
from .recovery import RecoveryClock, exercise_last_performed
from .set_recommender import get_next_set_recommendations
from .splits import SplitScorer
from .strength import estimate_1rm_with_rpe, round_to_increment
from .volume import VolumeTracker, build_muscle_frame

logger = logging.getLogger(__name__)


class TrainingRecommender:
    """
    Generates personalized training recommendations based on:
    - Muscle group balance over the last week
    - Recovery needs per muscle
    - How recently each exercise was performed

    Holds only the catalog and settings; history and the current time are
    passed in on every call, so results depend on nothing else.
    """

    def __init__(self,
                 exercises: Iterable[CatalogExercise],
                 settings: EngineSettings = DEFAULT_SETTINGS,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Args:
            exercises: The exercise catalog
            settings: Tables and tuning knobs
            clock: Supplies "now" when a call does not pass one
        """
        self.exercises = list(exercises)
        self.catalog = {exercise.id: exercise for exercise in self.exercises}
        self.settings = settings
        self.clock = clock

    def lookup_exercise(self, exercise_id: str) -> Optional[CatalogExercise]:
        return self.catalog.get(exercise_id)

    def _resolve_now(self, now: Optional[datetime]) -> datetime:
        if now is not None:
            return now
        if self.clock is None:
            raise ValueError("No time reference. Pass now= or construct with a clock.")
        return self.clock()

    def _analyze(self,
                 workouts: Sequence[CompletedWorkout],
                 now: datetime) -> Tuple[VolumeTracker, RecoveryClock]:
        frame = build_muscle_frame(workouts, self.catalog)
        return (
            VolumeTracker(frame, now, self.settings),
            RecoveryClock(frame, now, self.settings),
        )

    def get_muscle_volume_status(self,
                                 workouts: Sequence[CompletedWorkout],
                                 now: Optional[datetime] = None) -> List[Dict]:
        """
        Weekly volume and recovery overview for the tracked muscles.

        Args:
            workouts: Completed workouts, newest first
            now: Time reference for the weekly window and recovery

        Returns:
            One dict per tracked muscle, in display order
        """
        now = self._resolve_now(now)
        volume, recovery = self._analyze(workouts, now)

        overview = []
        for muscle, muscle_name in self.settings.tracked_muscles:
            target = self.settings.volume_target(muscle)
            sets = volume.volume_for(muscle)
            overview.append({
                'muscle': muscle,
                'muscle_name': muscle_name,
                'current_sets': int(round_to_increment(sets, 1)),
                'volume': sets,
                'target_min': target['min'],
                'target_max': target['max'],
                'status': volume.volume_status(muscle).value,
                'recovery_status': recovery.recovery_status(muscle).value,
                'last_performed': recovery.last_performed(muscle),
            })

        return overview

    def get_smart_recommendation(self,
                                 workouts: Sequence[CompletedWorkout],
                                 now: Optional[datetime] = None) -> Dict:
        """
        Recommend the split and exercises for the next session.

        Args:
            workouts: Completed workouts, newest first
            now: Time reference; one value is used for the whole pass

        Returns:
            Dict with split, split_name, reason, reasons, categories,
            exercises, score and split_scores
        """
        now = self._resolve_now(now)
        volume, recovery = self._analyze(workouts, now)

        best = SplitScorer(volume, recovery, self.settings).best_split()
        split = best['split']

        last_performed = exercise_last_performed(workouts)
        selector = ExerciseSelector(self.exercises, last_performed, self.settings)
        exercises = selector.select(split)

        logger.debug(
            "Recommending %s (score %s) with %d exercises",
            split.id, best['score'], len(exercises)
        )

        return {
            'split': split.id,
            'split_name': split.name,
            'reason': best['reason'],
            'reasons': best['reasons'],
            'categories': list(split.categories),
            'exercises': [
                {
                    'exercise_id': exercise.id,
                    'name': exercise.name,
                    'category': exercise.category,
                    'muscle_groups': list(exercise.muscle_groups),
                    'equipment': exercise.equipment,
                    'is_compound': selector.is_compound(exercise),
                    'last_performed': last_performed.get(exercise.id),
                }
                for exercise in exercises
            ],
            'score': best['score'],
            'split_scores': best['split_scores'],
        }

    def estimate_1rm_with_rpe(self, weight: float, reps: int, rpe: Optional[int]) -> float:
        return estimate_1rm_with_rpe(weight, reps, rpe, self.settings)

    def get_next_set_recommendations(self,
                                     weight: float,
                                     reps: int,
                                     rpe: Optional[int]) -> List[Dict]:
        return get_next_set_recommendations(weight, reps, rpe, self.settings)
