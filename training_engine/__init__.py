"""
Training Engine Package

Contains the training-load recommendation logic:
- Strength estimation: RPE-adjusted 1RM and working weights
- Next set recommendations from the last set's RPE
- VolumeTracker / RecoveryClock: weekly volume and recovery per muscle
- SplitScorer / ExerciseSelector: what to train next and with which exercises
- TrainingRecommender: one entry point for all of the above
"""

from .config import DEFAULT_SETTINGS, EngineSettings
from .exercise_selector import ExerciseSelector
from .history import (
    personal_records,
    recent_personal_records,
    weekly_category_sets,
    weekly_volume_trend,
)
from .models import (
    CatalogExercise,
    CompletedExercise,
    CompletedSet,
    CompletedWorkout,
    RecoveryStatus,
    SplitDefinition,
    VolumeStatus,
)
from .recommender import TrainingRecommender
from .recovery import RecoveryClock, exercise_last_performed
from .set_recommender import format_recommendation, get_next_set_recommendations
from .splits import SplitScorer
from .strength import (
    calculate_weight_for_reps,
    estimate_1rm,
    estimate_1rm_with_rpe,
    round_to_increment,
)
from .volume import VolumeTracker, build_muscle_frame

__all__ = [
    'DEFAULT_SETTINGS',
    'EngineSettings',
    'CatalogExercise',
    'CompletedExercise',
    'CompletedSet',
    'CompletedWorkout',
    'RecoveryStatus',
    'SplitDefinition',
    'VolumeStatus',
    'estimate_1rm',
    'estimate_1rm_with_rpe',
    'calculate_weight_for_reps',
    'round_to_increment',
    'get_next_set_recommendations',
    'format_recommendation',
    'VolumeTracker',
    'build_muscle_frame',
    'RecoveryClock',
    'exercise_last_performed',
    'SplitScorer',
    'ExerciseSelector',
    'TrainingRecommender',
    'personal_records',
    'recent_personal_records',
    'weekly_volume_trend',
    'weekly_category_sets',
]
