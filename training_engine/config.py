"""
Engine Configuration
Tables and tuning knobs, overridable per caller or from the environment

Usage:
    settings = EngineSettings.from_env()
    recommender = TrainingRecommender(catalog, settings=settings)
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Optional, Tuple

from dotenv import load_dotenv

from . import constants
from .models import SplitDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    """Everything the engine reads besides its inputs. Defaults match the constants module."""
    rpe_to_rir: Dict[int, int] = field(default_factory=lambda: dict(constants.RPE_TO_RIR))
    default_rir: int = constants.DEFAULT_RIR
    weight_increment: float = constants.WEIGHT_INCREMENT_KG
    min_weight: float = constants.MIN_WEIGHT_KG
    volume_targets: Dict[str, Dict[str, int]] = field(
        default_factory=lambda: {k: dict(v) for k, v in constants.MUSCLE_VOLUME_TARGETS.items()}
    )
    default_volume_target: Dict[str, int] = field(
        default_factory=lambda: dict(constants.DEFAULT_VOLUME_TARGET)
    )
    recovery_hours: Dict[str, float] = field(default_factory=lambda: dict(constants.RECOVERY_HOURS))
    default_recovery_hours: float = constants.DEFAULT_RECOVERY_HOURS
    indirect_volume_factor: float = constants.INDIRECT_VOLUME_FACTOR
    volume_window_days: float = constants.VOLUME_WINDOW_DAYS
    stale_after_days: float = constants.STALE_AFTER_DAYS
    compound_exercises: FrozenSet[str] = constants.COMPOUND_EXERCISES
    splits: Tuple[SplitDefinition, ...] = constants.SPLITS
    tracked_muscles: Tuple[Tuple[str, str], ...] = constants.TRACKED_MUSCLES
    max_set_recommendations: int = 3
    max_compound: int = 3
    max_isolation: int = 2
    max_exercises: int = 5

    def reps_in_reserve(self, rpe: Optional[int]) -> int:
        """Reps in reserve for an RPE, falling back to the default for unknown ratings"""
        return self.rpe_to_rir.get(rpe, self.default_rir)

    def volume_target(self, muscle: str) -> Dict[str, int]:
        return self.volume_targets.get(muscle, self.default_volume_target)

    def required_recovery_hours(self, muscle: str) -> float:
        return self.recovery_hours.get(muscle, self.default_recovery_hours)

    def muscle_display_name(self, muscle: str) -> str:
        return dict(self.tracked_muscles).get(muscle, muscle.capitalize())

    def with_overrides(self, **changes) -> 'EngineSettings':
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'EngineSettings':
        """
        Build settings from environment variables (and a .env file if present).

        Recognized variables:
            TRAINING_WEIGHT_INCREMENT: rounding step for recommended weights
            TRAINING_MIN_WEIGHT: lowest weight a decrease may produce
            TRAINING_VOLUME_WINDOW_DAYS: trailing window for weekly volume
            TRAINING_STALE_AFTER_DAYS: days without training before a muscle earns a bonus

        Raises:
            ValueError: if a variable is set but is not a positive number
        """
        load_dotenv(dotenv_path)

        defaults = cls()
        settings = replace(
            defaults,
            weight_increment=_positive_float('TRAINING_WEIGHT_INCREMENT', defaults.weight_increment),
            min_weight=_positive_float('TRAINING_MIN_WEIGHT', defaults.min_weight),
            volume_window_days=_positive_float('TRAINING_VOLUME_WINDOW_DAYS', defaults.volume_window_days),
            stale_after_days=_positive_float('TRAINING_STALE_AFTER_DAYS', defaults.stale_after_days),
        )
        logger.info(
            "Loaded engine settings: increment=%s min_weight=%s window_days=%s stale_after_days=%s",
            settings.weight_increment,
            settings.min_weight,
            settings.volume_window_days,
            settings.stale_after_days,
        )
        return settings


def _positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


DEFAULT_SETTINGS = EngineSettings()
