"""
Training Data Models
Read-only snapshots handed to the engine by the history and catalog owners
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class VolumeStatus(str, Enum):
    """Weekly volume compared to a muscle's target range"""
    LOW = "low"
    OPTIMAL = "optimal"
    HIGH = "high"


class RecoveryStatus(str, Enum):
    """Recovery state of a muscle relative to its required rest"""
    FRESH = "fresh"
    RECOVERED = "recovered"
    RECOVERING = "recovering"


@dataclass(frozen=True)
class CompletedSet:
    """A single logged set. Weight and reps may be missing for timed/bodyweight work."""
    weight: Optional[float] = None
    reps: Optional[int] = None
    rpe: Optional[int] = None
    completed_at: Optional[datetime] = None


@dataclass(frozen=True)
class CompletedExercise:
    """An exercise performed within a workout"""
    exercise_id: str
    sets: Tuple[CompletedSet, ...] = ()
    category: Optional[str] = None


@dataclass(frozen=True)
class CompletedWorkout:
    """A finished session. History is supplied newest first."""
    finished_at: datetime
    exercises: Tuple[CompletedExercise, ...] = ()
    id: Optional[str] = None


@dataclass(frozen=True)
class CatalogExercise:
    """
    Exercise catalog entry.

    The first muscle group tag is the primary mover, the rest receive
    indirect stimulus.
    """
    id: str
    name: str
    category: str
    muscle_groups: Tuple[str, ...] = ()
    equipment: Optional[str] = None


@dataclass(frozen=True)
class SplitDefinition:
    """A named grouping of muscles and catalog categories trained together"""
    id: str
    name: str
    muscles: Tuple[str, ...] = field(default_factory=tuple)
    categories: Tuple[str, ...] = field(default_factory=tuple)
