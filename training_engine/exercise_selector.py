"""
Exercise Selection
Chooses exercises for the winning split, compounds first
"""

from datetime import datetime
from typing import Iterable, List, Mapping

from .config import DEFAULT_SETTINGS, EngineSettings
from .constants import PULL_ARM_KEYWORDS, PUSH_ARM_KEYWORDS
from .models import CatalogExercise, SplitDefinition

ARM_FILTERS = {
    'push': ('triceps', PUSH_ARM_KEYWORDS),
    'pull': ('biceps', PULL_ARM_KEYWORDS),
}


class ExerciseSelector:
    """
    Filters the catalog to a split and ranks what to do next.

    Exercises never performed come first, then the ones performed longest ago.
    """

    def __init__(self,
                 catalog: Iterable[CatalogExercise],
                 last_performed: Mapping[str, datetime],
                 settings: EngineSettings = DEFAULT_SETTINGS):
        self.catalog = list(catalog)
        self.last_performed = last_performed
        self.settings = settings

    def is_compound(self, exercise: CatalogExercise) -> bool:
        return exercise.id in self.settings.compound_exercises

    def candidates(self, split: SplitDefinition) -> List[CatalogExercise]:
        """Catalog entries in the split's categories, with arms narrowed on push/pull days"""
        matches = [e for e in self.catalog if e.category in split.categories]

        arm_filter = ARM_FILTERS.get(split.id)
        if arm_filter is None:
            return matches

        muscle, keywords = arm_filter
        return [
            e for e in matches
            if e.category != 'arms' or _targets_arm_muscle(e, muscle, keywords)
        ]

    def _sort_by_last_performed(self, exercises: List[CatalogExercise]) -> List[CatalogExercise]:
        def sort_key(exercise):
            performed = self.last_performed.get(exercise.id)
            if performed is None:
                return (0,)
            return (1, performed)

        return sorted(exercises, key=sort_key)

    def select(self, split: SplitDefinition) -> List[CatalogExercise]:
        """
        Recommended exercises for a split.

        Returns:
            Up to 3 compound movements followed by up to 2 isolation
            movements, at most 5 in total
        """
        candidates = self.candidates(split)
        compounds = self._sort_by_last_performed([e for e in candidates if self.is_compound(e)])
        isolations = self._sort_by_last_performed([e for e in candidates if not self.is_compound(e)])

        selected = compounds[:self.settings.max_compound] + isolations[:self.settings.max_isolation]
        return selected[:self.settings.max_exercises]


def _targets_arm_muscle(exercise: CatalogExercise, muscle: str, keywords) -> bool:
    if muscle in exercise.muscle_groups:
        return True
    name = exercise.name.lower()
    return any(keyword in name for keyword in keywords)
