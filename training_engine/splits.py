"""
Split Scoring
Picks the workout split that best fits current recovery and weekly volume

CONCEPTS DEMONSTRATED:
1. Rule-based scoring - each muscle adds or subtracts points
2. Balancing multiple factors - recovery, volume, staleness
3. Deterministic tie-break - the earlier split in the candidate order wins
"""

import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from .config import DEFAULT_SETTINGS, EngineSettings
from .models import RecoveryStatus, SplitDefinition, VolumeStatus
from .recovery import RecoveryClock
from .volume import VolumeTracker

logger = logging.getLogger(__name__)


class SplitScorer:
    """
    Scores candidate splits from per-muscle recovery and volume.

    Per muscle in a split:
    - recovery: fresh +30, recovered +20, recovering -30
    - volume: low +25, high -15, optimal 0
    - staleness: +15 if last trained more than 5 days ago
    """

    RECOVERY_POINTS = {
        RecoveryStatus.FRESH: 30,
        RecoveryStatus.RECOVERED: 20,
        RecoveryStatus.RECOVERING: -30,
    }

    VOLUME_POINTS = {
        VolumeStatus.LOW: 25,
        VolumeStatus.OPTIMAL: 0,
        VolumeStatus.HIGH: -15,
    }

    STALE_BONUS = 15
    MAX_REASONS = 2

    def __init__(self,
                 volume: VolumeTracker,
                 recovery: RecoveryClock,
                 settings: EngineSettings = DEFAULT_SETTINGS):
        self.volume = volume
        self.recovery = recovery
        self.settings = settings

    def score_split(self, split: SplitDefinition) -> Tuple[int, List[str]]:
        """
        Score one split.

        Returns:
            (score, reasons) where reasons are in the order they were found
        """
        score = 0
        reasons = []

        for muscle in split.muscles:
            score += self.RECOVERY_POINTS[self.recovery.recovery_status(muscle)]

            volume_status = self.volume.volume_status(muscle)
            score += self.VOLUME_POINTS[volume_status]
            if volume_status == VolumeStatus.LOW:
                reasons.append(f"{muscle} volume low")

            days_since = self.recovery.days_since_trained(muscle)
            if days_since is not None and days_since > self.settings.stale_after_days:
                score += self.STALE_BONUS
                reasons.append(f"{math.floor(days_since)} days since trained")

        return score, reasons

    def best_split(self, splits: Optional[Sequence[SplitDefinition]] = None) -> Dict:
        """
        Pick the highest scoring split.

        Args:
            splits: Candidates in evaluation order (defaults to the configured splits)

        Returns:
            Dict with the winning 'split', its 'score', 'reason', 'reasons'
            and every candidate's score under 'split_scores'
        """
        candidates = list(splits if splits is not None else self.settings.splits)
        if not candidates:
            raise ValueError("At least one split definition is required")

        best = None
        best_score = -math.inf
        best_reasons = []
        split_scores = {}

        for split in candidates:
            score, reasons = self.score_split(split)
            split_scores[split.id] = score
            logger.debug("Split %s scored %s", split.id, score)

            # Strictly greater: ties keep the earlier split
            if score > best_score:
                best = split
                best_score = score
                best_reasons = reasons[:self.MAX_REASONS]

        return {
            'split': best,
            'score': best_score,
            'reasons': best_reasons,
            'reason': self._summarize(best, best_reasons),
            'split_scores': split_scores,
        }

    def _summarize(self, split: SplitDefinition, reasons: List[str]) -> str:
        if reasons:
            return ", ".join(reasons)

        low_muscles = [
            muscle for muscle in split.muscles
            if self.volume.volume_status(muscle) == VolumeStatus.LOW
        ]
        if low_muscles:
            lowest = min(low_muscles, key=self.volume.volume_for)
            return f"{self.settings.muscle_display_name(lowest)} low volume"
        return "balanced training"
