"""
Next Set Recommendations
Suggests the next set's weight and reps from how hard the last one felt

Strategy by previous RPE:
- RPE 7 or lower (reps left over): add weight or add reps
- RPE 8 (on target): hold, or trade a rep for stability / a little weight
- RPE 9-10 (near failure): drop 5-10% or drop reps
"""

import logging
from typing import Dict, List, Optional

from .config import DEFAULT_SETTINGS, EngineSettings
from .strength import round_to_increment

logger = logging.getLogger(__name__)

# A 5kg jump is only offered once the previous set was at least this heavy
BIG_JUMP_MIN_WEIGHT_KG = 20
TARGET_RPE = 8


def get_next_set_recommendations(previous_weight: float,
                                 previous_reps: int,
                                 previous_rpe: Optional[int],
                                 settings: EngineSettings = DEFAULT_SETTINGS) -> List[Dict]:
    """
    Recommend up to three options for the next set.

    The first option is the default choice. No input is rejected; callers
    are responsible for passing sensible numbers. A missing RPE is treated
    like an easy set.

    Args:
        previous_weight: Weight of the set just completed
        previous_reps: Reps of the set just completed
        previous_rpe: RPE of the set just completed

    Returns:
        List of {'weight', 'reps', 'reason'} dicts
    """
    increment = settings.weight_increment
    recommendations = []

    logger.debug(
        "Next set for %sx%s @ RPE %s",
        previous_weight, previous_reps, previous_rpe
    )

    if previous_rpe is None or previous_rpe <= 7:
        recommendations.append({
            'weight': previous_weight + increment,
            'reps': previous_reps,
            'reason': f"+{increment:g}kg",
        })
        if previous_weight >= BIG_JUMP_MIN_WEIGHT_KG:
            recommendations.append({
                'weight': previous_weight + 2 * increment,
                'reps': previous_reps,
                'reason': f"+{2 * increment:g}kg",
            })
        recommendations.append({
            'weight': previous_weight,
            'reps': previous_reps + 2,
            'reason': "+2 reps",
        })

    elif previous_rpe == TARGET_RPE:
        recommendations.append({
            'weight': previous_weight,
            'reps': previous_reps,
            'reason': f"maintain (RPE {TARGET_RPE} target)",
        })
        if previous_reps > 3:
            recommendations.append({
                'weight': previous_weight,
                'reps': previous_reps - 1,
                'reason': "rep decrease (-1 rep)",
            })
        if previous_reps > 5:
            recommendations.append({
                'weight': previous_weight + increment,
                'reps': previous_reps - 2,
                'reason': "weight up / reps down",
            })

    else:
        for fraction, label in ((0.95, "-5%"), (0.90, "-10%")):
            reduced = round_to_increment(previous_weight * fraction, increment)
            recommendations.append({
                'weight': max(reduced, settings.min_weight),
                'reps': previous_reps,
                'reason': f"{label} weight",
            })
        if previous_reps > 3:
            recommendations.append({
                'weight': previous_weight,
                'reps': max(previous_reps - 2, 1),
                'reason': "-2 reps",
            })

    return recommendations[:settings.max_set_recommendations]


def format_recommendation(recommendation: Dict) -> str:
    """Display string, e.g. '52.5kg × 8 reps (+2.5kg)'"""
    return f"{recommendation['weight']:g}kg × {recommendation['reps']} reps ({recommendation['reason']})"
