"""
Strength Estimation
Estimates a one-rep max from a single logged set

CONCEPTS DEMONSTRATED:
1. Epley estimate - 1RM = weight x (1 + reps / 30)
2. RPE adjustment - reps in reserve are added to the reps performed
3. Inverse Brzycki - working weight for a target rep count and RPE
"""

import numpy as np
import logging
from typing import Optional

from .config import DEFAULT_SETTINGS, EngineSettings

logger = logging.getLogger(__name__)

BRZYCKI_INTERCEPT = 1.0278
BRZYCKI_SLOPE = 0.0278


def round_to_increment(weight: float, increment: float = 2.5) -> float:
    """
    Round to the nearest increment, halves rounding up.

    Python's round() would send 18.75 / 2.5 = 7.5 to 7 (banker's rounding),
    plate math expects 8.
    """
    return float(np.floor(weight / increment + 0.5) * increment)


def estimate_1rm(weight: float, reps: float) -> float:
    """
    Estimate 1RM with the Epley formula.

    A single rep is taken as a true max and returned unchanged.
    """
    if reps == 1:
        return weight
    return weight * (1 + reps / 30)


def estimate_1rm_with_rpe(weight: float,
                          reps: int,
                          rpe: Optional[int],
                          settings: EngineSettings = DEFAULT_SETTINGS) -> float:
    """
    Estimate 1RM counting the reps that were left in the tank.

    Args:
        weight: Weight lifted
        reps: Reps performed
        rpe: Rating of perceived exertion (1-10); unknown or missing ratings
             assume 4 reps in reserve

    Returns:
        Estimated 1RM
    """
    effective_reps = reps + settings.reps_in_reserve(rpe)
    return estimate_1rm(weight, effective_reps)


def calculate_weight_for_reps(one_rm: float,
                              target_reps: int,
                              target_rpe: Optional[int] = 8,
                              settings: EngineSettings = DEFAULT_SETTINGS) -> float:
    """
    Working weight for a target rep count at a target RPE.

    Args:
        one_rm: Estimated 1RM
        target_reps: Reps to perform
        target_rpe: Intended RPE for the set (default 8)

    Returns:
        Weight rounded to the plate increment, never below the minimum weight.
        If the rep count is past the formula's pole the 1RM is returned as is.
    """
    effective_reps = target_reps + settings.reps_in_reserve(target_rpe)
    denominator = BRZYCKI_INTERCEPT - BRZYCKI_SLOPE * effective_reps
    if denominator <= 0:
        logger.warning(
            "Brzycki denominator %.4f for %s effective reps; keeping 1RM %s",
            denominator, effective_reps, one_rm
        )
        return one_rm

    percentage = 1 / denominator
    weight = round_to_increment(one_rm * percentage, settings.weight_increment)
    return max(weight, settings.min_weight)
