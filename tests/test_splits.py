"""
Tests for split scoring and selection

Empty history puts every muscle at fresh (+30) and low volume (+25),
so a split scores 55 per muscle.
"""

import itertools

import pytest

from training_engine.config import DEFAULT_SETTINGS
from training_engine.models import SplitDefinition
from training_engine.recovery import RecoveryClock
from training_engine.splits import SplitScorer
from training_engine.volume import VolumeTracker, build_muscle_frame

from conftest import NOW, workout


def scorer(workouts, catalog_by_id, settings=DEFAULT_SETTINGS):
    frame = build_muscle_frame(workouts, catalog_by_id)
    return SplitScorer(
        VolumeTracker(frame, NOW, settings),
        RecoveryClock(frame, NOW, settings),
        settings,
    )


def test_empty_history_favors_the_biggest_split(catalog_by_id):
    best = scorer([], catalog_by_id).best_split()

    assert best['split'].id == 'upper'
    assert best['score'] == 275
    assert best['split_scores'] == {
        'push': 165,
        'pull': 110,
        'legs': 220,
        'upper': 275,
        'lower': 220,
    }
    assert best['reasons'] == ["chest volume low", "back volume low"]
    assert best['reason'] == "chest volume low, back volume low"


def test_recently_trained_muscles_are_penalized(catalog_by_id, upper_body_yesterday):
    best = scorer(upper_body_yesterday, catalog_by_id).best_split()

    # chest 12, back 12, triceps 6, biceps 6 are on target; shoulders 6 is low
    assert best['split_scores'] == {
        'push': -65,
        'pull': -60,
        'legs': 220,
        'upper': -125,
        'lower': 220,
    }
    # legs and lower tie; legs comes first
    assert best['split'].id == 'legs'
    assert best['reasons'] == ["quadriceps volume low", "hamstrings volume low"]


def test_stale_muscles_earn_bonus(catalog_by_id, upper_body_yesterday):
    history = upper_body_yesterday + [workout(10, ('default_squat', 3))]
    split_scorer = scorer(history, catalog_by_id)

    # quads, hamstrings, glutes: recovered +20, low +25, stale +15; calves fresh and low
    assert split_scorer.score_split(DEFAULT_SETTINGS.splits[2]) == (
        235,
        [
            "quadriceps volume low", "10 days since trained",
            "hamstrings volume low", "10 days since trained",
            "glutes volume low", "10 days since trained",
            "calves volume low",
        ],
    )

    best = split_scorer.best_split()
    assert best['split'].id == 'legs'
    assert best['reasons'] == ["quadriceps volume low", "10 days since trained"]


def test_stale_threshold_is_strict(catalog_by_id, upper_body_yesterday):
    history = upper_body_yesterday + [workout(5, ('default_squat', 3))]
    _, reasons = scorer(history, catalog_by_id).score_split(DEFAULT_SETTINGS.splits[2])
    assert not any('days since trained' in reason for reason in reasons)


def test_high_volume_is_penalized(catalog_by_id):
    history = [workout(3, ('dumbbell_fly', 21))]
    split_scorer = scorer(history, catalog_by_id)
    chest_only = SplitDefinition('chest', 'Chest', ('chest',), ('chest',))
    # recovered +20, high -15
    assert split_scorer.score_split(chest_only) == (5, [])


def test_balanced_training_fallback_reason(catalog_by_id):
    settings = DEFAULT_SETTINGS.with_overrides(
        volume_targets={},
        default_volume_target={'min': 0, 'max': 20},
    )
    best = scorer([], catalog_by_id, settings).best_split()

    assert best['split'].id == 'upper'
    assert best['score'] == 150
    assert best['reasons'] == []
    assert best['reason'] == "balanced training"


def test_ties_go_to_the_earlier_split(catalog_by_id):
    chest = SplitDefinition('a', 'A', ('chest',), ('chest',))
    back = SplitDefinition('b', 'B', ('back',), ('back',))
    split_scorer = scorer([], catalog_by_id)

    assert split_scorer.best_split([chest, back])['split'].id == 'a'
    assert split_scorer.best_split([back, chest])['split'].id == 'b'


def test_clear_winner_is_order_independent(catalog_by_id, upper_body_yesterday):
    split_scorer = scorer(upper_body_yesterday, catalog_by_id)
    splits = [s for s in DEFAULT_SETTINGS.splits if s.id != 'lower']

    for permutation in itertools.permutations(splits):
        assert split_scorer.best_split(permutation)['split'].id == 'legs'


def test_no_candidates():
    split_scorer = scorer([], {})
    with pytest.raises(ValueError):
        split_scorer.best_split([])
