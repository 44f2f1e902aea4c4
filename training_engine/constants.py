"""
Training Constants
Static tables used by the recommendation engine
"""

from .models import SplitDefinition

# RPE -> reps in reserve
RPE_TO_RIR = {
    10: 0,
    9: 1,
    8: 2,
    7: 3,
    6: 4,
    5: 5,
}
DEFAULT_RIR = 4

WEIGHT_INCREMENT_KG = 2.5
MIN_WEIGHT_KG = 2.5

# Weekly set-equivalent targets per muscle
MUSCLE_VOLUME_TARGETS = {
    'chest': {'min': 10, 'max': 20},
    'back': {'min': 10, 'max': 20},
    'shoulders': {'min': 8, 'max': 16},
    'quadriceps': {'min': 8, 'max': 14},
    'hamstrings': {'min': 6, 'max': 12},
    'glutes': {'min': 6, 'max': 12},
    'calves': {'min': 6, 'max': 12},
    'biceps': {'min': 6, 'max': 12},
    'triceps': {'min': 6, 'max': 12},
    'forearms': {'min': 4, 'max': 8},
    'core': {'min': 6, 'max': 12},
    # Legacy coarse groups
    'legs': {'min': 12, 'max': 20},
    'arms': {'min': 8, 'max': 16},
}
DEFAULT_VOLUME_TARGET = {'min': 10, 'max': 20}

# Hours of rest before a muscle is considered recovered
RECOVERY_HOURS = {
    'chest': 48,
    'back': 48,
    'shoulders': 48,
    'quadriceps': 72,
    'hamstrings': 72,
    'glutes': 72,
    'calves': 48,
    'biceps': 48,
    'triceps': 48,
    'forearms': 24,
    'core': 24,
    'legs': 72,
    'arms': 48,
}
DEFAULT_RECOVERY_HOURS = 48

# Secondary muscles of a compound movement count as half a set
INDIRECT_VOLUME_FACTOR = 0.5

VOLUME_WINDOW_DAYS = 7
STALE_AFTER_DAYS = 5

COMPOUND_EXERCISES = frozenset({
    'default_bench_press',
    'default_incline_bench_press',
    'default_deadlift',
    'default_barbell_row',
    'default_squat',
    'default_front_squat',
    'default_overhead_press',
    'default_pull_up',
    'default_push_up',
    'default_dumbbell_press',
    'default_leg_press',
    'default_romanian_deadlift',
    'default_cable_row',
    'default_lat_pulldown',
    'default_lunge',
})

# Evaluated in this order; the first split wins a tie
SPLITS = (
    SplitDefinition(
        id='push',
        name='Push Day',
        muscles=('chest', 'shoulders', 'triceps'),
        categories=('chest', 'shoulders', 'arms'),
    ),
    SplitDefinition(
        id='pull',
        name='Pull Day',
        muscles=('back', 'biceps'),
        categories=('back', 'arms'),
    ),
    SplitDefinition(
        id='legs',
        name='Leg Day',
        muscles=('quadriceps', 'hamstrings', 'glutes', 'calves'),
        categories=('legs',),
    ),
    SplitDefinition(
        id='upper',
        name='Upper Body',
        muscles=('chest', 'back', 'shoulders', 'biceps', 'triceps'),
        categories=('chest', 'back', 'shoulders', 'arms'),
    ),
    SplitDefinition(
        id='lower',
        name='Lower Body + Core',
        muscles=('quadriceps', 'hamstrings', 'glutes', 'core'),
        categories=('legs', 'core'),
    ),
)

# Muscles reported by the volume status overview, in display order
TRACKED_MUSCLES = (
    ('chest', 'Chest'),
    ('back', 'Back'),
    ('shoulders', 'Shoulders'),
    ('quadriceps', 'Quadriceps'),
    ('hamstrings', 'Hamstrings'),
    ('glutes', 'Glutes'),
    ('biceps', 'Biceps'),
    ('triceps', 'Triceps'),
    ('core', 'Core'),
)

# Name fragments that mark an arms exercise as belonging to a push or pull day
PUSH_ARM_KEYWORDS = ('tricep', 'dip', 'pushdown')
PULL_ARM_KEYWORDS = ('bicep', 'curl')
