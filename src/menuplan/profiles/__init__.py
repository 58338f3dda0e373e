"""Body metrics and daily energy targets."""

from menuplan.profiles.body_calc import (
    ACTIVITY_MULTIPLIERS,
    ActivityLevel,
    EnergyTargets,
    Goal,
    Sex,
    UserProfile,
    calculate_bmr,
    calculate_target_calories,
    calculate_targets,
    calculate_tdee,
    resolve_activity_multiplier,
)

__all__ = [
    "ACTIVITY_MULTIPLIERS",
    "ActivityLevel",
    "EnergyTargets",
    "Goal",
    "Sex",
    "UserProfile",
    "calculate_bmr",
    "calculate_target_calories",
    "calculate_targets",
    "calculate_tdee",
    "resolve_activity_multiplier",
]
