"""Energy calculator for daily calorie targets.

Calculates BMR (Basal Metabolic Rate), TDEE (Total Daily Energy Expenditure)
and a goal-adjusted daily calorie target from body metrics.

Uses the Mifflin-St Jeor equation for BMR and the usual activity
multipliers for TDEE. Nothing in here validates ranges: zero or negative
inputs flow through the arithmetic unchanged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Sex(Enum):
    """Biological sex for BMR calculation."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity level presets for TDEE calculation."""
    SEDENTARY = "sedentary"          # Little or no exercise
    LIGHT = "light"                  # Light exercise 1-3 days/week
    MODERATE = "moderate"            # Moderate exercise 3-5 days/week
    ACTIVE = "active"                # Hard exercise 6-7 days/week
    VERY_ACTIVE = "very_active"      # Very hard exercise, physical job


class Goal(Enum):
    """Body weight goal."""
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


# Activity level multipliers (Harris-Benedict activity factors)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# Calorie adjustments by goal (deficit or surplus from TDEE)
GOAL_ADJUSTMENTS = {
    Goal.LOSE: -500,
    Goal.MAINTAIN: 0,
    Goal.GAIN: 300,
}

GOAL_LABELS = {
    Goal.LOSE: "Lose weight",
    Goal.MAINTAIN: "Maintain weight",
    Goal.GAIN: "Gain weight",
}

SexLike = Union[Sex, str]
GoalLike = Union[Goal, str, None]


@dataclass
class UserProfile:
    """Body metrics and goal collected from the user."""

    sex: SexLike
    age: int
    weight_kg: float
    height_cm: float
    activity_multiplier: float
    goal: GoalLike = Goal.MAINTAIN


@dataclass
class EnergyTargets:
    """Calculated energy values for one profile."""

    bmr: float                  # Basal Metabolic Rate (unrounded)
    tdee: int                   # Total Daily Energy Expenditure
    target_calories: int        # TDEE adjusted for the goal
    goal: str

    @property
    def adjustment(self) -> int:
        """Calories above/below TDEE."""
        return self.target_calories - self.tdee

    @property
    def goal_label(self) -> str:
        """Display text for the goal."""
        goal = _coerce_goal(self.goal)
        return GOAL_LABELS[goal] if goal else self.goal

    def summary(self) -> str:
        """Human-readable summary of targets."""
        return "\n".join([
            f"Goal: {self.goal_label}",
            f"BMR: {round_half_up(self.bmr)} kcal/day",
            f"TDEE: {self.tdee} kcal/day",
            f"Target: {self.target_calories} kcal/day ({self.adjustment:+d} from TDEE)",
        ])

    def to_dict(self) -> dict:
        """Convert to dict for JSON output."""
        return {
            "bmr": round(self.bmr, 2),
            "tdee": self.tdee,
            "target_calories": self.target_calories,
            "adjustment": self.adjustment,
            "goal": self.goal,
        }


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going towards +infinity."""
    return int(math.floor(value + 0.5))


def _is_male(sex: SexLike) -> bool:
    return sex is Sex.MALE or sex == Sex.MALE.value


def _coerce_goal(goal: GoalLike) -> Optional[Goal]:
    if isinstance(goal, Goal):
        return goal
    try:
        return Goal(goal)
    except ValueError:
        return None


def calculate_bmr(
    sex: SexLike,
    weight_kg: float,
    height_cm: float,
    age: float,
) -> float:
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Args:
        sex: Biological sex. Anything other than male uses the female formula.
        weight_kg: Weight in kilograms
        height_cm: Height in centimetres
        age: Age in years

    Returns:
        BMR in calories per day
    """
    base = (10 * weight_kg) + (6.25 * height_cm) - (5 * age)
    if _is_male(sex):
        return base + 5
    return base - 161


def calculate_tdee(
    bmr: float,
    activity_multiplier: Union[float, str],
) -> int:
    """Calculate Total Daily Energy Expenditure.

    Args:
        bmr: Basal Metabolic Rate
        activity_multiplier: Activity factor, as a number or numeric string

    Returns:
        TDEE in calories per day, rounded to the nearest integer
    """
    return round_half_up(bmr * float(activity_multiplier))


def calculate_target_calories(tdee: int, goal: GoalLike) -> int:
    """Adjust TDEE for the goal.

    Unknown goals leave TDEE unchanged.
    """
    goal_enum = _coerce_goal(goal)
    if goal_enum is None:
        return tdee
    return tdee + GOAL_ADJUSTMENTS[goal_enum]


def calculate_targets(profile: UserProfile) -> EnergyTargets:
    """Calculate BMR, TDEE and target calories for a profile.

    Args:
        profile: User body metrics and goal

    Returns:
        EnergyTargets with all three values
    """
    bmr = calculate_bmr(
        profile.sex, profile.weight_kg, profile.height_cm, profile.age
    )
    tdee = calculate_tdee(bmr, profile.activity_multiplier)
    target = calculate_target_calories(tdee, profile.goal)

    goal = profile.goal.value if isinstance(profile.goal, Goal) else str(profile.goal)
    return EnergyTargets(bmr=bmr, tdee=tdee, target_calories=target, goal=goal)


def resolve_activity_multiplier(value: Union[str, float]) -> float:
    """Turn an activity level name or a numeric factor into a multiplier.

    Args:
        value: "sedentary", "light", "moderate", "active", "very_active",
            or a number such as 1.55

    Returns:
        Activity multiplier

    Raises:
        ValueError: If value is neither a known level nor a number
    """
    if isinstance(value, (int, float)):
        return float(value)

    key = value.strip().lower().replace("-", "_")
    try:
        return ACTIVITY_MULTIPLIERS[ActivityLevel(key)]
    except ValueError:
        pass

    try:
        return float(key)
    except ValueError:
        levels = ", ".join(level.value for level in ActivityLevel)
        raise ValueError(
            f"Unknown activity level '{value}'. Use one of: {levels}, or a number"
        ) from None
