"""Meal selection and plan totals."""

from menuplan.planner.models import (
    LOWER_BOUND_RATIO,
    MEAL_SHARES,
    UPPER_BOUND_RATIO,
    FoodItem,
    MealPlan,
    MealType,
)
from menuplan.planner.report import PlanSummary, SlotSummary, summarize
from menuplan.planner.selector import select_meals

__all__ = [
    "LOWER_BOUND_RATIO",
    "MEAL_SHARES",
    "UPPER_BOUND_RATIO",
    "FoodItem",
    "MealPlan",
    "MealType",
    "PlanSummary",
    "SlotSummary",
    "select_meals",
    "summarize",
]
