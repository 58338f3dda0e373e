"""Per-slot and daily totals for a meal plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from menuplan.planner.models import FoodItem, MealPlan, MealType


@dataclass
class SlotSummary:
    """Totals for one non-empty meal slot."""

    meal_type: MealType
    items: list[FoodItem]
    calories: float
    protein: float
    carbs: float
    fat: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "meal_type": self.meal_type.value,
            "calories": round(self.calories, 1),
            "protein": round(self.protein, 1),
            "carbs": round(self.carbs, 1),
            "fat": round(self.fat, 1),
            "items": [item.to_dict() for item in self.items],
        }


@dataclass
class PlanSummary:
    """Display-ready totals for a whole meal plan."""

    slots: list[SlotSummary] = field(default_factory=list)

    @property
    def per_slot_totals(self) -> dict[MealType, float]:
        """Calories per non-empty slot, in display order."""
        return {slot.meal_type: slot.calories for slot in self.slots}

    @property
    def grand_total(self) -> float:
        """Calories across all slots."""
        return sum(slot.calories for slot in self.slots)

    def to_dict(self) -> dict[str, Any]:
        return {
            "meals": [slot.to_dict() for slot in self.slots],
            "total_calories": round(self.grand_total, 1),
        }


def summarize(meal_plan: MealPlan) -> PlanSummary:
    """Sum calories and macros per slot, skipping empty slots.

    Args:
        meal_plan: Output of select_meals

    Returns:
        PlanSummary in breakfast, lunch, dinner, snack order
    """
    slots = []
    for meal_type in MealType:
        items = meal_plan[meal_type]
        if not items:
            continue

        slots.append(
            SlotSummary(
                meal_type=meal_type,
                items=list(items),
                calories=sum(item.calories for item in items),
                protein=sum(item.protein for item in items),
                carbs=sum(item.carbs for item in items),
                fat=sum(item.fat for item in items),
            )
        )

    return PlanSummary(slots=slots)
