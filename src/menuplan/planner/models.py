"""Data models for food items and meal plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping, Union


class MealType(Enum):
    """Fixed meal slots, in display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


# Share of the daily calorie target given to each slot
MEAL_SHARES: dict[MealType, float] = {
    MealType.BREAKFAST: 0.30,
    MealType.LUNCH: 0.35,
    MealType.DINNER: 0.30,
    MealType.SNACK: 0.05,
}

# Acceptance band around each slot target
LOWER_BOUND_RATIO = 0.8
UPPER_BOUND_RATIO = 1.2


@dataclass(frozen=True)
class FoodItem:
    """One catalog entry. Macros are grams per serving."""

    name: str
    meal_type: str  # "breakfast", "lunch", "dinner", "snack"
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    serving_size: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "FoodItem":
        """Build a FoodItem from a catalog row or dict.

        Args:
            record: Mapping with name, meal_type, calories and optional
                protein, carbs, fat, serving_size keys

        Returns:
            FoodItem instance
        """
        keys = record.keys()

        def _num(key: str) -> float:
            value = record[key] if key in keys else None
            return float(value) if value is not None else 0.0

        serving = record["serving_size"] if "serving_size" in keys else None
        return cls(
            name=record["name"],
            meal_type=record["meal_type"],
            calories=_num("calories"),
            protein=_num("protein"),
            carbs=_num("carbs"),
            fat=_num("fat"),
            serving_size=serving or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        return {
            "name": self.name,
            "meal_type": self.meal_type,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
            "serving_size": self.serving_size,
        }


@dataclass
class MealPlan:
    """Selected food items for each meal slot.

    Every slot is always present, possibly with an empty list.
    """

    slots: dict[MealType, list[FoodItem]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.slots = {
            meal_type: list(self.slots.get(meal_type, []))
            for meal_type in MealType
        }

    def __getitem__(self, meal_type: Union[MealType, str]) -> list[FoodItem]:
        return self.slots[MealType(meal_type)]

    def __iter__(self) -> Iterator[tuple[MealType, list[FoodItem]]]:
        return iter(self.slots.items())

    @property
    def item_count(self) -> int:
        """Total number of selected items across all slots."""
        return sum(len(items) for items in self.slots.values())

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Convert to dict keyed by slot name."""
        return {
            meal_type.value: [item.to_dict() for item in items]
            for meal_type, items in self.slots.items()
        }
