"""Greedy meal selection from a food catalog.

Splits the daily calorie target across the fixed meal slots and, for each
slot, repeatedly picks the unused item whose calories best fit what is
still missing. A slot is done once it reaches 80% of its share, runs out
of items, or the best fit would push it past 120%.
"""

from __future__ import annotations

from typing import Optional, Sequence

from menuplan.planner.models import (
    LOWER_BOUND_RATIO,
    MEAL_SHARES,
    UPPER_BOUND_RATIO,
    FoodItem,
    MealPlan,
    MealType,
)


def _find_best_fit(
    candidates: Sequence[FoodItem],
    used: set[int],
    remaining: float,
) -> Optional[int]:
    """Return the position of the unused candidate closest to `remaining`.

    Ties keep the earliest candidate.
    """
    best_index = None
    best_diff = float("inf")

    for index, item in enumerate(candidates):
        if index in used:
            continue
        diff = abs(remaining - item.calories)
        if diff < best_diff:
            best_diff = diff
            best_index = index

    return best_index


def select_for_slot(
    candidates: Sequence[FoodItem],
    slot_target: float,
) -> list[FoodItem]:
    """Greedily pick items from one slot's candidates.

    Args:
        candidates: Catalog items for this slot, in catalog order
        slot_target: Calories this slot should approximate

    Returns:
        Selected items in pick order (may be empty or under target)
    """
    selected: list[FoodItem] = []
    used: set[int] = set()
    current = 0.0

    while current < slot_target * LOWER_BOUND_RATIO and len(used) < len(candidates):
        best_index = _find_best_fit(candidates, used, slot_target - current)
        if best_index is None:
            break

        item = candidates[best_index]
        if current + item.calories > slot_target * UPPER_BOUND_RATIO:
            break

        selected.append(item)
        current += item.calories
        used.add(best_index)

    return selected


def select_meals(
    catalog: Sequence[FoodItem],
    target_calories: float,
) -> MealPlan:
    """Assemble a meal plan approximating a daily calorie target.

    Algorithm, for each slot in fixed order:
    1. slot target = target_calories * slot share (30/35/30/5)
    2. Keep catalog items whose meal_type matches the slot
    3. Pick the unused item minimising |remaining - calories|
    4. Accept it only if the slot stays within 120% of its target,
       otherwise stop the slot
    5. Repeat until the slot reaches 80% of its target or runs out

    Args:
        catalog: All available food items
        target_calories: Daily calorie target

    Returns:
        MealPlan with every slot present
    """
    slots: dict[MealType, list[FoodItem]] = {}

    for meal_type, share in MEAL_SHARES.items():
        slot_target = target_calories * share
        candidates = [item for item in catalog if item.meal_type == meal_type.value]

        if not candidates:
            slots[meal_type] = []
            continue

        slots[meal_type] = select_for_slot(candidates, slot_target)

    return MealPlan(slots=slots)
