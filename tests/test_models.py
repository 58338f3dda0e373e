"""Tests for food item and meal plan models."""

from __future__ import annotations

import pytest

from menuplan.planner.models import MEAL_SHARES, FoodItem, MealPlan, MealType


class TestFoodItem:
    """Tests for FoodItem."""

    def test_from_record_full(self) -> None:
        record = {
            "name": "Gado-gado",
            "meal_type": "lunch",
            "calories": 320,
            "protein": 14,
            "carbs": 25,
            "fat": 19,
            "serving_size": "1 plate",
        }
        item = FoodItem.from_record(record)

        assert item == FoodItem("Gado-gado", "lunch", 320.0, 14.0, 25.0, 19.0, "1 plate")

    def test_from_record_defaults(self) -> None:
        """Missing or null macros become 0; missing serving becomes ''."""
        item = FoodItem.from_record(
            {"name": "Apel", "meal_type": "snack", "calories": 95, "fat": None}
        )

        assert item.protein == 0.0
        assert item.fat == 0.0
        assert item.serving_size == ""

    def test_from_sqlite_row(self, sample_foods) -> None:
        with sample_foods.get_connection() as conn:
            row = conn.execute("SELECT * FROM food_items WHERE name = 'Pisang'").fetchone()

        item = FoodItem.from_record(row)
        assert item.meal_type == "snack"
        assert item.calories == 105
        assert item.serving_size == "1 medium"

    def test_is_read_only(self) -> None:
        item = FoodItem("Apel", "snack", 95)
        with pytest.raises(AttributeError):
            item.calories = 0


class TestMealPlan:
    """Tests for MealPlan."""

    def test_all_slots_present(self) -> None:
        item = FoodItem("Apel", "snack", 95)
        plan = MealPlan(slots={MealType.SNACK: [item]})

        assert list(plan.slots) == list(MealType)
        assert plan[MealType.SNACK] == [item]
        assert plan["breakfast"] == []
        assert plan.item_count == 1

    def test_unknown_slot_key(self) -> None:
        with pytest.raises(ValueError):
            MealPlan()["brunch"]

    def test_to_dict(self) -> None:
        item = FoodItem("Apel", "snack", 95)
        data = MealPlan(slots={MealType.SNACK: [item]}).to_dict()

        assert list(data) == ["breakfast", "lunch", "dinner", "snack"]
        assert data["snack"][0]["name"] == "Apel"


def test_meal_shares_sum_to_one() -> None:
    assert sum(MEAL_SHARES.values()) == pytest.approx(1.0)
    assert list(MEAL_SHARES) == list(MealType)
