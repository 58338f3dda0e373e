"""Tests for catalog queries and plan building."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import pytest

from menuplan.data.sample_catalog import SAMPLE_FOOD_ITEMS, seed_sample_catalog
from menuplan.db.connection import DatabaseConnection
from menuplan.db.queries import FoodItemQueries
from menuplan.planner.models import FoodItem, MealType
from menuplan.planner.service import (
    EmptyCatalogError,
    PlanResult,
    build_meal_plan,
    load_catalog,
)
from menuplan.profiles.body_calc import Goal, Sex, UserProfile


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        sex=Sex.MALE,
        age=30,
        weight_kg=70,
        height_cm=175,
        activity_multiplier=1.55,
        goal=Goal.MAINTAIN,
    )


class TestFoodItemQueries:
    """Tests for FoodItemQueries."""

    def test_get_all_in_insert_order(self, sample_foods) -> None:
        with sample_foods.get_connection() as conn:
            rows = FoodItemQueries.get_all_food_items(conn)

        assert len(rows) == 7
        assert rows[0]["name"] == "Nasi uduk"
        assert rows[-1]["name"] == "Pisang"

    def test_by_meal_type(self, sample_foods) -> None:
        with sample_foods.get_connection() as conn:
            rows = FoodItemQueries.get_food_items_by_meal_type(conn, "lunch")

        assert [row["name"] for row in rows] == ["Ayam bakar", "Nasi putih"]

    def test_add_and_delete(self, temp_db) -> None:
        with temp_db.get_connection() as conn:
            item_id = FoodItemQueries.add_food_item(
                conn, "Soto ayam", "lunch", 240, 18, 15, 11, "1 bowl"
            )

        with temp_db.get_connection() as conn:
            row = FoodItemQueries.get_food_item_by_id(conn, item_id)
            assert row["name"] == "Soto ayam"
            assert FoodItemQueries.delete_food_item(conn, item_id)
            assert not FoodItemQueries.delete_food_item(conn, item_id)

        assert temp_db.get_table_count("food_items") == 0

    def test_count_by_meal_type(self, sample_foods) -> None:
        with sample_foods.get_connection() as conn:
            counts = FoodItemQueries.count_by_meal_type(conn)

        assert counts == {"breakfast": 2, "dinner": 2, "lunch": 2, "snack": 1}

    def test_clear(self, sample_foods) -> None:
        with sample_foods.get_connection() as conn:
            assert FoodItemQueries.clear_food_items(conn) == 7
        assert sample_foods.get_table_count("food_items") == 0

    def test_rollback_on_error(self, temp_db) -> None:
        """A failing block leaves no partial writes behind."""
        with pytest.raises(RuntimeError):
            with temp_db.get_connection() as conn:
                FoodItemQueries.add_food_item(conn, "Apel", "snack", 95)
                raise RuntimeError("boom")

        assert temp_db.get_table_count("food_items") == 0


class TestSampleCatalog:
    """Tests for the built-in sample catalog."""

    def test_seed(self, temp_db) -> None:
        with temp_db.get_connection() as conn:
            count = seed_sample_catalog(conn)

        assert count == len(SAMPLE_FOOD_ITEMS)
        assert temp_db.get_table_count("food_items") == count

    def test_seed_twice_adds_nothing(self, temp_db) -> None:
        with temp_db.get_connection() as conn:
            seed_sample_catalog(conn)
            assert seed_sample_catalog(conn) == 0

        assert temp_db.get_table_count("food_items") == len(SAMPLE_FOOD_ITEMS)

    def test_seed_fills_in_missing_items(self, sample_foods) -> None:
        """Items already in the catalog by name and meal type are not repeated."""
        with sample_foods.get_connection() as conn:
            count = seed_sample_catalog(conn)
            names = [row["name"] for row in FoodItemQueries.get_all_food_items(conn)]

        assert count == len(SAMPLE_FOOD_ITEMS) - 7
        assert len(names) == len(set(names)) == len(SAMPLE_FOOD_ITEMS)

    def test_covers_every_slot(self) -> None:
        meal_types = {entry[1] for entry in SAMPLE_FOOD_ITEMS}
        assert meal_types == {m.value for m in MealType}


class TestLoadCatalog:
    """Tests for the database catalog source."""

    def test_loads_food_items(self, sample_foods) -> None:
        catalog = load_catalog(sample_foods)

        assert len(catalog) == 7
        assert all(isinstance(item, FoodItem) for item in catalog)
        assert catalog[0].name == "Nasi uduk"

    def test_empty_table(self, temp_db) -> None:
        assert load_catalog(temp_db) == []

    def test_query_failure_returns_empty(self, caplog) -> None:
        """A database without the table is logged and treated as empty."""
        with tempfile.TemporaryDirectory() as tmp:
            db = DatabaseConnection(Path(tmp) / "blank.db")

            with caplog.at_level(logging.ERROR, logger="menuplan.planner"):
                assert load_catalog(db) == []

        assert "Error fetching food items" in caplog.text


class TestBuildMealPlan:
    """Tests for build_meal_plan."""

    def test_builds_plan(self, profile, catalog) -> None:
        result = build_meal_plan(profile, lambda: catalog)

        assert isinstance(result, PlanResult)
        assert result.targets.tdee == 2556
        assert result.targets.target_calories == 2556
        assert result.meal_plan.item_count > 0
        assert result.summary.grand_total == sum(
            f.calories for _, items in result.meal_plan for f in items
        )

    def test_fetches_catalog_once(self, profile, catalog) -> None:
        calls = []

        def source():
            calls.append(1)
            return catalog

        build_meal_plan(profile, source)
        assert len(calls) == 1

    def test_empty_catalog_raises(self, profile) -> None:
        with pytest.raises(EmptyCatalogError):
            build_meal_plan(profile, lambda: [])

    def test_from_database(self, profile, sample_foods) -> None:
        result = build_meal_plan(profile, lambda: load_catalog(sample_foods))

        assert set(result.meal_plan.slots) == set(MealType)
        data = result.to_dict()
        assert data["targets"]["target_calories"] == 2556
        assert "meals" in data["summary"]

    def test_logs_selection(self, profile, catalog, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="menuplan.planner"):
            build_meal_plan(profile, lambda: catalog)

        assert "Selected" in caplog.text
