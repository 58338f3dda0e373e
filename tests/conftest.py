"""Pytest fixtures for menuplan tests."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from menuplan.db.connection import DatabaseConnection
from menuplan.planner.models import FoodItem


@pytest.fixture
def temp_db():
    """Create a temporary database with schema."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    db = DatabaseConnection(db_path)
    db.initialize_schema()

    yield db

    # Cleanup
    db_path.unlink(missing_ok=True)


@pytest.fixture
def sample_foods(temp_db):
    """Populate database with a small catalog."""
    with temp_db.get_connection() as conn:
        # (name, meal_type, calories, protein, carbs, fat, serving_size)
        foods = [
            ("Nasi uduk", "breakfast", 350, 7, 55, 11, "1 plate"),
            ("Telur rebus", "breakfast", 78, 6, 1, 5, "1 egg"),
            ("Ayam bakar", "lunch", 290, 30, 3, 17, "1 piece"),
            ("Nasi putih", "lunch", 204, 4, 45, 0.4, "1 cup"),
            ("Ikan bakar", "dinner", 250, 35, 2, 11, "1 fillet"),
            ("Sayur asem", "dinner", 90, 3, 15, 2, "1 bowl"),
            ("Pisang", "snack", 105, 1, 27, 0.4, "1 medium"),
        ]
        conn.executemany(
            "INSERT INTO food_items (name, meal_type, calories, protein, carbs, fat, serving_size) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            foods,
        )

    return temp_db


@pytest.fixture
def catalog() -> list[FoodItem]:
    """In-memory catalog covering every meal slot."""
    return [
        FoodItem("Oatmeal", "breakfast", 300, 10, 50, 6, "1 bowl"),
        FoodItem("Toast", "breakfast", 200, 6, 30, 4, "2 slices"),
        FoodItem("Boiled egg", "breakfast", 150, 12, 1, 10, "2 eggs"),
        FoodItem("Chicken rice", "lunch", 500, 30, 60, 12, "1 plate"),
        FoodItem("Salad", "lunch", 150, 4, 10, 9, "1 bowl"),
        FoodItem("Grilled fish", "dinner", 400, 40, 5, 20, "1 fillet"),
        FoodItem("Steamed rice", "dinner", 200, 4, 45, 0.5, "1 cup"),
        FoodItem("Banana", "snack", 105, 1, 27, 0.4, "1 medium"),
    ]
