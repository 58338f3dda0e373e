"""Built-in sample catalog for trying the planner without importing data.

Values are per serving and rounded; they are illustrative, not reference
nutrition data.
"""

from __future__ import annotations

import sqlite3

from menuplan.db.queries import FoodItemQueries

# (name, meal_type, calories, protein, carbs, fat, serving_size)
SAMPLE_FOOD_ITEMS: list[tuple[str, str, float, float, float, float, str]] = [
    # Breakfast
    ("Nasi uduk", "breakfast", 350, 7, 55, 11, "1 plate"),
    ("Bubur ayam", "breakfast", 280, 12, 40, 8, "1 bowl"),
    ("Roti gandum with egg", "breakfast", 250, 13, 28, 9, "2 slices"),
    ("Oatmeal with banana", "breakfast", 220, 6, 42, 4, "1 bowl"),
    ("Telur rebus", "breakfast", 78, 6, 1, 5, "1 egg"),
    # Lunch
    ("Nasi putih", "lunch", 204, 4, 45, 0.4, "1 cup"),
    ("Ayam bakar", "lunch", 290, 30, 3, 17, "1 piece"),
    ("Gado-gado", "lunch", 320, 14, 25, 19, "1 plate"),
    ("Soto ayam", "lunch", 240, 18, 15, 11, "1 bowl"),
    ("Tempe goreng", "lunch", 160, 10, 8, 10, "2 pieces"),
    # Dinner
    ("Ikan bakar", "dinner", 250, 35, 2, 11, "1 fillet"),
    ("Nasi merah", "dinner", 216, 5, 45, 2, "1 cup"),
    ("Sayur asem", "dinner", 90, 3, 15, 2, "1 bowl"),
    ("Pepes tahu", "dinner", 150, 12, 6, 9, "2 pieces"),
    ("Capcay", "dinner", 180, 8, 14, 10, "1 plate"),
    # Snack
    ("Pisang", "snack", 105, 1, 27, 0.4, "1 medium"),
    ("Apel", "snack", 95, 0.5, 25, 0.3, "1 medium"),
    ("Yogurt plain", "snack", 100, 6, 8, 5, "1 cup"),
]


def seed_sample_catalog(conn: sqlite3.Connection) -> int:
    """Insert the sample items not already in the catalog.

    Items are matched on (name, meal_type), so seeding twice adds nothing.

    Returns:
        Number of items inserted
    """
    existing = {
        (row["name"], row["meal_type"])
        for row in FoodItemQueries.get_all_food_items(conn)
    }

    inserted = 0
    for name, meal_type, calories, protein, carbs, fat, serving in SAMPLE_FOOD_ITEMS:
        if (name, meal_type) in existing:
            continue
        FoodItemQueries.add_food_item(
            conn,
            name=name,
            meal_type=meal_type,
            calories=calories,
            protein=protein,
            carbs=carbs,
            fat=fat,
            serving_size=serving,
        )
        inserted += 1
    return inserted
