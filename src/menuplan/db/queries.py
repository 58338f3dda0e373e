"""Query functions for the food catalog."""

from __future__ import annotations

import sqlite3
from typing import Optional


class FoodItemQueries:
    """Query functions for food_items table."""

    @staticmethod
    def get_all_food_items(conn: sqlite3.Connection) -> list[sqlite3.Row]:
        """Get every food item in insertion order.

        Args:
            conn: Database connection

        Returns:
            List of food item rows
        """
        query = """
            SELECT id, name, meal_type, calories, protein, carbs, fat, serving_size
            FROM food_items
            ORDER BY id
        """
        return conn.execute(query).fetchall()

    @staticmethod
    def get_food_items_by_meal_type(
        conn: sqlite3.Connection, meal_type: str
    ) -> list[sqlite3.Row]:
        """Get food items for one meal slot."""
        query = """
            SELECT id, name, meal_type, calories, protein, carbs, fat, serving_size
            FROM food_items
            WHERE meal_type = ?
            ORDER BY id
        """
        return conn.execute(query, (meal_type,)).fetchall()

    @staticmethod
    def get_food_item_by_id(
        conn: sqlite3.Connection, item_id: int
    ) -> Optional[sqlite3.Row]:
        query = "SELECT * FROM food_items WHERE id = ?"
        return conn.execute(query, (item_id,)).fetchone()

    @staticmethod
    def add_food_item(
        conn: sqlite3.Connection,
        name: str,
        meal_type: str,
        calories: float,
        protein: float = 0.0,
        carbs: float = 0.0,
        fat: float = 0.0,
        serving_size: Optional[str] = None,
    ) -> int:
        """Insert a food item.

        Args:
            conn: Database connection
            name: Display name
            meal_type: "breakfast", "lunch", "dinner" or "snack"
            calories: kcal per serving
            protein: Grams of protein per serving
            carbs: Grams of carbohydrate per serving
            fat: Grams of fat per serving
            serving_size: Free-text serving description

        Returns:
            New item ID
        """
        query = """
            INSERT INTO food_items
            (name, meal_type, calories, protein, carbs, fat, serving_size)
            VALUES (?, ?, ?, ?, ?, ?, ?)
        """
        cursor = conn.execute(
            query, (name, meal_type, calories, protein, carbs, fat, serving_size)
        )
        return cursor.lastrowid

    @staticmethod
    def delete_food_item(conn: sqlite3.Connection, item_id: int) -> bool:
        """Delete a food item.

        Returns:
            True if a row was deleted
        """
        cursor = conn.execute("DELETE FROM food_items WHERE id = ?", (item_id,))
        return cursor.rowcount > 0

    @staticmethod
    def clear_food_items(conn: sqlite3.Connection) -> int:
        """Delete every food item.

        Returns:
            Number of rows deleted
        """
        return conn.execute("DELETE FROM food_items").rowcount

    @staticmethod
    def count_by_meal_type(conn: sqlite3.Connection) -> dict[str, int]:
        """Count food items per meal type."""
        query = """
            SELECT meal_type, COUNT(*) as n
            FROM food_items
            GROUP BY meal_type
            ORDER BY meal_type
        """
        return {row["meal_type"]: row["n"] for row in conn.execute(query).fetchall()}
