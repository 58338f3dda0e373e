"""Load food catalog entries from CSV or YAML files."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pandas as pd
import yaml

from menuplan.db.queries import FoodItemQueries
from menuplan.planner.models import MealType

VALID_MEAL_TYPES = {meal_type.value for meal_type in MealType}


class CatalogImporter:
    """Handles importing food items into the catalog."""

    REQUIRED_COLUMNS = ["name", "meal_type", "calories"]
    MACRO_COLUMNS = ["protein", "carbs", "fat"]
    OPTIONAL_COLUMNS = MACRO_COLUMNS + ["serving_size"]

    def __init__(self, conn: sqlite3.Connection):
        """Initialize the importer.

        Args:
            conn: SQLite database connection
        """
        self.conn = conn

    def load_file(self, path: Path) -> dict[str, int]:
        """Load food items from a .csv, .yaml or .yml file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the extension is unsupported or columns are missing
        """
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")

        suffix = path.suffix.lower()
        if suffix == ".csv":
            return self.load_from_csv(path)
        if suffix in (".yaml", ".yml"):
            return self.load_from_yaml(path)
        raise ValueError(
            f"Unsupported catalog file type '{suffix}'. Use .csv, .yaml or .yml"
        )

    def load_from_csv(self, csv_path: Path) -> dict[str, int]:
        """Load food items from a CSV file.

        CSV format:
            name,meal_type,calories,protein,carbs,fat,serving_size
            Nasi uduk,breakfast,350,7,55,11,1 plate

        Args:
            csv_path: Path to the CSV file

        Returns:
            Dict with counts: loaded, skipped_invalid_name,
            skipped_invalid_meal_type, skipped_invalid_calories,
            skipped_negative_macros

        Raises:
            ValueError: If required columns are missing
        """
        df = pd.read_csv(csv_path)
        return self.load_from_frame(df)

    def load_from_yaml(self, yaml_path: Path) -> dict[str, int]:
        """Load food items from a YAML list of mappings.

        Accepts either a top-level list or a mapping with a `foods` key.
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or []

        if isinstance(data, dict):
            data = data.get("foods", [])

        return self.load_from_frame(pd.DataFrame(data))

    def load_from_frame(self, df: pd.DataFrame) -> dict[str, int]:
        """Validate and insert rows from a DataFrame.

        Rows are skipped when the name is blank, the meal type is unknown,
        calories are missing or negative, or any macro value is negative.
        """
        missing = set(self.REQUIRED_COLUMNS) - set(df.columns)
        if missing:
            raise ValueError(
                f"Missing required columns: {sorted(missing)}. "
                f"Required columns are: {self.REQUIRED_COLUMNS}"
            )

        loaded = 0
        skipped_invalid_name = 0
        skipped_invalid_meal_type = 0
        skipped_invalid_calories = 0
        skipped_negative_macros = 0

        for _, row in df.iterrows():
            name = self._optional_text(row, "name")
            if not name:
                skipped_invalid_name += 1
                continue

            meal_type = str(row["meal_type"]).strip().lower()
            if meal_type not in VALID_MEAL_TYPES:
                skipped_invalid_meal_type += 1
                continue

            calories = pd.to_numeric(row["calories"], errors="coerce")
            if pd.isna(calories) or calories < 0:
                skipped_invalid_calories += 1
                continue

            macros = {column: self._optional_number(row, column) for column in self.MACRO_COLUMNS}
            if any(value < 0 for value in macros.values()):
                skipped_negative_macros += 1
                continue

            FoodItemQueries.add_food_item(
                self.conn,
                name=name,
                meal_type=meal_type,
                calories=float(calories),
                serving_size=self._optional_text(row, "serving_size"),
                **macros,
            )
            loaded += 1

        self.conn.commit()

        return {
            "loaded": loaded,
            "skipped_invalid_name": skipped_invalid_name,
            "skipped_invalid_meal_type": skipped_invalid_meal_type,
            "skipped_invalid_calories": skipped_invalid_calories,
            "skipped_negative_macros": skipped_negative_macros,
        }

    @staticmethod
    def _optional_number(row: pd.Series, column: str) -> float:
        if column not in row.index:
            return 0.0
        value = pd.to_numeric(row[column], errors="coerce")
        return 0.0 if pd.isna(value) else float(value)

    @staticmethod
    def _optional_text(row: pd.Series, column: str):
        if column not in row.index or pd.isna(row[column]):
            return None
        return str(row[column]).strip() or None
