"""Plan building: energy targets, catalog fetch, selection and summary."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from menuplan.db.connection import DatabaseConnection
from menuplan.db.queries import FoodItemQueries
from menuplan.planner.models import FoodItem, MealPlan
from menuplan.planner.report import PlanSummary, summarize
from menuplan.planner.selector import select_meals
from menuplan.profiles.body_calc import EnergyTargets, UserProfile, calculate_targets

logger = logging.getLogger("menuplan.planner")

CatalogSource = Callable[[], Sequence[FoodItem]]


class EmptyCatalogError(RuntimeError):
    """Raised when there are no food items to plan with."""


@dataclass
class PlanResult:
    """Everything needed to render one plan."""

    profile: UserProfile
    targets: EnergyTargets
    meal_plan: MealPlan
    summary: PlanSummary

    def to_dict(self) -> dict[str, Any]:
        return {
            "targets": self.targets.to_dict(),
            "meal_plan": self.meal_plan.to_dict(),
            "summary": self.summary.to_dict(),
        }


def load_catalog(db: DatabaseConnection) -> list[FoodItem]:
    """Fetch every food item from the database.

    A failed query is logged and treated as an empty catalog.
    """
    try:
        with db.get_connection() as conn:
            rows = FoodItemQueries.get_all_food_items(conn)
    except sqlite3.Error as e:
        logger.error("Error fetching food items from %s: %s", db.db_path, e)
        return []

    return [FoodItem.from_record(row) for row in rows]


def build_meal_plan(
    profile: UserProfile,
    catalog_source: CatalogSource,
) -> PlanResult:
    """Compute targets for a profile and select meals for them.

    Args:
        profile: User body metrics and goal
        catalog_source: Callable returning the food catalog snapshot

    Returns:
        PlanResult with targets, plan and totals

    Raises:
        EmptyCatalogError: If the catalog has no food items
    """
    targets = calculate_targets(profile)
    logger.debug(
        "bmr=%.2f tdee=%d target=%d goal=%s",
        targets.bmr, targets.tdee, targets.target_calories, targets.goal,
    )

    catalog = list(catalog_source())
    if not catalog:
        raise EmptyCatalogError(
            "The food catalog is empty. Add food items before planning."
        )

    meal_plan = select_meals(catalog, targets.target_calories)
    summary = summarize(meal_plan)
    logger.info(
        "Selected %d of %d catalog items (%.0f of %d kcal)",
        meal_plan.item_count, len(catalog), summary.grand_total, targets.target_calories,
    )

    return PlanResult(
        profile=profile,
        targets=targets,
        meal_plan=meal_plan,
        summary=summary,
    )
