"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from menuplan.config import configure_logging, get_settings
from menuplan.config.settings import default_config_path
from menuplan.db import get_db
from menuplan.db.queries import FoodItemQueries
from menuplan.planner.models import MealType
from menuplan.planner.service import EmptyCatalogError, build_meal_plan, load_catalog
from menuplan.profiles.body_calc import (
    Goal,
    Sex,
    UserProfile,
    calculate_targets,
    resolve_activity_multiplier,
)

app = typer.Typer(
    help="Daily calorie targets and meal plans from a food catalog",
    no_args_is_help=True,
)
console = Console()

foods_app = typer.Typer(help="Manage the food catalog")
config_app = typer.Typer(help="Show or create the settings file")

app.add_typer(foods_app, name="foods")
app.add_typer(config_app, name="config")

logger = logging.getLogger("menuplan.cli")

OUTPUT_FORMATS = ("table", "json", "markdown")

SKIP_REASONS = {
    "skipped_invalid_name": "a blank name",
    "skipped_invalid_meal_type": "unknown meal type",
    "skipped_invalid_calories": "missing or negative calories",
    "skipped_negative_macros": "negative protein, carbs or fat",
}


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def parse_meal_type(value: str) -> MealType:
    try:
        return MealType(value.strip().lower())
    except ValueError:
        valid = ", ".join(m.value for m in MealType)
        fail(f"Unknown meal type '{value}'. Use one of: {valid}")


def build_profile(
    sex: str,
    age: int,
    weight: float,
    height: float,
    activity: Optional[str],
    goal: Optional[str],
) -> UserProfile:
    """Validate CLI options and build a UserProfile.

    Missing activity/goal fall back to the configured defaults.
    """
    settings = get_settings()

    try:
        sex_enum = Sex(sex.strip().lower())
    except ValueError:
        fail(f"Unknown sex '{sex}'. Use male or female")

    try:
        goal_enum = Goal((goal or settings.defaults.goal).strip().lower())
    except ValueError:
        fail(f"Unknown goal '{goal}'. Use one of: {', '.join(g.value for g in Goal)}")

    try:
        multiplier = resolve_activity_multiplier(
            activity or settings.defaults.activity_level
        )
    except ValueError as e:
        fail(str(e))

    return UserProfile(
        sex=sex_enum,
        age=age,
        weight_kg=weight,
        height_cm=height,
        activity_multiplier=multiplier,
        goal=goal_enum,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
) -> None:
    """Daily calorie targets and meal plans from a food catalog."""
    settings = get_settings()
    level = "DEBUG" if verbose else settings.logging.level
    configure_logging(level, settings.logging.format)


# ============================================================================
# Main commands
# ============================================================================


@app.command()
def init(
    db_path: Optional[Path] = typer.Option(
        None, "--db", help="Custom database path"
    ),
    seed: bool = typer.Option(
        False, "--seed", help="Load the built-in sample catalog"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON"
    ),
) -> None:
    """Create the database and optionally load sample food items."""
    from menuplan.data.sample_catalog import SAMPLE_FOOD_ITEMS, seed_sample_catalog
    from menuplan.db.connection import DatabaseConnection

    db = DatabaseConnection(db_path) if db_path else get_db()
    db.initialize_schema()

    seeded = 0
    if seed:
        with db.get_connection() as conn:
            seeded = seed_sample_catalog(conn)
    already_present = len(SAMPLE_FOOD_ITEMS) - seeded if seed else 0

    total = db.get_table_count("food_items")
    logger.info("Initialized %s (%d food items)", db.db_path, total)

    if json_output:
        output_json({
            "success": True,
            "command": "init",
            "data": {
                "db_path": str(db.db_path),
                "seeded": seeded,
                "already_present": already_present,
                "food_items": total,
            },
            "human_summary": f"Database ready with {total} food items",
        })
        return

    console.print(f"[green]Database ready at:[/green] {db.db_path}")
    if seed:
        console.print(f"  Sample food items added: {seeded}")
        if already_present:
            console.print(f"  [yellow]Already in catalog, skipped: {already_present}[/yellow]")
    console.print(f"  Food items in catalog: {total}")


@app.command()
def targets(
    sex: str = typer.Option(..., "--sex", "-s", help="male or female"),
    age: int = typer.Option(..., "--age", "-a", help="Age in years"),
    weight: float = typer.Option(..., "--weight", "-w", help="Weight in kg"),
    height: float = typer.Option(..., "--height", help="Height in cm"),
    activity: Optional[str] = typer.Option(
        None, "--activity", help="Activity level name or multiplier (e.g. 1.55)"
    ),
    goal: Optional[str] = typer.Option(
        None, "--goal", "-g", help="lose, maintain or gain"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Calculate BMR, TDEE and the daily calorie target."""
    profile = build_profile(sex, age, weight, height, activity, goal)
    result = calculate_targets(profile)

    if json_output:
        output_json({
            "success": True,
            "command": "targets",
            "data": result.to_dict(),
            "human_summary": f"Target {result.target_calories} kcal/day",
        })
        return

    console.print(result.summary())


@app.command()
def plan(
    sex: str = typer.Option(..., "--sex", "-s", help="male or female"),
    age: int = typer.Option(..., "--age", "-a", help="Age in years"),
    weight: float = typer.Option(..., "--weight", "-w", help="Weight in kg"),
    height: float = typer.Option(..., "--height", help="Height in cm"),
    activity: Optional[str] = typer.Option(
        None, "--activity", help="Activity level name or multiplier (e.g. 1.55)"
    ),
    goal: Optional[str] = typer.Option(
        None, "--goal", "-g", help="lose, maintain or gain"
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="table, json or markdown"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write json/markdown output to a file"
    ),
) -> None:
    """Build a meal plan for the given body metrics."""
    from menuplan.export.formatters import format_result

    fmt = (output_format or get_settings().defaults.output_format).lower()
    if fmt not in OUTPUT_FORMATS:
        fail(f"Unknown output format '{fmt}'. Use one of: {', '.join(OUTPUT_FORMATS)}")
    if output and fmt == "table":
        fail("--output needs --format json or markdown; table output goes to the terminal")

    profile = build_profile(sex, age, weight, height, activity, goal)
    db = get_db()

    try:
        result = build_meal_plan(profile, lambda: load_catalog(db))
    except EmptyCatalogError as e:
        console.print(f"[red]{e}[/red]")
        console.print("Run: [cyan]menuplan init --seed[/cyan] or [cyan]menuplan foods import <file>[/cyan]")
        raise typer.Exit(1)

    text = format_result(result, fmt, console)
    if text is None:
        return

    if output:
        output.write_text(text)
        console.print(f"[green]Plan written to {output}[/green]")
    else:
        print(text)


# ============================================================================
# Foods commands
# ============================================================================


@foods_app.callback()
def foods_callback() -> None:
    """Ensure the catalog table exists before any foods command."""
    get_db().initialize_schema()


@foods_app.command("list")
def foods_list(
    meal_type: Optional[str] = typer.Option(
        None, "--meal-type", "-m", help="Only show one meal type"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List food items in the catalog."""
    db = get_db()
    with db.get_connection() as conn:
        if meal_type:
            rows = FoodItemQueries.get_food_items_by_meal_type(
                conn, parse_meal_type(meal_type).value
            )
        else:
            rows = FoodItemQueries.get_all_food_items(conn)
        counts = FoodItemQueries.count_by_meal_type(conn)

    if json_output:
        output_json({
            "success": True,
            "command": "foods list",
            "data": {
                "items": [dict(row) for row in rows],
                "total": len(rows),
                "counts_by_meal_type": counts,
            },
            "human_summary": f"{len(rows)} food items",
        })
        return

    if not rows:
        console.print("[yellow]No food items found[/yellow]")
        return

    table = Table(title="Food Catalog")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Meal", style="blue")
    table.add_column("kcal", justify="right")
    table.add_column("P/C/F (g)", justify="right")
    table.add_column("Serving", style="dim")

    for row in rows:
        table.add_row(
            str(row["id"]),
            row["name"],
            row["meal_type"],
            f"{row['calories']:.0f}",
            f"{row['protein'] or 0:.1f}/{row['carbs'] or 0:.1f}/{row['fat'] or 0:.1f}",
            row["serving_size"] or "",
        )

    console.print(table)
    per_meal = ", ".join(
        f"{meal.value}: {counts.get(meal.value, 0)}" for meal in MealType
    )
    console.print(f"[dim]Showing {len(rows)} items ({per_meal} in catalog)[/dim]")


@foods_app.command("add")
def foods_add(
    name: str = typer.Argument(..., help="Food name"),
    meal_type: str = typer.Option(..., "--meal-type", "-m", help="breakfast, lunch, dinner or snack"),
    calories: float = typer.Option(..., "--calories", "-c", help="kcal per serving", min=0),
    protein: float = typer.Option(0.0, "--protein", help="Protein grams per serving", min=0),
    carbs: float = typer.Option(0.0, "--carbs", help="Carbohydrate grams per serving", min=0),
    fat: float = typer.Option(0.0, "--fat", help="Fat grams per serving", min=0),
    serving: Optional[str] = typer.Option(None, "--serving", help="Serving size, e.g. '1 plate'"),
) -> None:
    """Add a food item to the catalog."""
    meal = parse_meal_type(meal_type)
    db = get_db()
    with db.get_connection() as conn:
        item_id = FoodItemQueries.add_food_item(
            conn, name, meal.value, calories, protein, carbs, fat, serving
        )
    console.print(f"[green]Added {name} ({meal.value}, {calories:.0f} kcal) as #{item_id}[/green]")


@foods_app.command("remove")
def foods_remove(
    item_id: int = typer.Argument(..., help="Food item ID"),
) -> None:
    """Remove a food item from the catalog."""
    db = get_db()
    with db.get_connection() as conn:
        deleted = FoodItemQueries.delete_food_item(conn, item_id)

    if not deleted:
        fail(f"No food item with ID {item_id}")
    console.print(f"[green]Removed food item #{item_id}[/green]")


@foods_app.command("import")
def foods_import(
    path: Path = typer.Argument(..., help="CSV or YAML file of food items"),
    replace: bool = typer.Option(
        False, "--replace", help="Delete existing items before importing"
    ),
) -> None:
    """Import food items from a CSV or YAML file."""
    from menuplan.data.catalog_loader import CatalogImporter

    db = get_db()
    try:
        with db.get_connection() as conn:
            if replace:
                removed = FoodItemQueries.clear_food_items(conn)
                logger.info("Removed %d existing food items", removed)
            counts = CatalogImporter(conn).load_file(path)
    except (FileNotFoundError, ValueError) as e:
        fail(str(e))

    console.print(f"[green]Imported {counts['loaded']} food items[/green]")
    for key, reason in SKIP_REASONS.items():
        if counts[key]:
            console.print(f"[yellow]Skipped {counts[key]} rows with {reason}[/yellow]")


# ============================================================================
# Config commands
# ============================================================================


@config_app.command("show")
def config_show() -> None:
    """Print the active settings as YAML."""
    import yaml

    console.print(yaml.dump(get_settings().to_dict(), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Where to write config.yaml"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a settings file with the current values."""
    target = path or default_config_path()
    if target.exists() and not force:
        fail(f"{target} already exists (use --force to overwrite)")

    written = get_settings().save(target)
    console.print(f"[green]Settings written to {written}[/green]")


if __name__ == "__main__":
    app()
