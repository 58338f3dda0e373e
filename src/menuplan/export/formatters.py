"""Output formatters for meal plan results."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from menuplan.planner.models import FoodItem, MealType
from menuplan.planner.service import PlanResult
from menuplan.profiles.body_calc import round_half_up

MEAL_TITLES = {
    MealType.BREAKFAST: "Breakfast",
    MealType.LUNCH: "Lunch",
    MealType.DINNER: "Dinner",
    MealType.SNACK: "Snack",
}


def _fmt_number(value: float) -> str:
    """Drop the decimal part of whole numbers."""
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.1f}"


def _macros(item: FoodItem) -> str:
    return (
        f"P: {_fmt_number(item.protein)}g | "
        f"C: {_fmt_number(item.carbs)}g | "
        f"F: {_fmt_number(item.fat)}g"
    )


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, result: PlanResult) -> None:
        """Print calorie targets and the meal plan to the console."""
        targets = result.targets
        header_lines = [
            f"[bold]MEAL PLAN[/bold] - {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            "",
            f"BMR (Basal Metabolic Rate): [cyan]{round_half_up(targets.bmr)}[/cyan] kcal/day",
            f"TDEE (Total Daily Energy Expenditure): [cyan]{targets.tdee}[/cyan] kcal/day",
            f"Daily target ({targets.goal_label}): "
            f"[bold green]{targets.target_calories}[/bold green] kcal/day",
        ]
        self.console.print(Panel("\n".join(header_lines), title="Calorie Targets"))

        if not result.summary.slots:
            self.console.print("[yellow]No food items fit the calorie targets.[/yellow]")

        for slot in result.summary.slots:
            table = Table(title=MEAL_TITLES[slot.meal_type])
            table.add_column("Food", style="cyan", max_width=40)
            table.add_column("Serving", style="dim")
            table.add_column("kcal", justify="right")
            table.add_column("Macros", justify="right")

            for item in slot.items:
                table.add_row(
                    item.name,
                    item.serving_size,
                    _fmt_number(item.calories),
                    _macros(item),
                )

            table.add_row(
                "[bold]TOTAL[/bold]",
                "",
                f"[bold]{_fmt_number(slot.calories)}[/bold]",
                "",
                style="bold",
            )
            self.console.print(table)

        self.console.print(
            f"[bold]Total daily calories:[/bold] "
            f"[bold green]{_fmt_number(result.summary.grand_total)}[/bold green] kcal"
        )


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format(self, result: PlanResult) -> str:
        data = {
            "timestamp": datetime.now().isoformat(),
            **result.to_dict(),
        }
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format results as Markdown."""

    def format(self, result: PlanResult) -> str:
        targets = result.targets
        lines = [
            "# Daily Meal Plan",
            "",
            f"**BMR:** {round_half_up(targets.bmr)} kcal/day",
            f"**TDEE:** {targets.tdee} kcal/day",
            f"**Target ({targets.goal_label}):** {targets.target_calories} kcal/day",
        ]

        for slot in result.summary.slots:
            lines.extend([
                "",
                f"## {MEAL_TITLES[slot.meal_type]} ({_fmt_number(slot.calories)} kcal)",
                "",
                "| Food | Serving | kcal | Macros |",
                "|------|---------|------|--------|",
            ])
            for item in slot.items:
                lines.append(
                    f"| {item.name} | {item.serving_size} | "
                    f"{_fmt_number(item.calories)} | {_macros(item)} |"
                )

        lines.extend([
            "",
            f"**Total daily calories:** {_fmt_number(result.summary.grand_total)} kcal",
        ])
        return "\n".join(lines)


def format_result(
    result: PlanResult,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format a plan result in the specified format.

    Args:
        result: Plan result to format
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        TableFormatter(console).format(result)
        return None
    elif output_format == "json":
        return JSONFormatter().format(result)
    elif output_format == "markdown":
        return MarkdownFormatter().format(result)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
