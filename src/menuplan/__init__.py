"""Daily calorie targets and greedy meal plans from a food catalog."""

__version__ = "0.1.0"
