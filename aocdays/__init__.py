"""Solutions to five daily puzzles, with a command line entry point."""

__version__ = "0.1.0"
__all__ = ["cli", "day1", "day2", "day3", "day4", "day5"]