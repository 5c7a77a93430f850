"""Paper rolls on a grid: count the rolls a forklift can reach."""

from __future__ import annotations

from pathlib import Path

ROLL = "@"
CROWD_LIMIT = 4

_NEIGHBOUR_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)

Position = tuple[int, int]


def _rolls(text: str) -> set[Position]:
    return {
        (row, col)
        for row, line in enumerate(text.splitlines())
        for col, ch in enumerate(line)
        if ch == ROLL
    }


def _is_accessible(rolls: set[Position], position: Position) -> bool:
    row, col = position
    crowd = sum((row + dr, col + dc) in rolls for dr, dc in _NEIGHBOUR_OFFSETS)
    return crowd < CROWD_LIMIT


def part1(text: str) -> int:
    """Count rolls with fewer than four neighbouring rolls."""
    rolls = _rolls(text)
    return sum(_is_accessible(rolls, position) for position in rolls)


def part2(text: str) -> int:
    """Repeatedly remove accessible rolls and count how many go in total."""
    rolls = _rolls(text)
    removed = 0
    while True:
        removed_this_pass = 0
        for position in sorted(rolls):
            if _is_accessible(rolls, position):
                rolls.discard(position)
                removed_this_pass += 1
        if not removed_this_pass:
            return removed
        removed += removed_this_pass


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file and print the answers."""
    text = Path(path).read_text()
    first, second = part1(text), part2(text)
    print(f"Day 4, Problem 1: {first}")
    print(f"Day 4, Problem 2: {second}")
    return first, second