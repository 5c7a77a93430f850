"""Ingredient id ranges: check freshness and count fresh ids."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Range:
    """Inclusive range of ingredient ids."""

    low: int
    high: int

    def contains(self, num: int) -> bool:
        """True when ``num`` lies within the range, ends included."""
        return self.low <= num <= self.high

    def overlaps(self, other: Range) -> bool:
        """True when the two ranges share at least one id."""
        return self.low <= other.high and other.low <= self.high

    def merge(self, other: Range) -> Range:
        """Smallest range covering both ranges."""
        return Range(min(self.low, other.low), max(self.high, other.high))

    def __len__(self) -> int:
        return self.high - self.low + 1


def parse_range(spec: str) -> Range:
    """Parse ``low-high`` into a :class:`Range`."""
    parts = spec.strip().split("-")
    if len(parts) < 2:
        raise ValueError(f"not a range: {spec!r}")
    return Range(int(parts[0]), int(parts[1]))


def contains_dash(line: str) -> bool:
    """True when the line holds a dash, i.e. describes a range."""
    return "-" in line


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def _split_input(text: str) -> tuple[list[Range], list[str]]:
    lines = _lines(text)
    ranges_count = next(
        (i for i, line in enumerate(lines) if not contains_dash(line)), 0
    )
    ranges = [parse_range(line) for line in lines[:ranges_count]]
    return ranges, lines[ranges_count:]


def part1(text: str) -> int:
    """Count the listed ids that fall within any range."""
    ranges, ids = _split_input(text)
    numbers = [int(line) for line in ids]
    return sum(any(r.contains(num) for r in ranges) for num in numbers)


def _insert(ordered: list[Range], new: Range) -> None:
    for j, existing in enumerate(ordered):
        if new.high < existing.low:
            ordered.insert(j, new)
            return
        if new.overlaps(existing):
            merged = new.merge(existing)
            k = j + 1
            while k < len(ordered) and merged.overlaps(ordered[k]):
                merged = merged.merge(ordered.pop(k))
                # The scan moves past the range that slid into slot k.
                k += 1
            ordered[j] = merged
            return
    ordered.append(new)


def part2(text: str) -> int:
    """Count every id covered by the union of all ranges."""
    ranges, _ = _split_input(text)
    ordered: list[Range] = []
    for new in ranges:
        _insert(ordered, new)
    for left, right in zip(ordered, ordered[1:]):
        if not left.high < right.low:
            raise AssertionError(f"ranges not disjoint: {left} and {right}")
    return sum(len(r) for r in ordered)


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file and print the answers."""
    text = Path(path).read_text()
    first, second = part1(text), part2(text)
    print(f"Day5 Problem1: {first}")
    print(f"Day5 Problem2: {second}")
    return first, second