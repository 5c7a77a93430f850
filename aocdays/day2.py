"""Product id ranges: sum the ids made of repeated digit patterns."""

from __future__ import annotations

from pathlib import Path


def _parse_bounds(spec: str) -> tuple[int, int]:
    parts = spec.strip().split("-")
    if len(parts) < 2:
        raise ValueError(f"not a range: {spec!r}")
    return int(parts[0]), int(parts[1])


def _specs(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def sum_range(spec: str) -> int:
    """Sum ids in ``low-high`` whose digits are one half repeated twice."""
    low, high = _parse_bounds(spec)
    total = 0
    for number in range(low, high + 1):
        length = len(str(number))
        if length % 2:
            continue
        divisor = 10 ** (length // 2)
        if number // divisor == number % divisor:
            total += number
    return total


def factors(num: int) -> list[int]:
    """Divisors of ``num`` from 1 up to ``num // 2``, ascending."""
    return [i for i in range(1, num // 2 + 1) if num % i == 0]


def check_pattern(digits: str, window: int) -> bool:
    """True when ``digits`` is the same block of ``window`` characters repeated."""
    return all(
        digits[i - window : i] == digits[i : i + window]
        for i in range(window, len(digits) - window + 1, window)
    )


def sum_range2(spec: str) -> int:
    """Sum ids in ``low-high`` made of any block repeated at least twice."""
    low, high = _parse_bounds(spec)
    total = 0
    for number in range(low, high + 1):
        digits = str(number)
        if any(check_pattern(digits, window) for window in factors(len(digits))):
            total += number
    return total


def part1(text: str) -> int:
    """Sum of doubled ids over all comma separated ranges."""
    return sum(sum_range(spec) for spec in _specs(text))


def part2(text: str) -> int:
    """Sum of repeated-pattern ids over all comma separated ranges."""
    return sum(sum_range2(spec) for spec in _specs(text))


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file and print the answers."""
    text = Path(path).read_text()
    first, second = part1(text), part2(text)
    print(f"Problem1: {first}")
    print(f"Problem2: {second}")
    return first, second