"""Dial rotations: count how often the dial points at zero."""

from __future__ import annotations

from pathlib import Path

START_POSITION = 50
DIAL_SIZE = 100


def _c_rem(value: int, divisor: int) -> int:
    """Remainder that takes the sign of the dividend (truncating division)."""
    rem = abs(value) % abs(divisor)
    return rem if value >= 0 else -rem


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def get_ticks(code: str) -> int:
    """Turn a rotation such as ``R48`` or ``L5`` into a signed tick count."""
    if not code:
        raise ValueError("empty rotation code")
    direction, amount = code[0], int(code[1:])
    return amount if direction == "R" else -amount


def part1(text: str) -> int:
    """Count the rotations that leave the dial exactly at zero."""
    current = START_POSITION
    zeros = 0
    for line in _lines(text):
        current += _c_rem(get_ticks(line), DIAL_SIZE)
        current = _c_rem(current, DIAL_SIZE)
        if current == 0:
            zeros += 1
    return zeros


def part2(text: str) -> int:
    """Count every time the dial passes or lands on zero."""
    current = START_POSITION
    zeros = 0
    for line in _lines(text):
        previous = current
        ticks = get_ticks(line)
        zeros += abs(ticks) // DIAL_SIZE
        current += _c_rem(ticks, DIAL_SIZE)
        if (current >= DIAL_SIZE or current <= 0) and previous != 0:
            zeros += 1
        if current < 0:
            current += DIAL_SIZE
        elif current >= DIAL_SIZE:
            current -= DIAL_SIZE
        if not 0 <= current < DIAL_SIZE:
            raise AssertionError(f"dial position out of range: {current}")
    return zeros


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file and print the answers."""
    text = Path(path).read_text()
    first, second = part1(text), part2(text)
    print(f"Problem1: {first}")
    print(f"Problem2: {second}")
    return first, second