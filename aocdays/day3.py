"""Battery banks: pick digits that form the largest joltage."""

from __future__ import annotations

from pathlib import Path

PICK_COUNT = 12


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def find_max_combination(line: str) -> int:
    """Largest two-digit number formed by two digits of ``line`` in order."""
    digits = [int(ch) for ch in line]
    highest = 0
    next_highest = 0
    for i, digit in enumerate(digits):
        previous = highest
        highest = max(highest, digit)
        if i + 1 < len(digits):
            if highest != previous:
                next_highest = digits[i + 1]
            else:
                next_highest = max(next_highest, digits[i + 1])
        else:
            highest = previous
    return highest * 10 + next_highest


def find_max_combination2(line: str) -> int:
    """Largest twelve-digit number formed by digits of ``line`` in order."""
    digits = [int(ch) for ch in line]
    length = len(digits)
    if length < PICK_COUNT:
        raise ValueError(f"line needs at least {PICK_COUNT} digits: {line!r}")
    chosen = []
    idx = 0
    for picked in range(PICK_COUNT):
        best = digits[idx]
        best_index = 0
        for j in range(idx + 1, length):
            if length - j < PICK_COUNT - picked:
                break
            if digits[j] > best:
                best = digits[j]
                best_index = j
        chosen.append(best)
        idx = best_index + 1 if best_index > idx else idx + 1
    return int("".join(map(str, chosen)))


def part1(text: str) -> int:
    """Sum of the best two-digit picks over all lines."""
    return sum(find_max_combination(line) for line in _lines(text))


def part2(text: str) -> int:
    """Sum of the best twelve-digit picks over all lines."""
    return sum(find_max_combination2(line) for line in _lines(text))


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file and print the answers."""
    text = Path(path).read_text()
    first, second = part1(text), part2(text)
    print(f"Problem1: {first}")
    print(f"Problem2: {second}")
    return first, second