# aocdays

Solutions to five daily programming puzzles. Each day reads a puzzle input
file and prints the answers to its two problems.

## Installation

```
pip install .
```

## Command line

```
aoc <day> <input_file>
```

`<day>` is a number from 1 to 5. For example:

```
aoc 1 input.txt
```

This prints the answers to both problems of day 1. The same entry point can
also be started as `python -m aocdays.cli <day> <input_file>`.

If you give fewer than two arguments, the command prints
`Usage: aoc <day> <input_file>` and exits with status 1. If the day has no
solution, it prints `Day N is not implemented yet.` and exits with status 0.
The day is read from the leading integer of the first argument. When that
argument does not start with a number, the day counts as 0.

## Library use

Each day lives in its own module, `aocdays.day1` through `aocdays.day5`.
Every module has these functions:

- `part1(text)` returns the answer to the first problem for the given input
  text.
- `part2(text)` returns the answer to the second problem.
- `run(path)` reads the file at `path`, prints both answers and returns them
  as a tuple.

```python
from aocdays import day3

with open("input.txt") as fh:
    text = fh.read()

print(day3.part1(text), day3.part2(text))
```

The modules also expose their helpers:

- `day1.get_ticks(code)` turns a rotation such as `R48` or `L5` into a signed
  tick count.
- `day2.sum_range(spec)` and `day2.sum_range2(spec)` sum the repeated-pattern
  ids in a `low-high` range.
- `day2.factors(num)` lists the divisors of `num` from 1 up to `num // 2`.
- `day2.check_pattern(digits, window)` reports whether `digits` is a single
  block of `window` characters repeated.
- `day3.find_max_combination(line)` returns the best two-digit pick from a
  line.
- `day3.find_max_combination2(line)` returns the best twelve-digit pick. It
  raises `ValueError` for lines shorter than twelve digits.
- `day5.Range` is an inclusive id range with `contains`, `overlaps`, `merge`
  and `len()`.
- `day5.parse_range(spec)` parses `low-high` into a `Range`.
- `day5.contains_dash(line)` reports whether a line holds a dash.

Malformed input raises `ValueError`.

## Tests

```
pip install .[test]
pytest
```