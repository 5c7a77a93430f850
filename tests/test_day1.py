import pytest

from aocdays import day1

EXAMPLE = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"


def test_get_ticks_right_is_positive():
    assert day1.get_ticks("R48") == 48


def test_get_ticks_left_is_negative():
    assert day1.get_ticks("L5") == -5


def test_get_ticks_rejects_bad_amount():
    with pytest.raises(ValueError):
        day1.get_ticks("Rabc")


def test_get_ticks_rejects_empty():
    with pytest.raises(ValueError):
        day1.get_ticks("")


def test_part1_example():
    assert day1.part1(EXAMPLE) == 3


def test_part2_example():
    assert day1.part2(EXAMPLE) == 6


def test_part2_counts_at_least_part1():
    assert day1.part2(EXAMPLE) >= day1.part1(EXAMPLE)


def test_blank_lines_are_ignored():
    padded = "\n" + EXAMPLE + "\n\n"
    assert day1.part1(padded) == day1.part1(EXAMPLE)
    assert day1.part2(padded) == day1.part2(EXAMPLE)


def test_part2_full_turns_counted():
    assert day1.part2("R1000") == 10


def test_part1_no_rotations():
    assert day1.part1("") == 0


def test_run_prints_and_returns(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    result = day1.run(path)
    out = capsys.readouterr().out
    assert result == (day1.part1(EXAMPLE), day1.part2(EXAMPLE))
    assert f"Problem1: {result[0]}" in out
    assert f"Problem2: {result[1]}" in out