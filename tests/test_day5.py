import pytest

from aocdays import day5
from aocdays.day5 import Range

EXAMPLE = "3-5\n10-14\n16-20\n12-18\n\n1\n5\n8\n11\n17\n32\n"


def test_example_part1():
    assert day5.part1(EXAMPLE) == 3


def test_example_part2():
    assert day5.part2(EXAMPLE) == 14


def test_parse_range():
    assert day5.parse_range("10-14") == Range(10, 14)
    assert day5.parse_range(" 3-5 ") == Range(3, 5)


def test_parse_range_rejects_non_range():
    with pytest.raises(ValueError):
        day5.parse_range("42")


@pytest.mark.parametrize(
    ("line", "expected"), [("3-5", True), ("17", False), ("", False)]
)
def test_contains_dash(line, expected):
    assert day5.contains_dash(line) is expected


def test_contains_includes_both_ends():
    r = Range(10, 14)
    assert r.contains(10)
    assert r.contains(14)
    assert r.contains(12)
    assert not r.contains(9)
    assert not r.contains(15)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (Range(1, 5), Range(5, 9), True),
        (Range(1, 9), Range(3, 4), True),
        (Range(3, 4), Range(1, 9), True),
        (Range(5, 9), Range(1, 5), True),
        (Range(1, 4), Range(5, 9), False),
        (Range(6, 9), Range(1, 5), False),
    ],
)
def test_overlaps_is_symmetric(a, b, expected):
    assert a.overlaps(b) is expected
    assert b.overlaps(a) is expected


def test_merge_covers_both():
    merged = Range(10, 14).merge(Range(12, 18))
    assert merged == Range(10, 18)
    assert merged == Range(12, 18).merge(Range(10, 14))


def test_contained_range_does_not_change_total():
    extended = "3-5\n10-14\n16-20\n12-18\n4-4\n11-13\n\n1\n"
    assert day5.part2(extended) == day5.part2(EXAMPLE)


def test_order_of_disjoint_ranges_is_irrelevant():
    forward = "1-2\n5-7\n10-12\n\n1\n"
    backward = "10-12\n5-7\n1-2\n\n1\n"
    assert day5.part2(forward) == day5.part2(backward)


def test_part1_counts_at_most_all_ids():
    ids = [line for line in EXAMPLE.split("\n\n")[1].split("\n") if line]
    assert 0 <= day5.part1(EXAMPLE) <= len(ids)


def test_no_ranges_means_nothing_fresh():
    assert day5.part1("\n1\n2\n") == 0
    assert day5.part2("\n1\n2\n") == 0


def test_run_prints_both_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    first, second = day5.run(path)
    out = capsys.readouterr().out
    assert (first, second) == (day5.part1(EXAMPLE), day5.part2(EXAMPLE))
    assert f"Day5 Problem1: {first}" in out
    assert f"Day5 Problem2: {second}" in out