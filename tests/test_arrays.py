import random

import pytest

from daalab.arrays import DuplicateStats, duplicate_stats, prefix_sums, second_extremes


def test_second_extremes_basic():
    assert second_extremes([5, 1, 9, 3]) == (3, 5)


def test_second_extremes_two_elements():
    assert second_extremes([7, 2]) == (7, 2)


def test_second_extremes_duplicates_count_separately():
    assert second_extremes([4, 4]) == (4, 4)
    assert second_extremes([1, 1, 8]) == (1, 1)


def test_second_extremes_handles_negative_values():
    assert second_extremes([-3, -7, -1, -5]) == (-5, -3)


def test_second_extremes_matches_order_statistics():
    rng = random.Random(1234)
    for _ in range(50):
        values = [rng.randint(-100, 100) for _ in range(rng.randint(2, 30))]
        ordered = sorted(values)
        assert second_extremes(values) == (ordered[1], ordered[-2])


@pytest.mark.parametrize("values", [[], [42]])
def test_second_extremes_requires_two_elements(values):
    with pytest.raises(ValueError):
        second_extremes(values)


def test_second_extremes_accepts_generator():
    assert second_extremes(x for x in [10, 30, 20]) == (20, 20)


def test_prefix_sums_pinned_example():
    assert prefix_sums([1, 2, 3, 4]) == [1, 3, 6, 10]


def test_prefix_sums_invariants():
    rng = random.Random(99)
    values = [rng.randint(-50, 50) for _ in range(40)]
    sums = prefix_sums(values)
    assert len(sums) == len(values)
    assert sums[0] == values[0]
    assert sums[-1] == sum(values)
    recovered = [sums[0]] + [b - a for a, b in zip(sums, sums[1:])]
    assert recovered == values


def test_prefix_sums_empty():
    assert prefix_sums([]) == []


def test_duplicate_stats_example():
    stats = duplicate_stats([1, 2, 2, 3, 3, 3, 4])
    assert stats == DuplicateStats(duplicate_count=2, most_repeated=3, max_frequency=3)


def test_duplicate_stats_tie_prefers_first_seen():
    stats = duplicate_stats([9, 5, 5, 9])
    assert stats.most_repeated == 9
    assert stats.max_frequency == 2
    assert stats.duplicate_count == 2


def test_duplicate_stats_no_duplicates():
    stats = duplicate_stats([4, 8, 15])
    assert stats.duplicate_count == 0
    assert stats.most_repeated == 4
    assert stats.max_frequency == 1


def test_duplicate_stats_empty():
    stats = duplicate_stats([])
    assert stats.most_repeated is None
    assert stats.max_frequency == 0
    assert stats.duplicate_count == 0


def test_duplicate_stats_frequency_matches_count():
    rng = random.Random(7)
    values = [rng.randint(0, 10) for _ in range(60)]
    stats = duplicate_stats(values)
    assert values.count(stats.most_repeated) == stats.max_frequency
    assert all(values.count(v) <= stats.max_frequency for v in values)
    assert stats.duplicate_count == len({v for v in values if values.count(v) > 1})