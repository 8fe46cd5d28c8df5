import re

import pytest

from daalab.benchmark import CaseTiming, case_inputs, format_timings, main, time_sort
from daalab.sorting import insertion_sort

NAMES = ["Best Case", "Worst Case", "Average Case"]


def test_case_names_and_shapes():
    cases = case_inputs(6, seed=1)
    assert [name for name, _ in cases] == NAMES
    best, worst, average = (data for _, data in cases)
    assert best == list(range(6))
    assert worst == list(reversed(range(6)))
    assert len(average) == 6
    assert all(0 <= value < 6 for value in average)


def test_average_case_is_reproducible():
    first = dict(case_inputs(50, seed=7))
    second = dict(case_inputs(50, seed=7))
    other = dict(case_inputs(50, seed=8))
    assert len(first["Average Case"]) == 50
    assert all(0 <= value < 50 for value in first["Average Case"])
    assert first["Average Case"] == second["Average Case"]
    assert first["Average Case"] != other["Average Case"]


def test_case_inputs_rejects_empty():
    with pytest.raises(ValueError):
        case_inputs(0)


def test_time_sort_reports_every_case():
    timings = time_sort(insertion_sort, 20, seed=3)
    assert [t.case for t in timings] == NAMES
    assert all(t.seconds >= 0 for t in timings)


def test_format_timings():
    text = format_timings([CaseTiming("Best Case", 0.5), CaseTiming("Worst Case", 1.25)])
    assert text.splitlines() == ["Best Case: 0.500000 seconds", "Worst Case: 1.250000 seconds"]


@pytest.mark.parametrize("algorithm", ["insertion", "merge", "quick", "heap"])
def test_main_prints_three_lines(algorithm, capsys):
    assert main([algorithm, "--size", "16", "--seed", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    for name, line in zip(NAMES, lines):
        assert re.fullmatch(rf"{name}: \d+\.\d{{6}} seconds", line)


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit) as excinfo:
        main(["merge", "--size", "0"])
    assert excinfo.value.code == 2