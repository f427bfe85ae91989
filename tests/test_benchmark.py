# Date        : 2026-10-18
# File Name   : test_benchmark.py
import re

import pandas as pd
import pytest

from benchmark import (SEPARATOR, check_agreement, do_sum_all_ways, run_benchmark,
                       show_result, summarize, time_method)
from parallel_summer import ParallelSummer

RESULT_LINE = re.compile(r"^(\w+) =\t(-?\d+) in (\d+\.\d{2}) ms$")


def test_time_method_keeps_result_and_reports_non_negative_time():
    calls = []

    def counting_sum(array):
        calls.append(1)
        return sum(array)

    total, elapsed_ms = time_method(counting_sum, [1, 2, 3], runs=3)
    assert total == 6
    assert elapsed_ms >= 0
    assert len(calls) == 3


def test_show_result_line(capsys):
    summer = ParallelSummer(2)
    record = show_result(summer.thread_sum, [1, 2, 3, 4], count=4)

    line = capsys.readouterr().out.strip()
    match = RESULT_LINE.match(line)
    assert match
    assert match.group(1) == "thread_sum"
    assert match.group(2) == "10"
    assert record["method"] == "thread_sum"
    assert record["count"] == 4
    assert record["sum"] == 10


def test_do_sum_all_ways_output(capsys):
    records = do_sum_all_ways(ParallelSummer(4), 1000, seed=7)
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Calculating the sum for 1000 elements:"
    assert lines[1] == ""
    names = [RESULT_LINE.match(line).group(1) for line in lines[2:6]]
    assert names == ["simple_sum", "thread_sum", "task_sum", "parallel_query_sum"]
    assert lines[6] == SEPARATOR == "_" * 50

    assert len({r["sum"] for r in records}) == 1


def test_do_sum_all_ways_quiet(capsys):
    do_sum_all_ways(ParallelSummer(2), 10, verbose=False)
    assert capsys.readouterr().out == ""


def test_run_benchmark_returns_all_results(capsys):
    results = run_benchmark(ParallelSummer(3), [0, 50, 1000], seed=1)
    out = capsys.readouterr().out

    assert list(results.columns) == ["round", "method", "count", "sum", "elapsed_ms"]
    assert len(results) == 12
    assert (results[results["count"] == 0]["sum"] == 0).all()
    assert "Elapsed time (ms) per method:" in out


def test_repeated_size_without_seed_is_checked_per_round(capsys):
    # no seed: each round draws its own array, so totals are compared per round
    results = run_benchmark(ParallelSummer(4), [50, 50])
    out = capsys.readouterr().out

    assert results["round"].tolist() == [0] * 4 + [1] * 4
    assert (results.groupby("round")["sum"].nunique() == 1).all()
    assert out.count("Calculating the sum for 50 elements:") == 2

    table = summarize(results)
    assert table.columns.tolist() == [50, 50]
    assert table.shape == (4, 2)


def test_summarize_keeps_run_order():
    results = pd.DataFrame([
        {"round": 0, "method": "thread_sum", "count": 10, "sum": 1, "elapsed_ms": 2.0},
        {"round": 0, "method": "simple_sum", "count": 10, "sum": 1, "elapsed_ms": 1.0},
        {"round": 1, "method": "thread_sum", "count": 20, "sum": 3, "elapsed_ms": 4.0},
        {"round": 1, "method": "simple_sum", "count": 20, "sum": 3, "elapsed_ms": 3.0},
    ])
    table = summarize(results)

    assert table.index.tolist() == ["thread_sum", "simple_sum"]
    assert table.columns.tolist() == [10, 20]
    assert table.loc["simple_sum", 20] == 3.0


def test_check_agreement_passes_when_totals_match():
    results = pd.DataFrame([
        {"round": 0, "method": "simple_sum", "count": 5, "sum": 15, "elapsed_ms": 0.1},
        {"round": 0, "method": "task_sum",   "count": 5, "sum": 15, "elapsed_ms": 0.2},
        {"round": 1, "method": "simple_sum", "count": 5, "sum": 22, "elapsed_ms": 0.1},
        {"round": 1, "method": "task_sum",   "count": 5, "sum": 22, "elapsed_ms": 0.2},
    ])
    check_agreement(results)


def test_check_agreement_raises_on_mismatch():
    results = pd.DataFrame([
        {"round": 0, "method": "simple_sum", "count": 5, "sum": 15, "elapsed_ms": 0.1},
        {"round": 0, "method": "task_sum",   "count": 5, "sum": 15, "elapsed_ms": 0.2},
        {"round": 1, "method": "simple_sum", "count": 5, "sum": 15, "elapsed_ms": 0.1},
        {"round": 1, "method": "task_sum",   "count": 5, "sum": 14, "elapsed_ms": 0.2},
    ])
    with pytest.raises(RuntimeError, match=r"round\(s\) \[1\]"):
        check_agreement(results)


def test_run_benchmark_detects_a_broken_method():
    class BrokenSummer(ParallelSummer):
        def broken_sum(self, array):
            return self.simple_sum(array) + 1

        def methods(self):
            return [self.simple_sum, self.broken_sum]

    with pytest.raises(RuntimeError):
        run_benchmark(BrokenSummer(2), [10], verbose=False)
