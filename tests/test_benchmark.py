import re
import time

import pytest

from melodius.benchmark import Benchmark


def test_prints_message_and_duration(capsys):
    with Benchmark("load") as bench:
        pass
    out = capsys.readouterr().out
    assert out == f"load Took: {bench.elapsed_ms}ms\n"
    assert re.fullmatch(r"load Took: \d+ms\n", out)


def test_default_message_is_empty(capsys):
    with Benchmark() as bench:
        pass
    out = capsys.readouterr().out
    assert out == f" Took: {bench.elapsed_ms}ms\n"
    assert bench.elapsed_ms >= 0


def test_enter_returns_benchmark_and_records_elapsed(capsys):
    with Benchmark("sleep") as bench:
        time.sleep(0.02)
    assert bench.elapsed_ms >= 20
    out = capsys.readouterr().out
    assert out == f"sleep Took: {bench.elapsed_ms}ms\n"


def test_elapsed_unset_inside_block(capsys):
    with Benchmark("inside") as bench:
        assert bench.elapsed_ms is None
    assert bench.elapsed_ms >= 0


def test_exception_propagates_and_timing_still_printed(capsys):
    with pytest.raises(RuntimeError, match="boom"):
        with Benchmark("failing"):
            raise RuntimeError("boom")
    assert capsys.readouterr().out.startswith("failing Took: ")