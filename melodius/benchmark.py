"""Wall-clock timing of a block of code."""

from __future__ import annotations

import time


class Benchmark:
    """Context manager that prints how long its block took, in milliseconds.

    On exit it prints ``"<msg> Took: <n>ms"`` and keeps the value in
    :attr:`elapsed_ms`.
    """

    def __init__(self, msg: str = "") -> None:
        self.msg = msg
        self.elapsed_ms: int | None = None
        self._start_ns = time.perf_counter_ns()

    def __enter__(self) -> Benchmark:
        self._start_ns = time.perf_counter_ns()
        self.elapsed_ms = None
        return self

    def __exit__(self, *args) -> bool:
        self.elapsed_ms = (time.perf_counter_ns() - self._start_ns) // 1_000_000
        print(f"{self.msg} Took: {self.elapsed_ms}ms", flush=True)
        return False