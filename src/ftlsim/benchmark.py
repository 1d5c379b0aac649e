"""Benchmark - Repeated independent simulation runs."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from .core.config import FlashConfig
from .flash.runner import RunResult, WorkloadRunner
from .storage.backend import BlockDevice

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timing of a batch of runs."""

    runs: int
    total_seconds: float
    last: RunResult | None = None
    parallel: bool = False

    @property
    def per_run_seconds(self) -> float:
        return self.total_seconds / self.runs if self.runs else 0.0


def run_benchmark(
    config: FlashConfig,
    workload: Sequence[int],
    runs: int,
    device_factory: Callable[[], BlockDevice],
) -> BenchmarkResult:
    """
    Run the same workload several times and time the batch.

    Every run gets a fresh wear state and a device from device_factory,
    which is closed when the run ends.
    """
    if runs < 1:
        raise ValueError(f"runs must be positive, got {runs}")

    last = None
    start = time.perf_counter()

    for _ in range(runs):
        with device_factory() as device:
            last = WorkloadRunner(config, device).run(workload)

    elapsed = time.perf_counter() - start
    logger.info("Benchmark: %d runs in %.6f s", runs, elapsed)

    return BenchmarkResult(runs=runs, total_seconds=elapsed, last=last)
