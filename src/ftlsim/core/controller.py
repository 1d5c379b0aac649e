"""Simulation Controller - Orchestrates simulation runs."""

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Sequence

import aiofiles
import aiofiles.os

from ..benchmark import BenchmarkResult, run_benchmark
from ..flash.runner import RunResult, WorkloadRunner
from ..flash.workload import reference_workload
from ..storage import create_device
from ..storage.memory_backend import MemoryBlockDevice
from .config import FlashConfig, Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class SimulationRun:
    """A completed simulation run."""

    id: str
    created_at: datetime
    config: FlashConfig
    workload_size: int
    result: RunResult

    @property
    def outcome(self) -> str:
        return self.result.outcome.value


class SimulationController:
    """
    Main simulation controller.

    Runs workloads through the FTL on a worker thread and keeps the
    completed runs so they can be queried, exported or deleted.
    Every run owns its wear state; only the registry is shared.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.config = FlashConfig.from_settings(self.settings)

        self._runs: dict[str, SimulationRun] = {}
        self._lock = asyncio.Lock()
        # Serialises runs that share the file-backed device
        self._device_lock = asyncio.Lock()

        self._stats = {
            "runs_started": 0,
            "runs_completed": 0,
            "runs_exhausted": 0,
            "runs_failed": 0,
            "benchmarks": 0,
        }

    def _simulate(self, config: FlashConfig, workload: Sequence[int]) -> RunResult:
        with create_device(self.settings, config) as device:
            return WorkloadRunner(config, device).run(workload)

    async def run_simulation(
        self,
        workload: Sequence[int] | None = None,
        config: FlashConfig | None = None,
    ) -> SimulationRun:
        """
        Run one simulation.

        Args:
            workload: Logical addresses (reference corpus if omitted)
            config: Flash geometry (settings geometry if omitted)

        Returns:
            The recorded SimulationRun

        Raises:
            OSError: If the device failed during the run
        """
        config = config or self.config
        workload = list(workload) if workload is not None else list(reference_workload())

        async with self._lock:
            self._stats["runs_started"] += 1

        try:
            async with self._device_lock:
                result = await asyncio.to_thread(self._simulate, config, workload)
        except OSError:
            async with self._lock:
                self._stats["runs_failed"] += 1
            raise

        run = SimulationRun(
            id=str(uuid.uuid4()),
            created_at=datetime.utcnow(),
            config=config,
            workload_size=len(workload),
            result=result,
        )

        async with self._lock:
            self._runs[run.id] = run
            if result.exhausted:
                self._stats["runs_exhausted"] += 1
            else:
                self._stats["runs_completed"] += 1

        logger.info("Recorded run %s (%s)", run.id, run.outcome)
        return run

    async def get_run(self, run_id: str) -> SimulationRun | None:
        async with self._lock:
            return self._runs.get(run_id)

    async def list_runs(self) -> list[SimulationRun]:
        async with self._lock:
            return sorted(self._runs.values(), key=lambda r: r.created_at)

    async def delete_run(self, run_id: str) -> bool:
        """Forget a run. Returns False if it does not exist."""
        async with self._lock:
            return self._runs.pop(run_id, None) is not None

    async def run_benchmark(
        self,
        runs: int | None = None,
        parallel: bool = False,
        workload: Sequence[int] | None = None,
        config: FlashConfig | None = None,
    ) -> BenchmarkResult:
        """
        Time repeated independent runs.

        Sequential runs use the configured device. Parallel runs execute
        concurrently across runs, each on its own in-memory device.
        """
        if runs is None:
            runs = self.settings.bench_runs
        if runs < 1:
            raise ValueError(f"runs must be positive, got {runs}")
        workload = list(workload) if workload is not None else list(reference_workload())
        config = config or self.config

        if parallel:

            def one_run() -> RunResult:
                device = MemoryBlockDevice(config.block_size, config.num_blocks)
                return WorkloadRunner(config, device).run(workload)

            start = time.perf_counter()
            results = await asyncio.gather(
                *(asyncio.to_thread(one_run) for _ in range(runs))
            )
            result = BenchmarkResult(
                runs=runs,
                total_seconds=time.perf_counter() - start,
                last=results[-1],
                parallel=True,
            )
        else:
            async with self._device_lock:
                result = await asyncio.to_thread(
                    run_benchmark,
                    config,
                    workload,
                    runs,
                    lambda: create_device(self.settings, config),
                )

        async with self._lock:
            self._stats["benchmarks"] += 1

        return result

    async def export_run(self, run_id: str) -> Path | None:
        """
        Write a run's statistics and block table as JSON.

        Returns:
            Path of the report, or None if the run does not exist
        """
        run = await self.get_run(run_id)
        if run is None:
            return None

        results_dir = self.settings.results_dir
        await aiofiles.os.makedirs(results_dir, exist_ok=True)

        path = results_dir / f"{run.id}.json"
        report = {
            "id": run.id,
            "created_at": run.created_at.isoformat(),
            "outcome": run.outcome,
            "config": {
                "num_blocks": run.config.num_blocks,
                "num_logical": run.config.num_logical,
                "block_size": run.config.block_size,
                "lifespan": run.config.lifespan,
            },
            "requests": {
                "total": run.result.requests_total,
                "processed": run.result.requests_processed,
                "skipped": run.result.requests_skipped,
                "exhausted_at": run.result.exhausted_at,
            },
            "statistics": run.result.statistics.to_dict(),
            "blocks": run.result.state.snapshot(),
        }

        async with aiofiles.open(path, "w") as f:
            await f.write(json.dumps(report, indent=2))

        logger.info("Exported run %s to %s", run.id, path)
        return path

    async def get_stats(self) -> dict:
        """Get controller statistics."""
        async with self._lock:
            return {
                **self._stats,
                "runs_stored": len(self._runs),
                "device_backend": self.settings.device_backend,
                "num_blocks": self.config.num_blocks,
                "num_logical": self.config.num_logical,
                "block_size": self.config.block_size,
                "lifespan": self.config.lifespan,
            }


# Singleton controller instance
_controller: SimulationController | None = None


async def get_controller() -> SimulationController:
    """Get or create the simulation controller singleton."""
    global _controller
    if _controller is None:
        _controller = SimulationController()
    return _controller
