"""Tests for SimulationController."""

import json

import pytest

from ftlsim.core import controller as controller_module
from ftlsim.core.config import FlashConfig, Settings
from ftlsim.core.controller import SimulationController
from ftlsim.storage.memory_backend import MemoryBlockDevice


class TestSimulationController:
    """Tests for SimulationController class."""

    @pytest.fixture
    def controller(self, tmp_path):
        """Create a controller on in-memory devices."""
        settings = Settings(device_backend="memory", results_dir=tmp_path / "results")
        return SimulationController(settings)

    async def test_reference_run(self, controller):
        run = await controller.run_simulation()

        assert run.outcome == "completed"
        assert run.workload_size == 220
        assert run.result.statistics.total_physical_writes == 220
        assert await controller.get_run(run.id) is run

    async def test_custom_geometry_exhausts(self, controller):
        config = FlashConfig(num_blocks=4, num_logical=2, block_size=16, lifespan=2)

        run = await controller.run_simulation(workload=[0, 0, 0, 0, 1, 1, 1, 1, 0], config=config)

        assert run.outcome == "exhausted"
        assert run.result.exhausted_at == 8

        stats = await controller.get_stats()
        assert stats["runs_exhausted"] == 1
        assert stats["runs_completed"] == 0

    async def test_list_and_delete(self, controller):
        first = await controller.run_simulation(workload=[1, 2])
        second = await controller.run_simulation(workload=[3])

        runs = await controller.list_runs()
        assert [r.id for r in runs] == [first.id, second.id]

        assert await controller.delete_run(first.id) is True
        assert await controller.delete_run(first.id) is False
        assert await controller.get_run(first.id) is None

    async def test_device_failure(self, controller, monkeypatch):
        def failing_device(settings, config):
            return MemoryBlockDevice(config.block_size, config.num_blocks, fail_offsets={0})

        monkeypatch.setattr(controller_module, "create_device", failing_device)

        with pytest.raises(OSError):
            await controller.run_simulation()

        stats = await controller.get_stats()
        assert stats["runs_failed"] == 1
        assert stats["runs_stored"] == 0

    async def test_sequential_benchmark(self, controller):
        result = await controller.run_benchmark(runs=3)

        assert result.runs == 3
        assert result.parallel is False
        assert result.total_seconds >= 0
        assert result.last.statistics.total_physical_writes == 220

    async def test_parallel_benchmark(self, controller):
        """Test that concurrent independent runs give the same final wear."""
        result = await controller.run_benchmark(runs=4, parallel=True)
        single = await controller.run_simulation()

        assert result.parallel is True
        assert result.last.state.snapshot() == single.result.state.snapshot()

    async def test_benchmark_rejects_zero_runs(self, controller):
        with pytest.raises(ValueError):
            await controller.run_benchmark(runs=0)

    async def test_export_run(self, controller):
        run = await controller.run_simulation()

        path = await controller.export_run(run.id)

        report = json.loads(path.read_text())
        assert report["id"] == run.id
        assert report["outcome"] == "completed"
        assert report["statistics"]["total_physical_writes"] == 220
        assert len(report["blocks"]["write_counts"]) == 512

    async def test_export_unknown_run(self, controller):
        assert await controller.export_run("missing") is None
