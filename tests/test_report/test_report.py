"""Tests for report formatting."""

from ftlsim.benchmark import BenchmarkResult
from ftlsim.core.config import FlashConfig
from ftlsim.flash.runner import WorkloadRunner
from ftlsim.flash.wear_state import WearState
from ftlsim.flash.workload import reference_workload
from ftlsim.report import format_benchmark, format_block_table, format_report
from ftlsim.storage.memory_backend import MemoryBlockDevice


def run(config, workload):
    device = MemoryBlockDevice(config.block_size, config.num_blocks)
    return WorkloadRunner(config, device).run(workload)


class TestReport:
    """Report text tests."""

    def test_block_table(self):
        table = format_block_table([1] * 10)
        rows = table.splitlines()

        assert len(rows) == 2
        assert rows[0].startswith("  0:1    1:1")
        assert rows[1] == "  8:1    9:1"

    def test_reference_report(self):
        report = format_report(run(FlashConfig(), reference_workload()))

        assert "Total logical writes : 220" in report
        assert "Total physical writes: 220" in report
        assert "Dead blocks          : 0" in report
        assert "min=0  max=1  avg=0.43" in report
        assert "Avg first 256 blocks : 0.86" in report
        assert "Avg last 256 blocks  : 0.00" in report
        assert "Block writes:" in report
        assert "exhausted" not in report

    def test_exhausted_report(self):
        config = FlashConfig(num_blocks=4, num_logical=2, block_size=16, lifespan=2)

        report = format_report(run(config, [0, 0, 0, 0, 1, 1, 1, 1, 0, -1]), show_blocks=False)

        assert "Block writes:" not in report
        assert "Dead blocks          : 4" in report
        assert "Flash exhausted at request 8" in report

    def test_even_verdict(self):
        report = format_report(run(FlashConfig(), reference_workload()))

        assert "max - min = 1: writes are evenly distributed." in report

    def test_uneven_verdict(self):
        config = FlashConfig(num_blocks=4, num_logical=2, block_size=16, lifespan=5)
        state = WearState(config)
        state.blocks[0].write_count = 3
        device = MemoryBlockDevice(config.block_size, config.num_blocks)

        result = WorkloadRunner(config, device).run([0], state=state)
        report = format_report(result)

        assert "max - min = 3: writes are unevenly distributed." in report

    def test_skipped_requests(self):
        report = format_report(run(FlashConfig(), [1, -1, 999]))

        assert "Skipped requests     : 2" in report

    def test_benchmark(self):
        text = format_benchmark(BenchmarkResult(runs=4, total_seconds=2.0))

        assert "Benchmark: 4 runs (sequential)" in text
        assert "Total time  : 2.000000 seconds" in text
        assert "Avg per run : 0.500000 seconds" in text
