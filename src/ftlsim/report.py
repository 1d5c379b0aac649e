"""Reporting - Human-readable run and benchmark summaries."""

from .benchmark import BenchmarkResult
from .flash.runner import RunResult

BLOCKS_PER_ROW = 8


def format_block_table(write_counts: list[int]) -> str:
    """Per-block write counts, eight blocks per row."""
    rows = []
    for start in range(0, len(write_counts), BLOCKS_PER_ROW):
        row = write_counts[start : start + BLOCKS_PER_ROW]
        rows.append(
            "  ".join(f"{start + i:3d}:{count}" for i, count in enumerate(row))
        )
    return "\n".join(rows)


def format_report(result: RunResult, show_blocks: bool = True) -> str:
    """Render the statistics of a run the way the simulator prints them."""
    stats = result.statistics
    half = result.state.config.half
    num_blocks = result.state.num_blocks

    lines = ["=== FTL Simulation Statistics ===", ""]

    if show_blocks:
        lines += ["Block writes:", format_block_table(result.state.write_counts()), ""]

    lines += [
        f"Total logical writes : {stats.total_logical_writes}",
        f"Total physical writes: {stats.total_physical_writes}",
        f"Dead blocks          : {stats.dead_count}",
        f"Write distribution   : min={stats.min_writes}  "
        f"max={stats.max_writes}  avg={stats.avg_writes:.2f}",
        f"Avg first {half} blocks : {stats.avg_first_half:.2f}",
        f"Avg last {num_blocks - half} blocks  : {stats.avg_second_half:.2f}",
    ]

    if result.requests_skipped:
        lines.append(f"Skipped requests     : {result.requests_skipped}")

    if result.exhausted:
        lines += [
            "",
            f"Flash exhausted at request {result.exhausted_at}: "
            "no healthy block available.",
        ]

    lines += [
        "",
        "Interpretation:",
        "- If avg1 ≈ avg2 and min/max are close,",
        "  the wear-leveling algorithm distributes writes evenly.",
        f"- Here max - min = {stats.max_writes - stats.min_writes}: writes are "
        + ("evenly distributed." if stats.is_even else "unevenly distributed."),
    ]
    return "\n".join(lines)


def format_benchmark(result: BenchmarkResult) -> str:
    mode = "parallel" if result.parallel else "sequential"
    return "\n".join(
        [
            f"--- Benchmark: {result.runs} runs ({mode}) ---",
            f"Total time  : {result.total_seconds:.6f} seconds",
            f"Avg per run : {result.per_run_seconds:.6f} seconds",
        ]
    )
