"""Command line interface."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from .benchmark import run_benchmark
from .core.config import FlashConfig, get_settings
from .core.controller import SimulationController
from .core.log import configure_logging
from .flash.runner import WorkloadRunner
from .flash.workload import load_workload, reference_workload
from .report import format_benchmark, format_report
from .storage.file_backend import FileBlockDevice

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DEVICE_ERROR = 1
EXIT_EXHAUSTED = 2


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="ftlsim", description="Flash Translation Layer wear-leveling simulator"
    )
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--blocks", type=int, default=settings.num_blocks)
    parser.add_argument("--logical", type=int, default=settings.num_logical)
    parser.add_argument("--block-size", type=int, default=settings.block_size)
    parser.add_argument("--lifespan", type=int, default=settings.lifespan)

    sub = parser.add_subparsers(dest="command", required=True)

    sim = sub.add_parser("simulate", help="run one workload and print statistics")
    sim.add_argument("--workload", type=Path, help="file of logical addresses")
    sim.add_argument("--ssd-file", type=Path, default=settings.ssd_file)
    sim.add_argument("--quiet", action="store_true", help="omit the block table")

    bench = sub.add_parser("bench", help="time repeated runs")
    bench.add_argument("--runs", type=int, default=settings.bench_runs)
    bench.add_argument("--workload", type=Path)
    bench.add_argument("--ssd-file", type=Path, default=settings.ssd_file)
    bench.add_argument(
        "--parallel",
        action="store_true",
        help="run iterations concurrently on in-memory devices",
    )

    sub.add_parser("serve", help="start the HTTP API")

    return parser


def _workload(args) -> list[int]:
    if args.workload is not None:
        return load_workload(args.workload)
    return list(reference_workload())


def cmd_simulate(args, config: FlashConfig, workload: list[int]) -> int:
    device = FileBlockDevice(args.ssd_file, config.block_size, config.num_blocks)
    print("Initializing SSD file...")
    device.format()

    try:
        with device.open():
            result = WorkloadRunner(config, device).run(workload)
    except OSError as e:
        logger.error("Run aborted: %s", e)
        return EXIT_DEVICE_ERROR

    print()
    print(format_report(result, show_blocks=not args.quiet))
    return EXIT_EXHAUSTED if result.exhausted else EXIT_OK


def cmd_bench(args, config: FlashConfig, workload: list[int]) -> int:
    try:
        if args.parallel:
            controller = SimulationController()
            result = asyncio.run(
                controller.run_benchmark(
                    runs=args.runs, parallel=True, workload=workload, config=config
                )
            )
        else:
            device = FileBlockDevice(args.ssd_file, config.block_size, config.num_blocks)
            device.format()
            result = run_benchmark(config, workload, args.runs, device.open)
    except OSError as e:
        logger.error("Benchmark aborted: %s", e)
        return EXIT_DEVICE_ERROR

    print(format_benchmark(result))
    return EXIT_OK


def cmd_serve(args, config: FlashConfig, workload: list[int] | None) -> int:
    from .api.main import run

    run()
    return EXIT_OK


COMMANDS = {
    "simulate": cmd_simulate,
    "bench": cmd_bench,
    "serve": cmd_serve,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        config = FlashConfig(
            num_blocks=args.blocks,
            num_logical=args.logical,
            block_size=args.block_size,
            lifespan=args.lifespan,
            payload_byte=get_settings().payload_byte,
        )
    except ValueError as e:
        parser.error(str(e))

    workload = None
    if args.command != "serve":
        try:
            workload = _workload(args)
        except (OSError, ValueError) as e:
            parser.error(f"cannot load workload: {e}")

    return COMMANDS[args.command](args, config, workload)


if __name__ == "__main__":
    sys.exit(main())
