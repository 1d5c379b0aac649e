#!/usr/bin/env python3
"""
FTLSim Demo Script

Showcases key capabilities:
1. Reference workload simulation
2. Flash exhaustion on a tiny pool
3. Out-of-range request handling
4. Benchmarking repeated runs

Usage:
    # Start the API server first
    uvicorn ftlsim.api.main:app --reload

    # Run demo
    python demo.py
"""

import asyncio
import json
import sys

import httpx

BASE_URL = "http://localhost:8000"
API_V1 = f"{BASE_URL}/api/v1"

TINY_POOL = {"num_blocks": 4, "num_logical": 2, "lifespan": 2, "block_size": 4096}


def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}\n")


def print_json(data: dict) -> None:
    """Pretty print JSON data."""
    print(json.dumps(data, indent=2, default=str))


async def check_server() -> bool:
    """Check if server is running."""
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{BASE_URL}/health", timeout=5.0)
            return response.status_code == 200
    except httpx.HTTPError:
        return False


async def demo_reference(client: httpx.AsyncClient) -> str:
    """Demo: Reference Workload"""
    print_header("1. REFERENCE WORKLOAD (512 blocks, 220 writes)")

    response = await client.post(f"{API_V1}/simulations", json={})
    run = response.json()
    stats = run["statistics"]

    print(f"  Run: {run['id'][:8]}... ({run['outcome']})")
    print(f"  Physical writes: {stats['total_physical_writes']}")
    print(f"  Dead blocks: {stats['dead_count']}")
    print(
        f"  Distribution: min={stats['min_writes']} max={stats['max_writes']} "
        f"avg={stats['avg_writes']:.2f}"
    )
    print(f"  Avg first half:  {stats['avg_first_half']:.2f}")
    print(f"  Avg second half: {stats['avg_second_half']:.2f}")
    print(f"  Stale blocks: {stats['stale_blocks']}")

    return run["id"]


async def demo_exhaustion(client: httpx.AsyncClient) -> str:
    """Demo: Flash Exhaustion"""
    print_header("2. FLASH EXHAUSTION (4 blocks, lifespan 2)")

    workload = [0, 0, 0, 0, 1, 1, 1, 1, 0, 1]
    print(f"Writing LBAs {workload}...")
    response = await client.post(
        f"{API_V1}/simulations",
        json={"workload": workload, "geometry": TINY_POOL},
    )
    run = response.json()

    print(f"  Outcome: {run['outcome']}")
    print(f"  Stopped at request: {run['exhausted_at']}")

    response = await client.get(f"{API_V1}/simulations/{run['id']}/blocks")
    blocks = response.json()
    print(f"  Write counts: {blocks['write_counts']}")
    print(f"  Dead: {blocks['dead']}")

    return run["id"]


async def demo_invalid(client: httpx.AsyncClient) -> str:
    """Demo: Invalid Requests"""
    print_header("3. OUT-OF-RANGE ADDRESSES")

    response = await client.post(
        f"{API_V1}/simulations", json={"workload": [-1, 5, 256, 5, 1000]}
    )
    run = response.json()

    print(f"  Skipped: {run['requests_skipped']}")
    print(f"  Processed: {run['requests_processed']}")

    response = await client.get(f"{API_V1}/simulations/{run['id']}/l2p")
    l2p = response.json()["l2p"]
    print(f"  LBA 5 -> block {l2p[5]}")

    return run["id"]


async def demo_benchmark(client: httpx.AsyncClient) -> None:
    """Demo: Benchmark"""
    print_header("4. BENCHMARK")

    for parallel in (False, True):
        response = await client.post(
            f"{API_V1}/benchmarks", json={"runs": 100, "parallel": parallel}
        )
        bench = response.json()
        mode = "parallel" if parallel else "sequential"
        print(f"  {bench['runs']} runs ({mode}): {bench['total_seconds']:.6f} s")
        print(f"    per run: {bench['per_run_seconds']:.6f} s")


async def cleanup(client: httpx.AsyncClient, run_ids: list[str]) -> None:
    """Cleanup demo resources."""
    print_header("CLEANUP")

    for run_id in run_ids:
        print(f"Deleting run {run_id[:8]}...")
        await client.delete(f"{API_V1}/simulations/{run_id}")
    print("  Done")


async def main() -> None:
    """Run the demo."""
    print("\n" + "=" * 60)
    print("        FTLSim Demo - Wear-Leveling Simulator")
    print("=" * 60)

    # Check server
    print("\nChecking API server...")
    if not await check_server():
        print("ERROR: Server not running!")
        print("\nStart the server first:")
        print("  uvicorn ftlsim.api.main:app --reload")
        sys.exit(1)

    print("  Server is running at", BASE_URL)

    async with httpx.AsyncClient(timeout=30.0) as client:
        try:
            run_ids = [
                await demo_reference(client),
                await demo_exhaustion(client),
                await demo_invalid(client),
            ]
            await demo_benchmark(client)

            response = await client.get(f"{API_V1}/metrics")
            print_header("METRICS")
            print_json(response.json())

            await cleanup(client, run_ids)

        except httpx.HTTPError as e:
            print(f"\nHTTP Error: {e}")
            sys.exit(1)

    print_header("DEMO COMPLETE")
    print("\nExplore more:")
    print("  - Swagger UI: http://localhost:8000/docs")
    print("  - ReDoc: http://localhost:8000/redoc")


if __name__ == "__main__":
    asyncio.run(main())
