"""Benchmark API routes."""

from fastapi import APIRouter, HTTPException, status

from ..schemas.simulation import BenchmarkRequest, BenchmarkResponse
from ...core.controller import get_controller

router = APIRouter(prefix="/benchmarks", tags=["benchmarks"])


@router.post("", response_model=BenchmarkResponse)
async def create_benchmark(request: BenchmarkRequest):
    """Time repeated runs of the reference workload."""
    controller = await get_controller()

    try:
        result = await controller.run_benchmark(
            runs=request.runs, parallel=request.parallel
        )
    except OSError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Device write failed: {e}",
        )

    return BenchmarkResponse(
        runs=result.runs,
        parallel=result.parallel,
        total_seconds=result.total_seconds,
        per_run_seconds=result.per_run_seconds,
        last_outcome=result.last.outcome.value if result.last else None,
    )
