"""Metrics API routes."""

from fastapi import APIRouter

from ...core.controller import get_controller

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get("")
async def get_metrics():
    """Get controller metrics and the wear summary of the latest run."""
    controller = await get_controller()
    stats = await controller.get_stats()

    runs = await controller.list_runs()
    if runs:
        latest = runs[-1]
        statistics = latest.result.statistics
        stats["latest_run"] = {
            "id": latest.id,
            "outcome": latest.outcome,
            "total_physical_writes": statistics.total_physical_writes,
            "dead_count": statistics.dead_count,
            "min_writes": statistics.min_writes,
            "max_writes": statistics.max_writes,
            "wear_variance": statistics.wear_variance,
        }

    return stats
