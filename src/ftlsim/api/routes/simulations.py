"""Simulation API routes."""

from dataclasses import replace

from fastapi import APIRouter, HTTPException, Response, status

from ..schemas.simulation import (
    BlocksResponse,
    ExportResponse,
    L2PResponse,
    SimulationCreate,
    SimulationListResponse,
    SimulationResponse,
    StatisticsResponse,
)
from ...core.controller import get_controller

router = APIRouter(prefix="/simulations", tags=["simulations"])


def run_to_response(run) -> SimulationResponse:
    """Convert SimulationRun to SimulationResponse."""
    result = run.result
    return SimulationResponse(
        id=run.id,
        created_at=run.created_at,
        outcome=run.outcome,
        num_blocks=run.config.num_blocks,
        num_logical=run.config.num_logical,
        block_size=run.config.block_size,
        lifespan=run.config.lifespan,
        workload_size=run.workload_size,
        requests_processed=result.requests_processed,
        requests_skipped=result.requests_skipped,
        exhausted_at=result.exhausted_at,
        statistics=StatisticsResponse(**result.statistics.to_dict()),
    )


async def _get_run_or_404(simulation_id: str):
    controller = await get_controller()
    run = await controller.get_run(simulation_id)

    if not run:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Simulation {simulation_id} not found",
        )

    return run


@router.post(
    "", response_model=SimulationResponse, status_code=status.HTTP_201_CREATED
)
async def create_simulation(request: SimulationCreate):
    """Run a workload through the FTL and record the result."""
    controller = await get_controller()

    overrides = request.geometry.model_dump(exclude_none=True)
    config = replace(controller.config, **overrides)

    max_bytes = controller.settings.max_device_bytes
    if config.capacity_bytes > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Device of {config.capacity_bytes} bytes exceeds limit of {max_bytes}",
        )

    try:
        run = await controller.run_simulation(workload=request.workload, config=config)
    except OSError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Device write failed: {e}",
        )

    return run_to_response(run)


@router.get("", response_model=SimulationListResponse)
async def list_simulations():
    """List all recorded simulation runs."""
    controller = await get_controller()
    runs = await controller.list_runs()

    return SimulationListResponse(
        simulations=[run_to_response(r) for r in runs],
        total=len(runs),
    )


@router.get("/{simulation_id}", response_model=SimulationResponse)
async def get_simulation(simulation_id: str):
    """Get a specific simulation run by ID."""
    run = await _get_run_or_404(simulation_id)
    return run_to_response(run)


@router.get("/{simulation_id}/blocks", response_model=BlocksResponse)
async def get_simulation_blocks(simulation_id: str):
    """Get per-block write counts and dead flags."""
    run = await _get_run_or_404(simulation_id)
    state = run.result.state

    return BlocksResponse(
        simulation_id=run.id,
        write_counts=state.write_counts(),
        dead=state.dead_flags(),
    )


@router.get("/{simulation_id}/l2p", response_model=L2PResponse)
async def get_simulation_l2p(simulation_id: str):
    """Get the final L2P table."""
    run = await _get_run_or_404(simulation_id)
    return L2PResponse(simulation_id=run.id, l2p=list(run.result.state.l2p))


@router.post("/{simulation_id}/export", response_model=ExportResponse)
async def export_simulation(simulation_id: str):
    """Write a JSON report of the run to the results directory."""
    controller = await get_controller()
    path = await controller.export_run(simulation_id)

    if path is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Simulation {simulation_id} not found",
        )

    return ExportResponse(simulation_id=simulation_id, path=str(path))


@router.delete("/{simulation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_simulation(simulation_id: str):
    """Delete a recorded simulation run."""
    controller = await get_controller()

    if not await controller.delete_run(simulation_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Simulation {simulation_id} not found",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
