"""Simulation API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class GeometryOverride(BaseModel):
    """Flash geometry for a single run (settings values if omitted)."""

    num_blocks: int | None = Field(None, ge=2, le=1_048_576)
    num_logical: int | None = Field(None, ge=1, le=1_048_576)
    block_size: int | None = Field(None, ge=1, le=1_048_576)
    lifespan: int | None = Field(None, ge=1)


class SimulationCreate(BaseModel):
    """Request to run a simulation."""

    workload: list[int] | None = Field(
        None, description="Logical addresses; reference corpus if omitted"
    )
    geometry: GeometryOverride = Field(default_factory=GeometryOverride)


class StatisticsResponse(BaseModel):
    """Wear statistics of a run."""

    total_logical_writes: int
    total_physical_writes: int
    dead_count: int
    min_writes: int
    max_writes: int
    avg_writes: float
    avg_first_half: float
    avg_second_half: float
    wear_variance: float
    stale_blocks: int
    mapped_addresses: int
    wear_distribution: dict[int, int]


class SimulationResponse(BaseModel):
    """Simulation run response."""

    id: str
    created_at: datetime
    outcome: str
    num_blocks: int
    num_logical: int
    block_size: int
    lifespan: int
    workload_size: int
    requests_processed: int
    requests_skipped: int
    exhausted_at: int | None
    statistics: StatisticsResponse


class SimulationListResponse(BaseModel):
    """List of simulation runs response."""

    simulations: list[SimulationResponse]
    total: int


class BlocksResponse(BaseModel):
    """Per-block wear of a run."""

    simulation_id: str
    write_counts: list[int]
    dead: list[bool]


class L2PResponse(BaseModel):
    """L2P table of a run (null = unmapped)."""

    simulation_id: str
    l2p: list[int | None]


class ExportResponse(BaseModel):
    """Exported report location."""

    simulation_id: str
    path: str


class BenchmarkRequest(BaseModel):
    """Request to benchmark repeated runs."""

    runs: int | None = Field(None, ge=1, le=10_000)
    parallel: bool = False


class BenchmarkResponse(BaseModel):
    """Benchmark timing response."""

    runs: int
    parallel: bool
    total_seconds: float
    per_run_seconds: float
    last_outcome: str | None
