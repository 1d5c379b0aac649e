"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .. import __version__
from ..core.config import get_settings
from ..core.controller import get_controller
from ..core.log import configure_logging
from .routes import benchmarks_router, metrics_router, simulations_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging(get_settings().log_level)
    await get_controller()
    yield


app = FastAPI(
    title="FTLSim API",
    description="""
    FTLSim - Flash Translation Layer wear-leveling simulator

    - **Simulations**: run LBA workloads through least-worn block selection
    - **Statistics**: wear distribution, dead blocks, half-pool averages
    - **Benchmarks**: timed repeated runs, optionally in parallel
    """,
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(simulations_router, prefix="/api/v1")
app.include_router(benchmarks_router, prefix="/api/v1")
app.include_router(metrics_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "FTLSim API",
        "version": __version__,
        "description": "Flash Translation Layer wear-leveling simulator",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    controller = await get_controller()
    stats = await controller.get_stats()

    return {
        "status": "healthy",
        "device_backend": stats["device_backend"],
        "runs_stored": stats["runs_stored"],
    }


def run():
    """Run the API server."""
    settings = get_settings()
    uvicorn.run(
        "ftlsim.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
