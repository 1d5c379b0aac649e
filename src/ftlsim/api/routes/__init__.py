"""API routes."""

from .benchmarks import router as benchmarks_router
from .metrics import router as metrics_router
from .simulations import router as simulations_router

__all__ = [
    "simulations_router",
    "benchmarks_router",
    "metrics_router",
]
