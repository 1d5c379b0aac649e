"""FTL core - mapping, wear leveling and run statistics."""

from .block_selector import WearLevelingSelector
from .runner import RunOutcome, RunResult, WorkloadRunner
from .statistics import RunStatistics, reduce_statistics
from .wear_state import PhysicalBlock, WearState
from .workload import REFERENCE_STRINGS, load_workload, parse_workload, reference_workload

__all__ = [
    "WearState",
    "PhysicalBlock",
    "WearLevelingSelector",
    "WorkloadRunner",
    "RunResult",
    "RunOutcome",
    "RunStatistics",
    "reduce_statistics",
    "REFERENCE_STRINGS",
    "reference_workload",
    "parse_workload",
    "load_workload",
]
