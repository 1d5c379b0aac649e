"""Statistics - Wear distribution summary of a finished run."""

from dataclasses import asdict, dataclass, field

from .wear_state import WearState


@dataclass(frozen=True)
class RunStatistics:
    """Wear statistics reduced from a terminal wear state."""

    total_logical_writes: int
    total_physical_writes: int
    dead_count: int
    min_writes: int
    max_writes: int
    avg_writes: float
    avg_first_half: float
    avg_second_half: float
    wear_variance: float = 0.0
    stale_blocks: int = 0
    mapped_addresses: int = 0
    wear_distribution: dict[int, int] = field(default_factory=dict)

    @property
    def is_even(self) -> bool:
        """True when no block is more than one write ahead of another."""
        return self.max_writes - self.min_writes <= 1

    def to_dict(self) -> dict:
        return asdict(self)


def reduce_statistics(state: WearState) -> RunStatistics:
    """
    Reduce a wear state into run statistics.

    The first half of the pool is [0, num_blocks // 2) and the second half
    the remainder. Both are non-empty because pools have at least 2 blocks.
    """
    counts = state.write_counts()
    pool_size = len(counts)
    half = pool_size // 2

    total = sum(counts)
    mean = total / pool_size
    variance = sum((c - mean) ** 2 for c in counts) / pool_size

    distribution: dict[int, int] = {}
    for count in counts:
        distribution[count] = distribution.get(count, 0) + 1

    return RunStatistics(
        total_logical_writes=state.logical_writes,
        total_physical_writes=total,
        dead_count=sum(state.dead_flags()),
        min_writes=min(counts),
        max_writes=max(counts),
        avg_writes=mean,
        avg_first_half=sum(counts[:half]) / half,
        avg_second_half=sum(counts[half:]) / (pool_size - half),
        wear_variance=variance,
        stale_blocks=sum(1 for _ in state.stale_blocks()),
        mapped_addresses=state.mapped_addresses(),
        wear_distribution=dict(sorted(distribution.items())),
    )
