"""Wear State - Per-run block wear counters and L2P mapping."""

from dataclasses import dataclass
from typing import Iterator

from ..core.config import FlashConfig


@dataclass
class PhysicalBlock:
    """Represents a physical flash block."""

    block_id: int
    write_count: int = 0
    is_dead: bool = False  # Set once write_count reaches the lifespan


class WearState:
    """
    Complete mutable state of one simulation run.

    Holds the physical block pool (write counters and dead flags) and the
    logical-to-physical (L2P) table. Created fresh for every run and never
    shared between runs.

    A block that loses its logical address through a remap becomes stale.
    Stale blocks are never erased or reclaimed: a block only gains wear by
    being selected for a new write.
    """

    def __init__(self, config: FlashConfig):
        self.config = config

        # Physical block pool
        self.blocks: list[PhysicalBlock] = [
            PhysicalBlock(block_id=i) for i in range(config.num_blocks)
        ]

        # Logical to physical mapping (L2P table), None = unmapped
        self.l2p: list[int | None] = [None] * config.num_logical

        self.logical_writes = 0

    @property
    def num_blocks(self) -> int:
        return len(self.blocks)

    @property
    def num_logical(self) -> int:
        return len(self.l2p)

    def is_valid_address(self, logical_address: int) -> bool:
        """Check that a logical address falls inside the L2P table."""
        return 0 <= logical_address < self.num_logical

    def _block(self, physical_id: int) -> PhysicalBlock:
        if not 0 <= physical_id < self.num_blocks:
            raise IndexError(f"Physical block out of range: {physical_id}")
        return self.blocks[physical_id]

    def lookup(self, logical_address: int) -> int | None:
        """
        Get the physical block currently holding a logical address.

        Raises:
            IndexError: If the logical address is out of range
        """
        if not self.is_valid_address(logical_address):
            raise IndexError(f"Logical address out of range: {logical_address}")
        return self.l2p[logical_address]

    def map(self, logical_address: int, physical_id: int) -> int | None:
        """
        Point a logical address at a physical block.

        Args:
            logical_address: Logical block address
            physical_id: Newly written physical block

        Returns:
            The previous (now stale) physical block, or None if unmapped
        """
        previous = self.lookup(logical_address)
        self._block(physical_id)

        self.l2p[logical_address] = physical_id
        self.logical_writes += 1

        return previous

    def record_write(self, physical_id: int) -> PhysicalBlock:
        """
        Count one program cycle against a physical block.

        The block is retired once its write count reaches the lifespan.

        Returns:
            The updated PhysicalBlock
        """
        block = self._block(physical_id)
        if block.is_dead:
            raise ValueError(f"Block {physical_id} is dead")

        block.write_count += 1
        if block.write_count >= self.config.lifespan:
            block.is_dead = True

        return block

    def write_counts(self) -> list[int]:
        return [b.write_count for b in self.blocks]

    def dead_flags(self) -> list[bool]:
        return [b.is_dead for b in self.blocks]

    def healthy_blocks(self) -> Iterator[int]:
        """Get all blocks that can still be written."""
        for block in self.blocks:
            if not block.is_dead:
                yield block.block_id

    def mapped_addresses(self) -> int:
        return sum(1 for p in self.l2p if p is not None)

    def stale_blocks(self) -> Iterator[int]:
        """Get programmed blocks that no logical address points at."""
        live = {p for p in self.l2p if p is not None}
        for block in self.blocks:
            if block.write_count > 0 and block.block_id not in live:
                yield block.block_id

    def snapshot(self) -> dict:
        """Plain read-only copy of the per-block state for reporting."""
        return {
            "write_counts": self.write_counts(),
            "dead": self.dead_flags(),
            "l2p": list(self.l2p),
        }
