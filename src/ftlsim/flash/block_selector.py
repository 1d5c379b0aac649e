"""Block Selector - Least-worn physical block selection."""

from .wear_state import WearState


class WearLevelingSelector:
    """
    Dynamic wear leveling policy.

    Every write goes to the healthy block with the fewest writes so far.
    Ties go to the lowest block index, which keeps runs reproducible.
    """

    def select(self, state: WearState) -> int | None:
        """
        Pick the physical block for the next logical write.

        Args:
            state: Current wear state (not modified)

        Returns:
            Physical block ID or None if every block is dead
        """
        best = None
        min_writes = None

        # Strict comparison keeps the first (lowest) index on ties
        for block in state.blocks:
            if block.is_dead:
                continue
            if min_writes is None or block.write_count < min_writes:
                min_writes = block.write_count
                best = block.block_id

        return best
