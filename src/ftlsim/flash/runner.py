"""Workload Runner - Drives logical writes through the FTL."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ..core.config import FlashConfig
from ..storage.backend import BlockDevice
from .block_selector import WearLevelingSelector
from .statistics import RunStatistics, reduce_statistics
from .wear_state import WearState

logger = logging.getLogger(__name__)


class RunOutcome(Enum):
    """How a run ended."""

    COMPLETED = "completed"  # Whole workload drained
    EXHAUSTED = "exhausted"  # Stopped early: no healthy block left


@dataclass
class RunResult:
    """Result of one simulation run."""

    outcome: RunOutcome
    statistics: RunStatistics
    state: WearState
    requests_total: int = 0  # Requests consumed from the workload
    requests_processed: int = 0  # Valid requests written to flash
    requests_skipped: int = 0  # Out-of-range logical addresses
    exhausted_at: int | None = None  # Workload position that hit exhaustion

    @property
    def exhausted(self) -> bool:
        return self.outcome == RunOutcome.EXHAUSTED


class WorkloadRunner:
    """
    Runs a workload of logical writes against a fresh wear state.

    For each request, in order:
    1. Skip addresses outside the logical address space
    2. Select the least-worn healthy block, or stop if there is none
    3. Remap the logical address to that block
    4. Write one payload block to the device
    5. Count the write and retire the block at its lifespan

    Each decision depends on every earlier one, so a run is strictly
    sequential. Independent runs share nothing but the config.
    """

    def __init__(
        self,
        config: FlashConfig,
        device: BlockDevice,
        selector: WearLevelingSelector | None = None,
    ):
        self.config = config
        self.device = device
        self.selector = selector or WearLevelingSelector()
        self._payload = config.payload()

    def run(
        self, workload: Iterable[int], state: WearState | None = None
    ) -> RunResult:
        """
        Drain a workload and reduce the resulting wear state.

        Args:
            workload: Ordered logical addresses to write
            state: Wear state to continue from (fresh one if omitted)

        Returns:
            RunResult; outcome is EXHAUSTED if the flash wore out first

        Raises:
            OSError: If the device write fails. The run is aborted and the
                state is left inconsistent (the failed request is already
                mapped in the L2P table but its block was never counted), so
                it must be discarded.
        """
        if state is None:
            state = WearState(self.config)

        outcome = RunOutcome.COMPLETED
        exhausted_at = None
        total = processed = skipped = 0

        logger.info(
            "Starting run: %d blocks, %d logical, lifespan %d",
            state.num_blocks,
            state.num_logical,
            self.config.lifespan,
        )

        for position, logical_address in enumerate(workload):
            total += 1

            if not state.is_valid_address(logical_address):
                skipped += 1
                logger.debug("Skipping invalid logical address %d", logical_address)
                continue

            physical_id = self.selector.select(state)
            if physical_id is None:
                outcome = RunOutcome.EXHAUSTED
                exhausted_at = position
                logger.warning(
                    "No healthy block available at request %d (LBA %d)",
                    position,
                    logical_address,
                )
                break

            # Previous mapping goes stale; it is not erased or reclaimed
            state.map(logical_address, physical_id)

            offset = physical_id * self.config.block_size
            try:
                self.device.write(offset, self._payload)
            except OSError:
                logger.error(
                    "Device write failed for block %d at offset %d",
                    physical_id,
                    offset,
                )
                raise

            block = state.record_write(physical_id)
            processed += 1

            logger.debug(
                "LBA %d -> block %d (writes=%d%s)",
                logical_address,
                physical_id,
                block.write_count,
                ", dead" if block.is_dead else "",
            )

        statistics = reduce_statistics(state)

        logger.info(
            "Run %s: %d processed, %d skipped, %d dead blocks",
            outcome.value,
            processed,
            skipped,
            statistics.dead_count,
        )

        return RunResult(
            outcome=outcome,
            statistics=statistics,
            state=state,
            requests_total=total,
            requests_processed=processed,
            requests_skipped=skipped,
            exhausted_at=exhausted_at,
        )
