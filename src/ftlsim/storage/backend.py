"""Abstract block device interface."""

from abc import ABC, abstractmethod


class BlockDevice(ABC):
    """
    Abstract base class for simulated flash media.

    Devices are addressed by byte offset; the FTL always writes whole
    blocks at physical_id * block_size.
    """

    def __init__(self, block_size: int, num_blocks: int):
        self.block_size = block_size
        self.num_blocks = num_blocks
        self._stats = {
            "blocks_written": 0,
            "bytes_written": 0,
        }

    @property
    def capacity_bytes(self) -> int:
        return self.block_size * self.num_blocks

    def _check_write(self, offset: int, payload: bytes) -> None:
        if len(payload) != self.block_size:
            raise ValueError(
                f"Payload must be {self.block_size} bytes, got {len(payload)}"
            )
        if offset < 0 or offset + len(payload) > self.capacity_bytes:
            raise OSError(f"Write beyond device capacity at offset {offset}")

    @abstractmethod
    def write(self, offset: int, payload: bytes) -> None:
        """
        Write one block of data at a byte offset.

        Args:
            offset: Byte offset, a multiple of the block size
            payload: Exactly block_size bytes

        Raises:
            ValueError: If the payload size is wrong
            OSError: If the write fails
        """
        pass

    @abstractmethod
    def read(self, offset: int, size: int) -> bytes:
        """Read raw bytes back from the device."""
        pass

    def close(self) -> None:
        """Release device resources."""
        pass

    def get_stats(self) -> dict:
        """Get device statistics."""
        return {
            **self._stats,
            "block_size": self.block_size,
            "num_blocks": self.num_blocks,
            "capacity_bytes": self.capacity_bytes,
        }

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
