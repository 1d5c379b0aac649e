"""In-memory block device implementation."""

from .backend import BlockDevice


class MemoryBlockDevice(BlockDevice):
    """
    Block device held in a bytearray.

    Each instance owns its image, so independent runs can use one device
    each. Offsets listed in fail_offsets raise OSError on write, which lets
    tests exercise the device failure path.
    """

    def __init__(
        self,
        block_size: int,
        num_blocks: int,
        fail_offsets: set[int] | None = None,
    ):
        super().__init__(block_size=block_size, num_blocks=num_blocks)
        self._image = bytearray(self.capacity_bytes)
        self.fail_offsets = set(fail_offsets or ())

    def write(self, offset: int, payload: bytes) -> None:
        self._check_write(offset, payload)
        if offset in self.fail_offsets:
            raise OSError(f"Simulated write failure at offset {offset}")

        self._image[offset : offset + len(payload)] = payload

        self._stats["blocks_written"] += 1
        self._stats["bytes_written"] += len(payload)

    def read(self, offset: int, size: int) -> bytes:
        return bytes(self._image[offset : offset + size])
