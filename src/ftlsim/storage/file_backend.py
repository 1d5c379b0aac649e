"""File-based block device implementation."""

from pathlib import Path
from typing import BinaryIO

from .backend import BlockDevice


class FileBlockDevice(BlockDevice):
    """Block device backed by a single image file (SSD.txt)."""

    def __init__(self, path: Path | str, block_size: int, num_blocks: int):
        super().__init__(block_size=block_size, num_blocks=num_blocks)
        self.path = Path(path)
        self._fp: BinaryIO | None = None

    def format(self) -> None:
        """Create (or truncate) the image file filled with zeroed blocks."""
        self.close()
        self.path.parent.mkdir(parents=True, exist_ok=True)

        empty = bytes(self.block_size)
        with open(self.path, "wb") as f:
            for _ in range(self.num_blocks):
                f.write(empty)

    def open(self) -> "FileBlockDevice":
        """Open the existing image for in-place block writes."""
        if self._fp is None:
            self._fp = open(self.path, "r+b")
        return self

    def write(self, offset: int, payload: bytes) -> None:
        """Write a block to the image file."""
        self._check_write(offset, payload)
        if self._fp is None:
            self.open()

        self._fp.seek(offset)
        self._fp.write(payload)

        self._stats["blocks_written"] += 1
        self._stats["bytes_written"] += len(payload)

    def read(self, offset: int, size: int) -> bytes:
        """Read bytes from the image file."""
        if self._fp is not None:
            self._fp.flush()

        with open(self.path, "rb") as f:
            f.seek(offset)
            return f.read(size)

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def get_stats(self) -> dict:
        return {**super().get_stats(), "path": str(self.path)}
