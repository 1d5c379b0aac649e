"""Block device implementations."""

from ..core.config import FlashConfig, Settings
from .backend import BlockDevice
from .file_backend import FileBlockDevice
from .memory_backend import MemoryBlockDevice


def create_device(settings: Settings, config: FlashConfig) -> BlockDevice:
    """Build the device selected by settings.device_backend."""
    if settings.device_backend == "memory":
        return MemoryBlockDevice(
            block_size=config.block_size, num_blocks=config.num_blocks
        )

    device = FileBlockDevice(
        settings.ssd_file, block_size=config.block_size, num_blocks=config.num_blocks
    )
    device.format()
    return device.open()


__all__ = ["BlockDevice", "FileBlockDevice", "MemoryBlockDevice", "create_device"]
