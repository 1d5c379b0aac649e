"""Tests for block devices."""

import pytest

from ftlsim.core.config import FlashConfig, Settings
from ftlsim.storage import FileBlockDevice, MemoryBlockDevice, create_device


@pytest.fixture
def file_device(tmp_path):
    """Create a formatted 8-block file device."""
    device = FileBlockDevice(tmp_path / "SSD.txt", block_size=64, num_blocks=8)
    device.format()
    yield device
    device.close()


class TestFileBlockDevice:
    """File-backed device tests."""

    def test_format_creates_zeroed_image(self, file_device):
        data = file_device.path.read_bytes()

        assert len(data) == 8 * 64
        assert data == bytes(8 * 64)

    def test_write_and_read(self, file_device):
        with file_device.open():
            file_device.write(3 * 64, b"\xab" * 64)
            assert file_device.read(3 * 64, 64) == b"\xab" * 64

        assert file_device.read(2 * 64, 64) == bytes(64)
        assert file_device.path.stat().st_size == 8 * 64

    def test_write_opens_lazily(self, file_device):
        file_device.write(0, b"\x01" * 64)
        file_device.close()

        assert file_device.path.read_bytes()[:64] == b"\x01" * 64

    def test_wrong_payload_size(self, file_device):
        with pytest.raises(ValueError):
            file_device.write(0, b"\x00" * 10)

    def test_write_beyond_capacity(self, file_device):
        with pytest.raises(OSError):
            file_device.write(8 * 64, b"\x00" * 64)

    def test_missing_image(self, tmp_path):
        device = FileBlockDevice(tmp_path / "missing.img", block_size=64, num_blocks=8)

        with pytest.raises(OSError):
            device.write(0, b"\x00" * 64)

    def test_stats(self, file_device):
        with file_device.open():
            file_device.write(0, b"\x00" * 64)
            file_device.write(64, b"\x00" * 64)

        stats = file_device.get_stats()

        assert stats["blocks_written"] == 2
        assert stats["bytes_written"] == 128
        assert stats["capacity_bytes"] == 512
        assert stats["path"].endswith("SSD.txt")


class TestMemoryBlockDevice:
    """In-memory device tests."""

    def test_write_and_read(self):
        device = MemoryBlockDevice(block_size=4, num_blocks=2)
        device.write(4, b"abcd")

        assert device.read(0, 8) == b"\x00\x00\x00\x00abcd"

    def test_simulated_failure(self):
        device = MemoryBlockDevice(block_size=4, num_blocks=2, fail_offsets={4})
        device.write(0, b"abcd")

        with pytest.raises(OSError):
            device.write(4, b"abcd")

        assert device.get_stats()["blocks_written"] == 1


class TestCreateDevice:
    """Backend selection tests."""

    def test_memory_backend(self):
        settings = Settings(device_backend="memory")
        device = create_device(settings, FlashConfig(num_blocks=4, block_size=16))

        assert isinstance(device, MemoryBlockDevice)
        assert device.capacity_bytes == 64

    def test_file_backend(self, tmp_path):
        settings = Settings(device_backend="file", ssd_file=tmp_path / "SSD.txt")

        with create_device(settings, FlashConfig(num_blocks=4, block_size=16)) as device:
            assert isinstance(device, FileBlockDevice)
            device.write(16, b"\xab" * 16)

        assert (tmp_path / "SSD.txt").stat().st_size == 64
