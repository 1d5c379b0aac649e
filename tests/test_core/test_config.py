"""Tests for configuration."""

import pytest
from pydantic import ValidationError

from ftlsim.core.config import FlashConfig, Settings


class TestFlashConfig:
    """Flash geometry tests."""

    def test_defaults(self):
        config = FlashConfig()

        assert config.num_blocks == 512
        assert config.num_logical == 256
        assert config.block_size == 4096
        assert config.lifespan == 5
        assert config.half == 256
        assert config.capacity_bytes == 2 * 1024 * 1024

    def test_payload(self):
        payload = FlashConfig(block_size=32).payload()

        assert payload == b"\xab" * 32

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"num_blocks": 1},
            {"num_logical": 0},
            {"block_size": 0},
            {"lifespan": 0},
            {"payload_byte": 256},
        ],
    )
    def test_rejects_invalid_geometry(self, kwargs):
        with pytest.raises(ValueError):
            FlashConfig(**kwargs)

    def test_from_settings(self):
        settings = Settings(num_blocks=8, num_logical=4, block_size=16, lifespan=3)
        config = FlashConfig.from_settings(settings)

        assert config == FlashConfig(num_blocks=8, num_logical=4, block_size=16, lifespan=3)


class TestSettings:
    """Environment-driven settings tests."""

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("FTLSIM_LIFESPAN", "7")
        monkeypatch.setenv("FTLSIM_DEVICE_BACKEND", "memory")

        settings = Settings()

        assert settings.lifespan == 7
        assert settings.device_backend == "memory"

    def test_rejects_tiny_pool(self):
        with pytest.raises(ValidationError):
            Settings(num_blocks=1)
