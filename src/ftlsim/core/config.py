"""Configuration management for FTLSim."""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """FTLSim configuration settings."""

    # General settings
    app_name: str = "FTLSim"
    debug: bool = False
    log_level: str = "INFO"

    # Flash geometry
    num_blocks: int = Field(default=512, ge=2)  # Physical blocks
    num_logical: int = Field(default=256, ge=1)  # Logical address space
    block_size: int = Field(default=4096, ge=1)  # 4KB blocks
    lifespan: int = Field(default=5, ge=1)  # Writes before a block dies
    payload_byte: int = Field(default=0xAB, ge=0, le=255)  # Dummy payload filler

    # Device settings
    device_backend: Literal["file", "memory"] = "file"
    ssd_file: Path = Field(default=Path("SSD.txt"))
    results_dir: Path = Field(default=Path("/tmp/ftlsim/results"))
    max_device_bytes: int = Field(default=256 * 1024 * 1024, ge=1)  # Per-request device cap

    # Benchmark settings
    bench_runs: int = Field(default=100, ge=1)

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    model_config = {
        "env_prefix": "FTLSIM_",
        "env_file": ".env",
    }


@dataclass(frozen=True)
class FlashConfig:
    """Geometry of one simulated flash device, fixed for a run."""

    num_blocks: int = 512
    num_logical: int = 256
    block_size: int = 4096
    lifespan: int = 5
    payload_byte: int = 0xAB

    def __post_init__(self):
        if self.num_blocks < 2:
            raise ValueError(f"num_blocks must be at least 2, got {self.num_blocks}")
        if self.num_logical < 1:
            raise ValueError(f"num_logical must be positive, got {self.num_logical}")
        if self.block_size < 1:
            raise ValueError(f"block_size must be positive, got {self.block_size}")
        if self.lifespan < 1:
            raise ValueError(f"lifespan must be positive, got {self.lifespan}")
        if not 0 <= self.payload_byte <= 255:
            raise ValueError(f"payload_byte out of range: {self.payload_byte}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "FlashConfig":
        return cls(
            num_blocks=settings.num_blocks,
            num_logical=settings.num_logical,
            block_size=settings.block_size,
            lifespan=settings.lifespan,
            payload_byte=settings.payload_byte,
        )

    @property
    def capacity_bytes(self) -> int:
        """Total size of the simulated medium."""
        return self.num_blocks * self.block_size

    @property
    def half(self) -> int:
        """Boundary between the first and second half of the pool."""
        return self.num_blocks // 2

    def payload(self) -> bytes:
        """Fixed-size block payload written on every physical write."""
        return bytes([self.payload_byte]) * self.block_size


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
