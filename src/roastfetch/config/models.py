"""Pydantic models for roastfetch configuration."""

from pydantic import BaseModel, Field

from roastfetch.hardware.detector import (
    DEFAULT_BATTERY_PATHS,
    DEFAULT_GPU_COMMAND,
    DEFAULT_GPU_TIMEOUT_S,
)


class RoastConfig(BaseModel):
    """User configuration, read from ``~/.roastfetch/config.yaml``."""

    seed: int | None = None  # None = seed from the OS
    corpus_path: str | None = None  # None = bundled corpus
    gpu_command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GPU_COMMAND), min_length=1
    )
    gpu_timeout_s: float = Field(default=DEFAULT_GPU_TIMEOUT_S, gt=0)
    battery_paths: list[str] = Field(default_factory=lambda: list(DEFAULT_BATTERY_PATHS))
    log_to_file: bool = False
