"""Telemetry snapshot taken once per run."""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .detector import (
    DEFAULT_BATTERY_PATHS,
    detect_battery,
    detect_cpu_cores,
    detect_gpu_name,
    detect_memory,
    detect_os,
)

logger = logging.getLogger(__name__)

BYTES_PER_GB = 1024**3


@dataclass(frozen=True)
class TelemetrySnapshot:
    """Raw hardware readings for a single run."""

    cpu_brand: str
    cpu_core_count: int
    cpu_frequency_mhz: int
    total_memory_bytes: int
    used_memory_bytes: int
    gpu_name: str
    has_battery: bool
    os_name: str
    os_version: str

    @property
    def total_memory_gb(self) -> float:
        return self.total_memory_bytes / BYTES_PER_GB

    @property
    def used_memory_gb(self) -> float:
        return self.used_memory_bytes / BYTES_PER_GB


def take_snapshot(
    gpu_source: Optional[Callable[[], str]] = None,
    battery_paths: Iterable[str] = DEFAULT_BATTERY_PATHS,
) -> TelemetrySnapshot:
    """Probe the machine and build a snapshot.

    Every probe degrades to a placeholder value instead of raising, so this
    always returns a complete snapshot.

    Args:
        gpu_source: Callable returning raw GPU listing text. Defaults to
            running ``lspci``.
        battery_paths: Device paths whose presence indicates a battery.
    """
    cores = detect_cpu_cores()
    if cores:
        brand = cores[0].brand
        frequency = cores[0].frequency_mhz
    else:
        logger.warning("No CPU cores reported")
        brand = "Unknown"
        frequency = 0

    memory = detect_memory()
    gpu_name = detect_gpu_name(gpu_source) if gpu_source else detect_gpu_name()
    os_name, os_version = detect_os()

    return TelemetrySnapshot(
        cpu_brand=brand,
        cpu_core_count=len(cores),
        cpu_frequency_mhz=frequency,
        total_memory_bytes=memory.total_bytes,
        used_memory_bytes=memory.used_bytes,
        gpu_name=gpu_name,
        has_battery=detect_battery(battery_paths),
        os_name=os_name,
        os_version=os_version,
    )
