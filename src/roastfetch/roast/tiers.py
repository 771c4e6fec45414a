"""Tier classification for each reported hardware attribute.

Every classifier is total: any input, including zero cores, zero frequency
and the GPU sentinel strings, maps to exactly one tier.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

from roastfetch.hardware.snapshot import BYTES_PER_GB, TelemetrySnapshot


class CpuTier(Enum):
    LOW = "Low"
    MID = "Mid"
    HIGH = "High"


class MemoryTier(Enum):
    LOW = "Low"
    MID = "Mid"
    HIGH = "High"


class GpuTier(Enum):
    INTEGRATED = "Integrated"
    LOW_END = "LowEnd"
    HIGH_END = "HighEnd"


class FormFactor(Enum):
    LAPTOP = "Laptop"
    DESKTOP = "Desktop"


def classify_cpu(core_count: int, frequency_mhz: int) -> CpuTier:
    """Classify a CPU by core count and clock.

    Either a low core count or a low clock is enough to drop a tier, so 32
    cores at 1800 MHz and 2 cores at 5000 MHz are both ``LOW``.
    """
    if core_count < 4 or frequency_mhz < 2000:
        return CpuTier.LOW
    if core_count < 8 or frequency_mhz < 3000:
        return CpuTier.MID
    return CpuTier.HIGH


def classify_memory(total_memory_bytes: int) -> MemoryTier:
    total_gb = total_memory_bytes / BYTES_PER_GB
    if total_gb < 8.0:
        return MemoryTier.LOW
    if total_gb < 16.0:
        return MemoryTier.MID
    return MemoryTier.HIGH


def _is_integrated(name: str) -> bool:
    return (
        "Integrated" in name
        or "Intel" in name
        or ("AMD Radeon Graphics" in name and "RX" not in name)
    )


def _is_discrete_vendor(name: str) -> bool:
    return "NVIDIA GeForce" in name or "AMD Radeon" in name


def _is_low_end_model(name: str) -> bool:
    return "GT" in name or "RX 5" in name or "RX 4" in name


# Evaluated in order, first match wins. Names matching no rule are LOW_END.
GPU_RULES: List[Tuple[Callable[[str], bool], GpuTier]] = [
    (_is_integrated, GpuTier.INTEGRATED),
    (lambda name: _is_discrete_vendor(name) and _is_low_end_model(name), GpuTier.LOW_END),
    (_is_discrete_vendor, GpuTier.HIGH_END),
]

GPU_DEFAULT_TIER = GpuTier.LOW_END


def classify_gpu(name: str) -> GpuTier:
    """Classify a normalized GPU name using case-sensitive substring rules."""
    for predicate, tier in GPU_RULES:
        if predicate(name):
            return tier
    return GPU_DEFAULT_TIER


def classify_form_factor(has_battery: bool) -> FormFactor:
    return FormFactor.LAPTOP if has_battery else FormFactor.DESKTOP


@dataclass(frozen=True)
class TierReport:
    """Tier of every attribute, in reporting order."""

    cpu: CpuTier
    memory: MemoryTier
    gpu: GpuTier
    form_factor: FormFactor

    def labels(self) -> List[Enum]:
        return [self.cpu, self.memory, self.gpu, self.form_factor]


def classify(snapshot: TelemetrySnapshot) -> TierReport:
    """Classify every attribute of a snapshot."""
    return TierReport(
        cpu=classify_cpu(snapshot.cpu_core_count, snapshot.cpu_frequency_mhz),
        memory=classify_memory(snapshot.total_memory_bytes),
        gpu=classify_gpu(snapshot.gpu_name),
        form_factor=classify_form_factor(snapshot.has_battery),
    )
