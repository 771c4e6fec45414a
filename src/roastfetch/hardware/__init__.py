"""Hardware probes and the per-run telemetry snapshot."""

from .detector import GPU_COMMAND_ERROR, GPU_NO_OUTPUT, normalize_gpu_name
from .snapshot import TelemetrySnapshot, take_snapshot

__all__ = [
    "GPU_COMMAND_ERROR",
    "GPU_NO_OUTPUT",
    "TelemetrySnapshot",
    "normalize_gpu_name",
    "take_snapshot",
]
