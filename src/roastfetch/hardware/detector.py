"""Individual hardware probes with fallbacks."""

import logging
import platform
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Sequence

logger = logging.getLogger(__name__)

GPU_NO_OUTPUT = "Unknown GPU (lspci failed)"
GPU_COMMAND_ERROR = "Unknown GPU (lspci command error)"

UNKNOWN_OS = "Unknown OS"
UNKNOWN_OS_VERSION = "Unknown Version"

DEFAULT_GPU_COMMAND = ["lspci"]
DEFAULT_GPU_TIMEOUT_S = 5.0
DEFAULT_BATTERY_PATHS = [
    "/sys/class/power_supply/BAT0",
    "/sys/class/power_supply/BAT1",
]

_DISPLAY_CLASS_RE = re.compile(r"^\S+\s+(VGA compatible|3D|Display) controller", re.IGNORECASE)


class GpuProbeError(Exception):
    """Raised when the GPU listing command cannot be executed."""


@dataclass(frozen=True)
class CoreReading:
    brand: str
    frequency_mhz: int


@dataclass(frozen=True)
class MemoryReading:
    total_bytes: int
    used_bytes: int


def read_raw_gpu_text(
    command: Sequence[str] = tuple(DEFAULT_GPU_COMMAND),
    timeout_s: float = DEFAULT_GPU_TIMEOUT_S,
) -> str:
    """Run the PCI listing command and keep only display controller lines.

    The exit status is ignored; whatever the command printed is used.

    Raises:
        GpuProbeError: If the command cannot be started or times out.
    """
    try:
        result = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            timeout=timeout_s,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise GpuProbeError(f"{' '.join(command)}: {e}") from e

    if result.returncode != 0:
        logger.debug(f"{command[0]} exited with code {result.returncode}")

    lines = [line for line in (result.stdout or "").splitlines() if _DISPLAY_CLASS_RE.search(line)]
    return "\n".join(lines)


def normalize_gpu_name(raw_text: str) -> str:
    """Extract a readable GPU model from the first line of lspci output.

    ``"01:00.0 VGA compatible controller: NVIDIA Corporation GA102 (rev a1)"``
    becomes ``"NVIDIA Corporation GA102"``. Empty input yields
    ``GPU_NO_OUTPUT``.
    """
    if not raw_text:
        return GPU_NO_OUTPUT

    line = raw_text.split("\n", 1)[0].rstrip("\r")
    start = line.find(": ")
    if start == -1:
        return line.strip()

    name = line[start + 2 :]
    end = name.find(" (")
    if end != -1:
        name = name[:end]
    return name.strip()


def detect_gpu_name(source: Callable[[], str] = read_raw_gpu_text) -> str:
    """Probe the GPU text source once and normalize the result."""
    try:
        raw = source()
    except GpuProbeError as e:
        logger.debug(f"lspci probe failed: {e}")
        return GPU_COMMAND_ERROR
    return normalize_gpu_name(raw)


def detect_battery(paths: Iterable[str] = DEFAULT_BATTERY_PATHS) -> bool:
    """Return True if any of the battery device paths exists."""
    for path in paths:
        try:
            if Path(path).exists():
                return True
        except OSError as e:
            logger.debug(f"Battery probe {path} failed: {e}")
    return False


def detect_cpu_cores() -> List[CoreReading]:
    """Read brand and current frequency for every logical core.

    Frequency is 0 when the platform does not report it.
    """
    import psutil

    try:
        import cpuinfo

        brand = cpuinfo.get_cpu_info().get("brand_raw") or "Unknown"
    except Exception as e:
        logger.warning(f"CPU brand detection failed: {e}")
        brand = "Unknown"

    count = psutil.cpu_count(logical=True) or 0

    try:
        freqs = psutil.cpu_freq(percpu=True) or []
    except Exception as e:
        logger.debug(f"CPU frequency detection failed: {e}")
        freqs = []

    readings = []
    for index in range(count):
        if index < len(freqs):
            mhz = int(freqs[index].current or 0)
        elif freqs:
            # Some platforms only report a single package-wide value.
            mhz = int(freqs[0].current or 0)
        else:
            mhz = 0
        readings.append(CoreReading(brand=brand, frequency_mhz=mhz))
    return readings


def detect_memory() -> MemoryReading:
    """Detect total and used RAM in bytes."""
    try:
        import psutil

        mem = psutil.virtual_memory()
        return MemoryReading(
            total_bytes=int(mem.total),
            used_bytes=int(max(mem.total - mem.available, 0)),
        )
    except Exception as e:
        logger.warning(f"Memory detection failed: {e}")
        return MemoryReading(total_bytes=0, used_bytes=0)


def detect_os() -> tuple[str, str]:
    """Detect the OS name and version.

    Uses os-release on Linux and falls back to ``platform``. Missing values
    are replaced with ``UNKNOWN_OS`` / ``UNKNOWN_OS_VERSION``.
    """
    name = ""
    version = ""

    if platform.system() == "Linux":
        try:
            release = platform.freedesktop_os_release()
            name = release.get("NAME", "")
            version = release.get("VERSION_ID", "")
        except OSError as e:
            logger.debug(f"os-release not available: {e}")

    if not name:
        name = platform.system()
    if not version:
        version = platform.release()

    return name or UNKNOWN_OS, version or UNKNOWN_OS_VERSION
