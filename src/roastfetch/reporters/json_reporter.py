"""JSON run output."""

import json
from dataclasses import asdict
from typing import Any, Optional, Sequence

from roastfetch.hardware.snapshot import TelemetrySnapshot
from roastfetch.roast.tiers import TierReport


def run_to_dict(
    snapshot: TelemetrySnapshot,
    report: TierReport,
    roasts: Optional[Sequence[str]] = None,
) -> dict[str, Any]:
    """Convert a run to a JSON-serializable dict.

    Args:
        snapshot: Hardware readings for the run.
        report: Tier of each attribute.
        roasts: Selected roast lines, omitted when None.

    Returns:
        Dictionary suitable for JSON serialization.
    """
    data: dict[str, Any] = {
        "system": asdict(snapshot),
        "tiers": {
            "cpu": report.cpu.value,
            "memory": report.memory.value,
            "gpu": report.gpu.value,
            "form_factor": report.form_factor.value,
        },
    }
    data["system"]["total_memory_gb"] = round(snapshot.total_memory_gb, 2)
    data["system"]["used_memory_gb"] = round(snapshot.used_memory_gb, 2)

    if roasts is not None:
        data["roasts"] = list(roasts)

    return data


def run_to_json(
    snapshot: TelemetrySnapshot,
    report: TierReport,
    roasts: Optional[Sequence[str]] = None,
) -> str:
    return json.dumps(run_to_dict(snapshot, report, roasts), indent=2)
