"""Tests for JSON run output."""

import json

from roastfetch.hardware.snapshot import TelemetrySnapshot
from roastfetch.reporters.json_reporter import run_to_dict, run_to_json
from roastfetch.roast.tiers import classify

GB = 1024**3


def _snapshot(**overrides):
    fields = dict(
        cpu_brand="Intel Core i5-1135G7",
        cpu_core_count=8,
        cpu_frequency_mhz=2400,
        total_memory_bytes=16 * GB,
        used_memory_bytes=6 * GB,
        gpu_name="Intel Corporation TigerLake-LP GT2 [Iris Xe Graphics]",
        has_battery=True,
        os_name="Ubuntu",
        os_version="22.04",
    )
    fields.update(overrides)
    return TelemetrySnapshot(**fields)


class TestRunToDict:
    def test_contains_system_and_tiers(self):
        snap = _snapshot()
        data = run_to_dict(snap, classify(snap))
        assert data["system"]["cpu_brand"] == "Intel Core i5-1135G7"
        assert data["system"]["total_memory_gb"] == 16.0
        assert data["system"]["used_memory_gb"] == 6.0
        assert data["tiers"] == {
            "cpu": "Mid",
            "memory": "High",
            "gpu": "Integrated",
            "form_factor": "Laptop",
        }
        assert "roasts" not in data

    def test_includes_roasts(self):
        snap = _snapshot()
        data = run_to_dict(snap, classify(snap), ["one", "two", "three", "four"])
        assert data["roasts"] == ["one", "two", "three", "four"]


class TestRunToJson:
    def test_round_trips_through_json(self):
        snap = _snapshot(has_battery=False)
        parsed = json.loads(run_to_json(snap, classify(snap), ["a"]))
        assert parsed["tiers"]["form_factor"] == "Desktop"
        assert parsed["system"]["has_battery"] is False
        assert parsed["roasts"] == ["a"]
