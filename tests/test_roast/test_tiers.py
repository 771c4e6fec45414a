"""Tests for tier classification."""

import pytest

from roastfetch.hardware.detector import GPU_COMMAND_ERROR, GPU_NO_OUTPUT
from roastfetch.hardware.snapshot import TelemetrySnapshot
from roastfetch.roast.tiers import (
    CpuTier,
    FormFactor,
    GpuTier,
    MemoryTier,
    TierReport,
    classify,
    classify_cpu,
    classify_form_factor,
    classify_gpu,
    classify_memory,
)

GB = 1024**3


class TestClassifyCpu:
    @pytest.mark.parametrize(
        "cores,mhz,expected",
        [
            (4, 2000, CpuTier.MID),
            (4, 1999, CpuTier.LOW),
            (3, 5000, CpuTier.LOW),
            (8, 3000, CpuTier.HIGH),
            (8, 2999, CpuTier.MID),
            (7, 4000, CpuTier.MID),
            (16, 3600, CpuTier.HIGH),
        ],
    )
    def test_boundaries(self, cores, mhz, expected):
        assert classify_cpu(cores, mhz) is expected

    def test_many_slow_cores_is_low(self):
        assert classify_cpu(100, 500) is CpuTier.LOW
        assert classify_cpu(32, 1800) is CpuTier.LOW

    def test_few_fast_cores_is_low(self):
        assert classify_cpu(2, 5000) is CpuTier.LOW

    def test_zero_values(self):
        assert classify_cpu(0, 0) is CpuTier.LOW

    def test_total_over_grid(self):
        for cores in range(0, 70, 3):
            for mhz in range(0, 6000, 250):
                assert classify_cpu(cores, mhz) in CpuTier


class TestClassifyMemory:
    def test_boundaries(self):
        assert classify_memory(int(7.999 * GB)) is MemoryTier.LOW
        assert classify_memory(8 * GB) is MemoryTier.MID
        assert classify_memory(int(15.999 * GB)) is MemoryTier.MID
        assert classify_memory(16 * GB) is MemoryTier.HIGH

    def test_zero(self):
        assert classify_memory(0) is MemoryTier.LOW

    def test_large(self):
        assert classify_memory(512 * GB) is MemoryTier.HIGH


class TestClassifyGpu:
    @pytest.mark.parametrize(
        "name",
        [
            "AMD Radeon Graphics",
            "Intel Corporation UHD Graphics 630",
            "Integrated Graphics Controller",
            # "Intel" wins even when a discrete vendor string is present
            "NVIDIA GeForce GTX 1650 with Intel",
        ],
    )
    def test_integrated(self, name):
        assert classify_gpu(name) is GpuTier.INTEGRATED

    def test_radeon_graphics_with_rx_is_not_integrated(self):
        assert classify_gpu("AMD Radeon RX 6800") is GpuTier.HIGH_END
        assert classify_gpu("AMD Radeon Graphics RX") is not GpuTier.INTEGRATED

    @pytest.mark.parametrize(
        "name",
        [
            "NVIDIA GeForce GT 1030",
            "NVIDIA GeForce GTX 1660",
            "AMD Radeon RX 580",
            "AMD Radeon RX 470",
        ],
    )
    def test_low_end(self, name):
        assert classify_gpu(name) is GpuTier.LOW_END

    @pytest.mark.parametrize(
        "name",
        [
            "NVIDIA GeForce RTX 3080",
            "NVIDIA GeForce RTX 4090",
            "AMD Radeon RX 7900 XTX",
        ],
    )
    def test_high_end(self, name):
        assert classify_gpu(name) is GpuTier.HIGH_END

    @pytest.mark.parametrize(
        "name",
        [
            "",
            GPU_NO_OUTPUT,
            GPU_COMMAND_ERROR,
            "NVIDIA Corporation GA102",
            "Matrox Electronics Systems Ltd. G200eR2",
            "nvidia geforce rtx 3080",
        ],
    )
    def test_unknown_defaults_to_low_end(self, name):
        assert classify_gpu(name) is GpuTier.LOW_END


class TestClassifyFormFactor:
    def test_battery_is_laptop(self):
        assert classify_form_factor(True) is FormFactor.LAPTOP

    def test_no_battery_is_desktop(self):
        assert classify_form_factor(False) is FormFactor.DESKTOP


class TestClassify:
    def test_high_end_desktop(self):
        snap = TelemetrySnapshot(
            cpu_brand="AMD Ryzen 9 5950X",
            cpu_core_count=16,
            cpu_frequency_mhz=3600,
            total_memory_bytes=32 * GB,
            used_memory_bytes=10 * GB,
            gpu_name="NVIDIA GeForce RTX 3080",
            has_battery=False,
            os_name="Arch Linux",
            os_version="rolling",
        )
        report = classify(snap)
        assert report == TierReport(
            cpu=CpuTier.HIGH,
            memory=MemoryTier.HIGH,
            gpu=GpuTier.HIGH_END,
            form_factor=FormFactor.DESKTOP,
        )
        assert report.labels() == [CpuTier.HIGH, MemoryTier.HIGH, GpuTier.HIGH_END, FormFactor.DESKTOP]

    def test_worst_case_machine(self):
        snap = TelemetrySnapshot("Unknown", 0, 0, 0, 0, GPU_COMMAND_ERROR, True, "Unknown OS", "Unknown Version")
        report = classify(snap)
        assert report.cpu is CpuTier.LOW
        assert report.memory is MemoryTier.LOW
        assert report.gpu is GpuTier.LOW_END
        assert report.form_factor is FormFactor.LAPTOP

    def test_tiers_of_different_attributes_are_distinct(self):
        assert CpuTier.LOW != MemoryTier.LOW
        assert len({CpuTier.LOW, MemoryTier.LOW}) == 2
