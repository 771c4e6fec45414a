"""Tier classification and roast selection."""

from .corpus import Corpus, CorpusError, load_corpus
from .selector import MIN_ROASTS, RoastSelector, build_roasts
from .tiers import (
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

__all__ = [
    "MIN_ROASTS",
    "Corpus",
    "CorpusError",
    "CpuTier",
    "FormFactor",
    "GpuTier",
    "MemoryTier",
    "RoastSelector",
    "TierReport",
    "build_roasts",
    "classify",
    "classify_cpu",
    "classify_form_factor",
    "classify_gpu",
    "classify_memory",
    "load_corpus",
]
