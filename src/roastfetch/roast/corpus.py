"""Roast line corpus loading and validation."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Dict, List, Mapping, Optional, Sequence, Tuple

import yaml
from pydantic import AfterValidator, BaseModel, Field, ValidationError

from .tiers import CpuTier, FormFactor, GpuTier, MemoryTier

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_PATH = Path(__file__).parent / "data" / "roasts.yaml"


class CorpusError(Exception):
    """Raised when a corpus cannot be loaded or has no lines for a category."""


def _check_lines(lines: list[str]) -> list[str]:
    seen = set()
    for line in lines:
        if not line.strip():
            raise ValueError("roast lines must not be blank")
        if line in seen:
            raise ValueError(f"duplicate roast line: {line!r}")
        seen.add(line)
    return lines


RoastLines = Annotated[list[str], Field(min_length=1), AfterValidator(_check_lines)]


class CpuLines(BaseModel):
    low: RoastLines
    mid: RoastLines
    high: RoastLines


class MemoryLines(BaseModel):
    low: RoastLines
    mid: RoastLines
    high: RoastLines


class GpuLines(BaseModel):
    integrated: RoastLines
    low_end: RoastLines
    high_end: RoastLines


class FormFactorLines(BaseModel):
    laptop: RoastLines
    desktop: RoastLines


class CorpusDocument(BaseModel):
    """Schema of a corpus YAML file."""

    cpu: CpuLines
    memory: MemoryLines
    gpu: GpuLines
    form_factor: FormFactorLines
    general: RoastLines


class Corpus:
    """Read-only mapping from tier label to its candidate lines."""

    def __init__(
        self,
        lines: Mapping[Enum, Sequence[str]],
        general: Sequence[str] = (),
    ) -> None:
        self._lines: Dict[Enum, Tuple[str, ...]] = {
            label: tuple(entries) for label, entries in lines.items()
        }
        self._general = tuple(general)

    @classmethod
    def from_document(cls, doc: CorpusDocument) -> "Corpus":
        return cls(
            {
                CpuTier.LOW: doc.cpu.low,
                CpuTier.MID: doc.cpu.mid,
                CpuTier.HIGH: doc.cpu.high,
                MemoryTier.LOW: doc.memory.low,
                MemoryTier.MID: doc.memory.mid,
                MemoryTier.HIGH: doc.memory.high,
                GpuTier.INTEGRATED: doc.gpu.integrated,
                GpuTier.LOW_END: doc.gpu.low_end,
                GpuTier.HIGH_END: doc.gpu.high_end,
                FormFactor.LAPTOP: doc.form_factor.laptop,
                FormFactor.DESKTOP: doc.form_factor.desktop,
            },
            general=doc.general,
        )

    def lines(self, label: Enum) -> Tuple[str, ...]:
        """Return the lines registered for a label.

        Raises:
            CorpusError: If the label has no lines.
        """
        entries = self._lines.get(label)
        if not entries:
            raise CorpusError(f"No roast lines for {type(label).__name__}.{label.name}")
        return entries

    @property
    def general(self) -> Tuple[str, ...]:
        if not self._general:
            raise CorpusError("No general roast lines")
        return self._general

    def labels(self) -> List[Enum]:
        return list(self._lines.keys())


def load_corpus(path: Optional[Path] = None) -> Corpus:
    """Load and validate a corpus YAML file.

    Args:
        path: Corpus file. Defaults to the bundled corpus.

    Raises:
        CorpusError: If the file cannot be read, parsed, or validated.
    """
    path = Path(path).expanduser() if path else DEFAULT_CORPUS_PATH
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise CorpusError(f"Corpus file not found: {path}") from None
    except yaml.YAMLError as e:
        raise CorpusError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(f"Cannot read corpus {path}: {e}") from e

    try:
        doc = CorpusDocument.model_validate(data)
    except ValidationError as e:
        raise CorpusError(f"Corpus validation failed for {path}: {e}") from e

    logger.debug(f"Loaded corpus from {path}")
    return Corpus.from_document(doc)
