"""Random roast selection with a general-purpose fallback."""

import logging
import random
from enum import Enum
from typing import Iterable, List, Optional

from .corpus import Corpus

logger = logging.getLogger(__name__)

# Fewer roasts than this after the per-attribute pass gets one general line.
MIN_ROASTS = 3


class RoastSelector:
    """Draw roast lines from a corpus using an explicit random generator.

    Pass a seeded ``random.Random`` for reproducible output.
    """

    def __init__(self, corpus: Corpus, rng: Optional[random.Random] = None) -> None:
        self.corpus = corpus
        self._rng = rng if rng is not None else random.Random()

    def select(self, label: Enum) -> str:
        """Pick one line for a tier label, uniformly at random.

        Raises:
            CorpusError: If the corpus has no lines for the label.
        """
        return self._rng.choice(self.corpus.lines(label))

    def select_general(self) -> str:
        return self._rng.choice(self.corpus.general)


def build_roasts(labels: Iterable[Enum], selector: RoastSelector) -> List[str]:
    """Select one roast per label, in order, then apply the fallback.

    With a complete corpus each of the four attribute labels yields a line,
    so the general fallback is only reached when fewer labels are passed.
    """
    roasts = [selector.select(label) for label in labels]

    if len(roasts) < MIN_ROASTS:
        logger.debug(f"Only {len(roasts)} roasts selected, adding a general roast")
        roasts.append(selector.select_general())

    return roasts
