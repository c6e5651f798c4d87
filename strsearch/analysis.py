# analysis.py
# Static pattern analysis and algorithm selection.
#
# Selection never runs a search: it only looks at the text and pattern lengths
# and at the features of the pattern.

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .algorithms import BOYER_MOORE, HYBRID, KMP, NAIVE, RABIN_KARP
from .algorithms.common import char_code

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 256
SAMPLE_SIZE = 30
REPETITIVE_RATIO = 0.65

MIN_TEXT_NAIVE = 512
LARGE_TEXT_THRESHOLD = 10000
MIN_PATTERN_BM = 15
LONG_PATTERN = 50
VERY_LONG_PATTERN = 100


@dataclass(frozen=True)
class PatternFeatures:
    unique_chars: int
    repetition_ratio: float
    is_highly_repetitive: bool


def analyze_pattern(pattern):
    """Count distinct characters and measure how repetitive the pattern is.

    Only characters below ALPHABET_SIZE are counted as distinct. The
    repetition ratio is the share of the first SAMPLE_SIZE characters that
    equal the first character; it is 0.0 for an empty pattern.
    """
    seen = set()
    for c in pattern:
        code = char_code(c)
        if code < ALPHABET_SIZE:
            seen.add(code)

    sample = pattern[:SAMPLE_SIZE]
    if sample:
        first = sample[0]
        ratio = sum(1 for c in sample if c == first) / len(sample)
    else:
        ratio = 0.0

    return PatternFeatures(
        unique_chars=len(seen),
        repetition_ratio=ratio,
        is_highly_repetitive=ratio > REPETITIVE_RATIO,
    )


class Selector(Protocol):
    def choose_algorithm(self, text, pattern) -> Optional[str]:
        """Name the algorithm to run, or None to run all of them."""

    def describe_strategy(self) -> str:
        ...


class HeuristicSelector:
    """Pick an algorithm from input sizes and pattern features."""

    def choose_algorithm(self, text, pattern) -> str:
        name, reason = self._decide(text, pattern)
        logger.debug("Selected %s: %s", name, reason)
        return name

    def _decide(self, text, pattern):
        if text is None or pattern is None:
            return NAIVE, "missing input"

        n = len(text)
        m = len(pattern)

        if n < MIN_TEXT_NAIVE:
            return NAIVE, "short text"
        if m <= 1:
            return NAIVE, "empty or single-character pattern"
        if m <= 5:
            return NAIVE, "short pattern"

        features = analyze_pattern(pattern)

        if n > LARGE_TEXT_THRESHOLD:
            if m >= MIN_PATTERN_BM and features.unique_chars > 10:
                return BOYER_MOORE, "large text, long varied pattern"
            if features.is_highly_repetitive:
                return KMP, "large text, repetitive pattern"
            if m > VERY_LONG_PATTERN:
                return HYBRID, "large text, very long pattern"

        if LONG_PATTERN <= m < VERY_LONG_PATTERN:
            if features.is_highly_repetitive:
                return KMP, "long repetitive pattern"
            if features.unique_chars > 15:
                return BOYER_MOORE, "long varied pattern"
            if n > 5000:
                return RABIN_KARP, "long pattern, medium text"

        if m >= VERY_LONG_PATTERN:
            if features.is_highly_repetitive:
                return KMP, "very long repetitive pattern"
            return HYBRID, "very long pattern"

        if 6 <= m < LONG_PATTERN:
            if features.repetition_ratio > 0.6:
                return KMP, "medium repetitive pattern"
            if features.unique_chars > 10 and n > 2000 and m >= MIN_PATTERN_BM:
                return BOYER_MOORE, "medium varied pattern"
            if 1000 < n <= 5000 and m > 8:
                return RABIN_KARP, "medium pattern, medium text"

        return NAIVE, "no rule matched"

    def describe_strategy(self) -> str:
        return (
            "Naive for small inputs. Boyer-Moore for large texts with varied "
            "patterns. KMP for repetitive patterns. Hybrid for very long patterns."
        )


def select_algorithm(text, pattern):
    return HeuristicSelector().choose_algorithm(text, pattern)
