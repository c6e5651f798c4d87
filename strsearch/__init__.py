"""Exact substring search with several algorithms and a static selector."""

from .algorithms import (
    ALGORITHMS,
    BOYER_MOORE,
    HYBRID,
    KMP,
    NAIVE,
    RABIN_KARP,
    boyer_moore_search,
    hybrid_search,
    kmp_search,
    naive_search,
    rabin_karp_search,
)
from .analysis import (
    HeuristicSelector,
    PatternFeatures,
    Selector,
    analyze_pattern,
    select_algorithm,
)
from .engine import search, search_auto
from .exceptions import StrSearchError, UnknownAlgorithmError

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS",
    "BOYER_MOORE",
    "HYBRID",
    "KMP",
    "NAIVE",
    "RABIN_KARP",
    "HeuristicSelector",
    "PatternFeatures",
    "Selector",
    "StrSearchError",
    "UnknownAlgorithmError",
    "analyze_pattern",
    "boyer_moore_search",
    "hybrid_search",
    "kmp_search",
    "naive_search",
    "rabin_karp_search",
    "search",
    "search_auto",
    "select_algorithm",
]
