# algorithms
# The closed set of matching algorithms, keyed by the names selectors return.

from .boyer_moore import boyer_moore_search
from .hybrid import hybrid_search
from .kmp import kmp_search
from .naive import naive_search
from .rabin_karp import rabin_karp_search

NAIVE = "Naive"
KMP = "KMP"
RABIN_KARP = "RabinKarp"
BOYER_MOORE = "BoyerMoore"
HYBRID = "Hybrid"

ALGORITHMS = {
    NAIVE: naive_search,
    KMP: kmp_search,
    RABIN_KARP: rabin_karp_search,
    BOYER_MOORE: boyer_moore_search,
    HYBRID: hybrid_search,
}

__all__ = [
    "ALGORITHMS",
    "BOYER_MOORE",
    "HYBRID",
    "KMP",
    "NAIVE",
    "RABIN_KARP",
    "boyer_moore_search",
    "hybrid_search",
    "kmp_search",
    "naive_search",
    "rabin_karp_search",
]
