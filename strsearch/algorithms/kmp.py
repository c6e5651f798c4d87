from .common import check_inputs, match_everywhere
from .tables import compute_lps


def kmp_search_from(text, pattern, lps, start, matches):
    """Run the KMP scan from text offset ``start``, appending hits to matches.

    The scan begins with pattern index 0, so nothing before ``start`` is
    re-examined. ``pattern`` must not be empty.
    """
    n = len(text)
    m = len(pattern)
    i = start
    j = 0

    while i < n:
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == m:
                matches.append(i - m)
                # Keep the border so overlapping matches are found
                j = lps[j - 1]
        else:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1


def kmp_search(text, pattern):
    """Finds a pattern in text using the Knuth-Morris-Pratt (KMP) method."""
    check_inputs(text, pattern)
    n = len(text)
    m = len(pattern)
    if m == 0:
        return match_everywhere(n)
    if m > n:
        return []

    matches = []
    kmp_search_from(text, pattern, compute_lps(pattern), 0, matches)
    return matches
