# hybrid.py
# Adaptive matcher: a Boyer-Moore-Horspool scan that hands over to KMP once
# it keeps shifting by one, the signature of Horspool's worst case.

import logging

from .common import check_inputs, match_everywhere
from .kmp import kmp_search_from
from .tables import build_bad_char_table, compute_lps

logger = logging.getLogger(__name__)


def horspool_phase(text, pattern, bad_char, matches):
    """Scan with Horspool shifts until the text ends or the scan degenerates.

    Returns the offset the scan stopped at. The scan gives up when the number
    of consecutive shift-by-one steps exceeds the pattern length; the window
    at the returned offset has not produced a match yet.
    """
    n = len(text)
    m = len(pattern)
    threshold = m
    small_shifts = 0
    i = 0

    while i <= n - m:
        j = m - 1
        while j >= 0 and text[i + j] == pattern[j]:
            j -= 1

        if j < 0:
            matches.append(i)
            # Step by one to catch overlapping matches
            i += 1
            small_shifts = 0
            continue

        # Horspool: shift on the last character of the window
        last = bad_char.get(text[i + m - 1])
        if last is None:
            shift = m
        else:
            shift = max(m - 1 - last, 1)

        if shift == 1:
            small_shifts += 1
            if small_shifts > threshold:
                break
        else:
            small_shifts = 0

        i += shift

    return i


def hybrid_search(text, pattern):
    """Finds a pattern in text with Horspool, falling back to KMP on bad input."""
    check_inputs(text, pattern)
    n = len(text)
    m = len(pattern)
    if m == 0:
        return match_everywhere(n)
    if m > n:
        return []

    bad_char = build_bad_char_table(pattern)
    lps = compute_lps(pattern)
    matches = []

    i = horspool_phase(text, pattern, bad_char, matches)
    if i <= n - m:
        logger.debug("Horspool scan degenerated at offset %d, switching to KMP", i)
        kmp_search_from(text, pattern, lps, i, matches)

    return matches
