# boyer_moore.py
# Boyer-Moore with both the bad-character and the good-suffix rule.
#
# The good-suffix shift is not bounded with Galil's rule, so the worst case
# stays O(n * m).

from .common import check_inputs, match_everywhere
from .tables import preprocess


def bad_char_shift(mismatched, j, bad_char):
    """Shift that lines up the last occurrence of the mismatched character."""
    return j - bad_char.get(mismatched, -1)


def good_suffix_shift(j, m, suffix, is_prefix):
    """Shift after a mismatch at pattern index j, given the matched suffix."""
    k = m - 1 - j  # length of the matched suffix
    if k <= 0:
        return 0

    # Another occurrence of the matched suffix inside the pattern
    if suffix[k] != -1:
        return j - suffix[k] + 1

    # A shorter suffix of the matched part that is also a prefix
    for r in range(k - 1, 0, -1):
        if is_prefix[r]:
            return m - r

    return m


def full_match_shift(m, is_prefix):
    """Shift after a full match: align the longest border of the pattern."""
    for r in range(m - 1, 0, -1):
        if is_prefix[r]:
            return m - r
    return m


def boyer_moore_search(text, pattern):
    """Finds a pattern in text using the Boyer-Moore method."""
    check_inputs(text, pattern)
    n = len(text)
    m = len(pattern)
    if m == 0:
        return match_everywhere(n)
    if m > n:
        return []

    tables = preprocess(pattern)
    matches = []
    i = 0

    while i <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[i + j]:
            j -= 1

        if j < 0:
            matches.append(i)
            shift = full_match_shift(m, tables.is_prefix)
        else:
            shift = max(
                bad_char_shift(text[i + j], j, tables.bad_char),
                good_suffix_shift(j, m, tables.suffix, tables.is_prefix),
            )

        i += max(shift, 1)

    return matches
