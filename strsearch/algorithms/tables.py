# tables.py
# Pattern preprocessing shared by KMP, Boyer-Moore and the hybrid matcher.
#
# Every builder is a pure function of the pattern. The tables are built per
# search call and never mutated afterwards.

from dataclasses import dataclass


def compute_lps(pattern):
    """Longest proper prefix which is also a suffix, for every prefix of pattern.

    ``lps[i]`` is the length of the longest proper prefix of ``pattern[:i + 1]``
    that is also a suffix of it. An empty pattern gives an empty table.
    """
    m = len(pattern)
    lps = [0] * m
    length = 0
    i = 1
    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        else:
            if length != 0:
                length = lps[length - 1]
            else:
                lps[i] = 0
                i += 1
    return lps


def build_bad_char_table(pattern):
    """Map each character of pattern to the last index it occurs at."""
    bad_char = {}
    for i, c in enumerate(pattern):
        bad_char[c] = i
    return bad_char


def build_good_suffix_tables(pattern):
    """Build the ``suffix`` and ``is_prefix`` tables for the good-suffix rule.

    For a suffix length ``k`` in ``1..m-1``:

    * ``suffix[k]`` is the start index of another occurrence of the length-k
      suffix inside the pattern (the rightmost one found), or -1.
    * ``is_prefix[k]`` is True when the length-k suffix is also a prefix.

    Index 0 of both tables is unused.
    """
    m = len(pattern)
    suffix = [-1] * m
    is_prefix = [False] * m

    # Match pattern[:i + 1] backwards against the suffixes ending at m - 1
    for i in range(m - 1):
        j = i
        k = 0
        while j >= 0 and pattern[j] == pattern[m - 1 - k]:
            j -= 1
            k += 1
            suffix[k] = j + 1
        if j == -1 and k > 0:
            is_prefix[k] = True

    return suffix, is_prefix


@dataclass(frozen=True)
class Preprocessing:
    """The three Boyer-Moore tables for one pattern."""

    bad_char: dict
    suffix: list
    is_prefix: list


def preprocess(pattern):
    suffix, is_prefix = build_good_suffix_tables(pattern)
    return Preprocessing(
        bad_char=build_bad_char_table(pattern),
        suffix=suffix,
        is_prefix=is_prefix,
    )
