import logging

from hypothesis import given
from strategies import patterns, reference_matches, texts

from strsearch.algorithms.hybrid import horspool_phase, hybrid_search
from strsearch.algorithms.kmp import kmp_search_from
from strsearch.algorithms.tables import build_bad_char_table, compute_lps

SWITCH_MESSAGE = "switching to KMP"


def test_horspool_phase_gives_up_after_too_many_unit_shifts():
    # Every window of a's mismatches at "b" and the window ends in "a",
    # whose last occurrence sits at m - 1, so each step shifts by one.
    pattern = "baaa"
    text = "a" * 50 + pattern
    matches = []
    stop = horspool_phase(text, pattern, build_bad_char_table(pattern), matches)
    # Unit shifts at offsets 0..4, the fifth exceeds the threshold of m = 4
    assert stop == 4
    assert matches == []


def test_horspool_phase_runs_to_the_end_on_easy_text():
    pattern = "needle"
    text = "haystack " * 20 + pattern
    matches = []
    stop = horspool_phase(text, pattern, build_bad_char_table(pattern), matches)
    assert stop > len(text) - len(pattern)
    assert matches == [180]


def test_fallback_to_kmp_finds_remaining_matches(caplog):
    pattern = "baaa"
    text = "a" * 50 + pattern + "a" * 10 + pattern
    with caplog.at_level(logging.DEBUG, logger="strsearch.algorithms.hybrid"):
        assert hybrid_search(text, pattern) == [50, 64]
    assert SWITCH_MESSAGE in caplog.text


def test_no_fallback_without_degeneration(caplog):
    with caplog.at_level(logging.DEBUG, logger="strsearch.algorithms.hybrid"):
        assert hybrid_search("ABABDABACDABABCABAB", "ABABCABAB") == [10]
    assert SWITCH_MESSAGE not in caplog.text


def test_phases_partition_the_matches():
    # The first match is found by the Horspool phase, the second by KMP
    pattern = "baaa"
    text = "xbaaa" + "a" * 50 + pattern
    matches = []
    stop = horspool_phase(text, pattern, build_bad_char_table(pattern), matches)
    assert matches == [1]
    assert stop == 6

    kmp_search_from(text, pattern, compute_lps(pattern), stop, matches)
    assert matches == [1, 55]
    assert hybrid_search(text, pattern) == [1, 55]


def test_overlaps_across_the_switch():
    pattern = "aab"
    text = "b" + "a" * 30 + "b" + "aab" * 3
    assert hybrid_search(text, pattern) == reference_matches(text, pattern)


@given(texts, patterns)
def test_hybrid_agrees_with_reference(text, pattern):
    assert hybrid_search(text, pattern) == reference_matches(text, pattern)
