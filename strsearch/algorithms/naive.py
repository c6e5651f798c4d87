from .common import check_inputs


def naive_search(text, pattern):
    """Finds every occurrence of pattern by checking each alignment in turn."""
    check_inputs(text, pattern)
    n = len(text)
    m = len(pattern)
    matches = []

    # With an empty pattern the inner loop never runs and every offset matches
    for i in range(n - m + 1):
        j = 0
        while j < m:
            if text[i + j] != pattern[j]:
                break
            j += 1
        if j == m:
            matches.append(i)

    return matches
