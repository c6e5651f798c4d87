from hypothesis import strategies as st

# Small alphabets so that patterns actually occur, and overlap, in the text
texts = st.text(alphabet="ab", max_size=60) | st.text(alphabet="abcd", max_size=200)
patterns = st.text(alphabet="ab", max_size=8) | st.text(alphabet="abcd", max_size=4)
byte_strings = st.binary(max_size=80)


def reference_matches(text, pattern):
    """Every offset at which pattern starts, straight from startswith."""
    return [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]


@st.composite
def texts_with_slices(draw, max_pattern=30):
    """A text plus a pattern cut from it, sometimes with one character changed.

    Cutting the pattern from the text yields long patterns that still occur,
    often with internal repeats, which is what drives the good-suffix rule.
    """
    alphabet = draw(st.sampled_from(["ab", "abc", "abcdefgh", "a€é"]))
    text = draw(st.text(alphabet=alphabet, min_size=1, max_size=200))
    start = draw(st.integers(0, len(text) - 1))
    length = draw(st.integers(1, min(max_pattern, len(text) - start)))
    pattern = text[start : start + length]
    if draw(st.booleans()):
        i = draw(st.integers(0, len(pattern) - 1))
        pattern = pattern[:i] + draw(st.sampled_from(alphabet)) + pattern[i + 1 :]
    return text, pattern
