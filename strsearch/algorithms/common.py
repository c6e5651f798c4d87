# common.py
# Input checks and conventions shared by every matching algorithm.


def check_inputs(text, pattern):
    """Reject inputs no algorithm can search meaningfully."""
    if text is None or pattern is None:
        raise TypeError("text and pattern must not be None")
    if isinstance(text, str) != isinstance(pattern, str):
        raise TypeError(
            f"cannot search for {type(pattern).__name__} pattern "
            f"in {type(text).__name__} text"
        )


def match_everywhere(n):
    """An empty pattern matches at every offset 0..n."""
    return list(range(n + 1))


def char_code(c):
    # bytes index to ints, str indexes to 1-char strings
    return c if isinstance(c, int) else ord(c)
