from .common import char_code, check_inputs, match_everywhere

BASE = 256  # size of the input alphabet
# Small modulus: hash collisions are common, so every hit is verified
PRIME = 101


def rabin_karp_search(text, pattern, base=BASE, prime=PRIME):
    """Finds a pattern in text using the Rabin-Karp rolling hash."""
    check_inputs(text, pattern)
    n = len(text)
    m = len(pattern)
    if m == 0:
        return match_everywhere(n)
    if m > n:
        return []

    matches = []
    h = pow(base, m - 1, prime)
    p_hash = 0
    t_hash = 0

    for i in range(m):
        p_hash = (base * p_hash + char_code(pattern[i])) % prime
        t_hash = (base * t_hash + char_code(text[i])) % prime

    for i in range(n - m + 1):
        if p_hash == t_hash:
            if text[i:i + m] == pattern:
                matches.append(i)
        if i < n - m:
            # % with a positive modulus already lands in [0, prime)
            t_hash = (
                base * (t_hash - char_code(text[i]) * h) + char_code(text[i + m])
            ) % prime

    return matches
