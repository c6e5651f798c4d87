# exceptions.py
# Errors raised by the search engine.


class StrSearchError(Exception):
    """Base class for every error raised by strsearch."""


class UnknownAlgorithmError(StrSearchError, ValueError):
    """Raised when a search is requested for a name not in ALGORITHMS."""

    def __init__(self, name, known):
        self.name = name
        self.known = tuple(known)
        super().__init__(
            f"Unknown algorithm {name!r}, expected one of: {', '.join(self.known)}"
        )
