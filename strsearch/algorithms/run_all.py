import logging
import time

from . import ALGORITHMS

logger = logging.getLogger(__name__)


def summarize(matches):
    return {"found": bool(matches), "count": len(matches), "matches": matches}


def run_algorithm(name, text, pattern):
    """Run one algorithm, returning its timing and results."""
    start = time.perf_counter()
    matches = ALGORITHMS[name](text, pattern)
    elapsed = time.perf_counter() - start
    logger.debug("%s found %d match(es) in %.6fs", name, len(matches), elapsed)
    return {"time": elapsed, "results": summarize(matches)}


def run_all_algorithms(text, pattern) -> dict:
    results = {}
    for name in ALGORITHMS:
        results[name] = run_algorithm(name, text, pattern)
    return results
