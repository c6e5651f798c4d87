# engine.py
# Entry points for running a search by name or by selection.

import logging
from typing import Optional

from .algorithms import ALGORITHMS
from .algorithms.run_all import run_algorithm, run_all_algorithms
from .analysis import HeuristicSelector, Selector
from .exceptions import UnknownAlgorithmError

logger = logging.getLogger(__name__)


def search(algorithm_name, text, pattern):
    """Run the named algorithm and return the ascending match offsets."""
    try:
        algorithm = ALGORITHMS[algorithm_name]
    except KeyError:
        raise UnknownAlgorithmError(algorithm_name, ALGORITHMS) from None
    return algorithm(text, pattern)


def search_auto(text, pattern, selector: Optional[Selector] = None) -> dict:
    """Search with whichever algorithm the selector picks.

    Returns ``{name: {"time": ..., "results": ...}}`` with one entry, or an
    entry for every algorithm when the selector declines to decide.
    """
    if selector is None:
        selector = HeuristicSelector()

    name = selector.choose_algorithm(text, pattern)
    if name is None:
        logger.info("No algorithm selected, running all of them")
        return run_all_algorithms(text, pattern)
    if name not in ALGORITHMS:
        raise UnknownAlgorithmError(name, ALGORITHMS)
    return {name: run_algorithm(name, text, pattern)}
