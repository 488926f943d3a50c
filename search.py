"""
Entry points of the search engine. Each strategy takes (target, numbers)
and returns (Best, number of explored search nodes).
"""

from brute_force import run_exhaustive
from caching_search import run_memoized
from queue_search import run_heuristic

from functools import partial


def heuristic_strategy(name, use_mem=False, use_canonical=False):
    return partial(_run_named, name, use_mem, use_canonical)

def _run_named(name, use_mem, use_canonical, target, numbers):
    return run_heuristic(target, numbers, name, use_mem=use_mem, use_canonical=use_canonical)


# label -> strategy, in report order
STRATEGIES = {
    "DFS": run_exhaustive,
    "DFS MEM": run_memoized,
    "SRCH CNT": heuristic_strategy("count"),
    "SRCH DIFF": heuristic_strategy("diff"),
    "SRCH DV LG": heuristic_strategy("ratio_large"),
    "SRCH DV SM": heuristic_strategy("ratio_small"),
    "SRCH DIFF MEM": heuristic_strategy("diff", use_mem=True),
    "SRCH DIFF UNIQ": heuristic_strategy("diff", use_canonical=True),
    "SRCH DIFF MEM UNIQ": heuristic_strategy("diff", use_mem=True, use_canonical=True),
}

def get_strategy(name):
    """
    Look up a strategy by label, case-insensitive, '_' accepted for ' '.
    """
    key = name.upper().replace('_', ' ')
    if key not in STRATEGIES.keys():
        raise ValueError("invalid strategy: "+str(name)+" (choose from "+", ".join(STRATEGIES.keys())+")")
    return STRATEGIES[key]
