"""
Reference heuristics for QueueSearch.

Every factory takes (target, numbers) and returns a function of a partial tree.
Lower scores are expanded sooner. None of these are admissible, they only order the frontier.
"""

import numpy as np


def remaining_count(target, numbers):
    # numbers not yet placed in the tree
    n = len(numbers)
    return lambda expr: n - len(expr.numbers())

def open_slots(target, numbers):
    return lambda expr: expr.open_count()

def difference(target, numbers):
    return lambda expr: abs(target - expr.evaluate_missing())


def _ratio(target, missing):
    if missing == 0:
        return np.inf if target != 0 else 1.
    return abs(target / missing)

def ratio_large(target, numbers):
    """
    |target / partial value| folded to be >= 1, so 1 means the partial value already matches.
    """
    def heuristic(expr):
        div = _ratio(target, expr.evaluate_missing())
        if div == 0:
            return np.inf
        if div < 1.:
            div = 1. / div
        return div
    return heuristic

def ratio_small(target, numbers):
    """
    |target / partial value| folded to be <= 1.
    """
    def heuristic(expr):
        div = _ratio(target, expr.evaluate_missing())
        if div > 1.:
            div = 1. / div
        return div
    return heuristic


HEURISTICS = {
    "count": remaining_count,
    "slots": open_slots,
    "diff": difference,
    "ratio_large": ratio_large,
    "ratio_small": ratio_small,
}

def get_heuristic(name, target, numbers):
    if name not in HEURISTICS.keys():
        raise ValueError("invalid heuristic: "+str(name))
    return HEURISTICS[name](target, numbers)
