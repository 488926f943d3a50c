from expression import DivisionByZero, fmt_number, infix

import numpy as np


# value given to candidates whose evaluation divides by zero
FALLBACK_VALUE = 0.


class Best:
    """
    Closest-to-target complete expression seen so far in a search.
    An empty Best (expr=None) is infinitely far from the target.
    """

    def __init__(self, target, expr=None):
        """
        :param target: Value the search is trying to reach
        :param expr: Evaluable expression tree, or None for the empty state
        """
        self.target = target
        self.expr = expr
        self.value = None
        self.dist = np.inf

        if expr is not None:
            try:
                self.value = expr.evaluate()
            except DivisionByZero:
                self.value = FALLBACK_VALUE
            self.dist = abs(self.value - target)

    def empty(self):
        return self.expr is None

    def exact(self):
        # lucky stop condition
        return self.dist == 0

    def infix(self):
        if self.expr is None:
            return ""
        return infix(self.expr)

    def __str__(self):
        if self.expr is None:
            return "None"
        return str(self.expr) + " = " + fmt_number(self.value)

    def __repr__(self):
        return "<Best " + str(self) + ", dist " + fmt_number(self.dist) + ">"


def better(lhs: Best, rhs: Best) -> bool:
    """
    True if lhs is strictly closer to the target than rhs. Ties keep rhs.
    """
    return lhs.dist < rhs.dist
