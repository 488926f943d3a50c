from expression import DivisionByZero
from best import Best
from brute_force import BruteForceInst


class MemoTable:
    """
    Run-scoped cache of complete subtrees.
    Maps the multiset of numbers a subtree consumes -> {value it evaluates to: subtree}.
    """

    def __init__(self):
        self.mem = {}

    def record(self, expr):
        """
        Cache an evaluable subtree under the numbers it uses. Divisions by zero are skipped.
        :param expr: Evaluable expression tree
        """
        try:
            outcome = expr.evaluate()
        except DivisionByZero:
            return
        key = expr.consumed_numbers()
        if key not in self.mem.keys():
            self.mem[key] = {}
        self.mem[key][outcome] = expr

    def lookup(self, numbers, value):
        """
        :param numbers: Multiset (sorted tuple) the subtree must consume
        :param value: Value the subtree must evaluate to
        :return Cached subtree or None
        """
        if numbers not in self.mem.keys():
            return None
        return self.mem[numbers].get(value)

    def complete(self, expr, numbers, target):
        """
        Try to finish a tree with exactly one open slot straight from the cache.
        :param expr: Tree with one open slot
        :param numbers: Numbers still to be placed in that slot
        :param target: Value the whole tree should reach
        :return The filled tree, or None on a miss
        """
        try:
            required = expr.required_value(target)
        except DivisionByZero:
            return None
        found = self.lookup(numbers, required)
        if found is None:
            return None
        return expr.fill_left(found)

    def __len__(self):
        return sum([len(v) for v in self.mem.values()])


class CachingInst(BruteForceInst):
    """
    Depth first search that remembers every complete subtree it builds and
    fills a last open slot directly when a remembered subtree has the value it needs.
    The table lives for one search() call and is shared by every branch.
    """

    def __init__(self, target, numbers):
        BruteForceInst.__init__(self, target, numbers)
        self.mem = MemoTable()

    def search(self):
        self.mem = MemoTable()
        return BruteForceInst.search(self)

    def dead_end(self, expr):
        self.mem.record(expr)

    def shortcut(self, expr, numbers):
        if expr.open_count() != 1:
            return None
        answer = self.mem.complete(expr, numbers, self.target)
        if answer is None:
            return None
        # a hit through a zero divisor or rounding does not really reach the target
        opt = Best(self.target, answer)
        if not opt.exact():
            return None
        return opt


def run_memoized(target, numbers):
    """
    :return (Best, number of explored search nodes)
    """
    inst = CachingInst(target, numbers)
    best = inst.search()
    return best, inst.explored


def main():
    best, explored = run_memoized(525, [5, 7, 10, 13])
    print("best:", best)
    print("explored:", explored)

if __name__ == '__main__':
    main()
