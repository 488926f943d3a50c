from expression import OpenNode
from best import Best, better
from brute_force import as_multiset, children
from caching_search import MemoTable
from heuristics import get_heuristic

from dataclasses import dataclass, field
import heapq
import time


# seconds between progress prints when verbose
PRINT_INTERVAL = 0.25


@dataclass(order=True)
class PrioritizedState:
    # search state wrapped with its heuristic score, ties go first-in first-out
    priority: float = field(compare=True)
    seq: int = field(compare=True)
    expr: object = field(compare=False)
    numbers: tuple = field(compare=False)


class QueueSearch:
    """
    Greedy best-first search. The frontier is ordered by the heuristic score alone,
    there is no accumulated path cost.
    """

    def __init__(self, target, numbers, heuristic, use_mem=False, use_canonical=False, verbose=False):
        """
        :param target: Value to reach
        :param numbers: Numbers to place, each used exactly once
        :param heuristic: Function of a partial tree -> score, or a name from heuristics.HEURISTICS
        :param use_mem: Fill last open slots from a memo of complete subtrees
        :param use_canonical: Drop partial trees whose commutative operands are out of order
        :param verbose: Print progress while searching
        """
        self.target = target
        self.numbers = as_multiset(numbers)
        if isinstance(heuristic, str):
            heuristic = get_heuristic(heuristic, target, self.numbers)
        self.heuristic = heuristic
        self.use_mem = use_mem
        self.use_canonical = use_canonical
        self.verbose = verbose

        self.explored = 0
        self.mem = MemoTable()
        self._q = []
        self._seq = 0

    def _push(self, expr, numbers):
        self._seq += 1
        heapq.heappush(self._q, PrioritizedState(
            self.heuristic(expr),
            self._seq,
            expr,
            numbers
        ))

    def emplace(self, expr, numbers, best):
        """
        Score a generated child: complete trees go to the tracker (and memo), the rest to the frontier.
        :return The updated best
        """
        self.explored += 1

        if expr.evaluable():
            if len(numbers) == 0:
                opt = Best(self.target, expr)
                if better(opt, best):
                    best = opt
            if self.use_mem:
                self.mem.record(expr)

        elif not self.use_canonical or expr.canonical():
            self._push(expr, numbers)

        return best

    def search(self):
        """
        :return The closest Best found
        """
        best = Best(self.target)
        self.explored = 0
        self.mem = MemoTable()
        self._q = []
        self._seq = 0

        root = OpenNode()
        self._push(root, self.numbers)
        self.explored += 1

        iteration = 0
        last_time = time.time_ns()
        while len(self._q) > 0 and not best.exact():
            iteration += 1

            # unpack from queue
            curr = heapq.heappop(self._q)

            # verbose stuff
            if self.verbose:
                new_time = time.time_ns()
                if iteration == 1 or (new_time-last_time)*1e-9 >= PRINT_INTERVAL:
                    last_time = new_time
                    print("\niteration:", iteration)
                    print("frontier:", len(self._q))
                    print("explored:", self.explored)
                    print("current:", curr.expr, "("+str(curr.priority)+")")
                    print("best:", best)

            if self.use_mem and curr.expr.open_count() == 1:
                answer = self.mem.complete(curr.expr, curr.numbers, self.target)
                if answer is not None:
                    opt = Best(self.target, answer)
                    # cache hit is taken as the answer
                    if opt.exact():
                        best = opt
                        break

            for child, next_numbers in children(curr.expr, curr.numbers):
                best = self.emplace(child, next_numbers, best)

        if self.verbose:
            print("\nfinished after", iteration, "iterations, explored", self.explored)
            print("best:", best)

        return best


def run_heuristic(target, numbers, heuristic, use_mem=False, use_canonical=False, verbose=False):
    """
    :return (Best, number of explored search nodes)
    """
    engine = QueueSearch(target, numbers, heuristic, use_mem=use_mem, use_canonical=use_canonical, verbose=verbose)
    best = engine.search()
    return best, engine.explored


def main():
    best, explored = run_heuristic(525, [5, 7, 10, 13], "diff", use_mem=True, use_canonical=True, verbose=True)
    print("\nbest:", best)
    print("explored:", explored)

if __name__ == '__main__':
    main()
