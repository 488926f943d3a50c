from expression import OPERATIONS, OpenNode, LeafNode, Node
from best import Best, better


def as_multiset(numbers):
    """
    Sorted tuple holding every number, duplicates included.
    """
    numbers = tuple(sorted(numbers))
    if len(numbers) == 0:
        raise ValueError("need at least one number to search over")
    return numbers

def distinct(numbers):
    # equal values give identical children, so expand each value once
    return list(dict.fromkeys(numbers))

def take(numbers, number):
    """
    Remove one occurrence of number from the multiset.
    """
    i = numbers.index(number)
    return numbers[:i] + numbers[i+1:]

def children(expr, numbers):
    """
    Yield every (tree, remaining numbers) reachable by filling the left-most open slot once.
    Number fills come first, then one fresh node per operation.
    """
    for number in distinct(numbers):
        yield expr.fill_left(LeafNode(number)), take(numbers, number)

    # an extra operation only helps if there are numbers left over for its new slot
    if expr.open_count() < len(numbers):
        for op in OPERATIONS:
            yield expr.fill_left(Node(op)), numbers


class BruteForceInst:
    """
    Exhaustive depth first search over every expression that uses all of the numbers.
    """

    def __init__(self, target, numbers):
        """
        :param target: Value to reach
        :param numbers: Numbers to place, each used exactly once (ex. [1, 2, 3, 4])
        """
        self.target = target
        self.numbers = as_multiset(numbers)
        self.explored = 0 # search tree nodes visited in the last run

    def search(self):
        """
        Run the search from a single open slot.
        :return The closest Best found
        """
        self.explored = 0
        return self.dfs(OpenNode(), self.numbers, Best(self.target))

    def dfs(self, expr, numbers, best):
        self.explored += 1

        if len(numbers) == 0 and expr.evaluable():
            # in this case we're on a leaf
            current = Best(self.target, expr)
            if better(current, best):
                best = current

        elif len(numbers) > 0 and expr.evaluable():
            # complete subtree but numbers left over, can't go further
            self.dead_end(expr)

        elif len(numbers) > 0:
            shortcut = self.shortcut(expr, numbers)
            if shortcut is not None:
                if better(shortcut, best):
                    best = shortcut
                return best

            for child, next_numbers in children(expr, numbers):
                opt = self.dfs(child, next_numbers, best)
                if better(opt, best):
                    best = opt
                # lucky stop
                if best.exact():
                    return best

        return best

    def dead_end(self, expr):
        # hook for subclasses
        pass

    def shortcut(self, expr, numbers):
        # hook for subclasses, return a Best to stop expanding this branch
        return None


def run_exhaustive(target, numbers):
    """
    :return (Best, number of explored search nodes)
    """
    inst = BruteForceInst(target, numbers)
    best = inst.search()
    return best, inst.explored


def main():
    best, explored = run_exhaustive(25, [1, 2, 3, 4])
    print("best:", best)
    print("infix:", best.infix())
    print("explored:", explored)

if __name__ == '__main__':
    main()
