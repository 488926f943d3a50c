from expression import OPERATIONS

from collections import Counter
import math

def n(c, mem=None):
    """
    Return the number of possible binary tree shapes with c operations.
    """
    if mem is None:
        mem = {}
    if c in mem.keys():
        return mem[c]

    answer = None
    if c == 0:
        answer = 1
    else:
        # a operations on the left, the rest minus the root on the right
        answer = sum([
            n(a, mem) * n(c-1-a, mem) for a in range(0, c)
        ])

    mem[c] = answer
    return answer

def orderings(numbers):
    """
    Number of distinct left-to-right orders of a multiset of numbers.
    """
    count = math.factorial(len(numbers))
    for m in Counter(numbers).values():
        count //= math.factorial(m)
    return count

def count_expressions(numbers):
    """
    Number of distinct complete expression trees that use every number exactly once.
    """
    if len(numbers) == 0:
        return 0
    c = len(numbers) - 1
    return n(c) * len(OPERATIONS.ALL)**c * orderings(numbers)

def main():
    print("\nNumbers -> Tree Shapes -> Expressions (distinct numbers) \n")
    for i in range(1, 9):
        print(i, "->", n(i-1), "->", '{:.5E}'.format(count_expressions(list(range(i)))))
    print('')

if __name__ == "__main__":
    main()
