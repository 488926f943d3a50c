from expression import fmt_number
from queue_search import run_heuristic
from search import STRATEGIES, get_strategy
from heuristics import HEURISTICS

import argparse


def main(args):

    if args.heuristic is not None:
        best, explored = run_heuristic(
            args.target, args.numbers, args.heuristic,
            use_mem=args.mem, use_canonical=args.canonical, verbose=args.verbose
        )
    else:
        best, explored = get_strategy(args.strategy)(args.target, args.numbers)

    print("\ntarget:", fmt_number(args.target))
    print("numbers:", " ".join([fmt_number(n) for n in args.numbers]))
    print("best:", best)
    print("infix:", best.infix())
    print("distance:", fmt_number(best.dist))
    print("explored:", explored)
    if not best.exact():
        print("NO EXACT MATCH FOUND.")

    if args.show and not best.empty():
        print('')
        best.expr.show()

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Combine numbers with + - * / to reach a target')

    parser.add_argument('target', type=float, help='Value to reach')
    parser.add_argument('numbers', type=float, nargs='+', help='Numbers to use, each exactly once')
    parser.add_argument('--strategy', type=str, default="DFS MEM",
                    help='One of: '+", ".join(STRATEGIES.keys())+" (default: DFS MEM)")
    parser.add_argument('--heuristic', type=str, default=None, choices=list(HEURISTICS.keys()),
                    help='Run best-first search with this heuristic instead of --strategy')
    parser.add_argument('--mem', dest='mem', action='store_const', const=True, default=False,
                    help='With --heuristic, fill last slots from cached subtrees')
    parser.add_argument('--canonical', dest='canonical', action='store_const', const=True, default=False,
                    help='With --heuristic, skip operand orderings of + and * already covered')
    parser.add_argument('--show', dest='show', action='store_const', const=True, default=False,
                    help='Draw the best expression tree')
    parser.add_argument('--verbose', dest='verbose', action='store_const', const=True, default=False,
                    help='Print search progress')

    args = parser.parse_args()
    main(args)
