from best import Best
from search import STRATEGIES, get_strategy

from dataclasses import dataclass
import argparse
import csv
import os
import time

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


SAVE_FOLDER = "./evaluation_data/"

# (target, numbers)
SCENARIOS = [
    (25, [1, 2, 3, 4]),
    (525, [5, 7, 10, 13]),
    (25, [1, 2, 3, 4, 5]),
    (147, [4, 5, 8, 20, 27]),
    (432, [3, 5, 7, 11, 13]),
    (737, [1, 4, 5, 6, 7, 25]),
    (728, [6, 10, 25, 75, 5, 50]),
]

# six numbers blow up exhaustive search, only run those on request
MAX_DEFAULT_NUMBERS = 5

NS = 1000000000
MS = 1000
US = 1000000


@dataclass
class Metrics:
    best: Best
    explored: int
    time: int # nanoseconds

    def split_time(self):
        t = self.time
        s = t // NS
        t -= NS * s
        ms = t // (NS//MS)
        t -= NS//MS * ms
        us = t // (NS//US)
        t -= NS//US * us
        return s, ms, us, t

    def __str__(self):
        s, ms, us, ns = self.split_time()
        return (
            "best: " + str(self.best).rjust(30) +
            ", explored " + str(self.explored).rjust(10) + " nodes in " +
            str(s).zfill(3) + " . " + str(ms).zfill(3) + " " + str(us).zfill(3) + " " + str(ns).zfill(3) + " seconds"
        )


def run(task, target, numbers):
    """
    Time one strategy on one problem.
    :param task: Strategy, (target, numbers) -> (Best, explored)
    """
    begin = time.perf_counter_ns()
    best, explored = task(target, numbers)
    end = time.perf_counter_ns()
    return Metrics(best, explored, end - begin)


def run_test(target, numbers, strategies):
    """
    Run every strategy on a problem and print a report line for each.
    :return dict of label -> Metrics
    """
    print("target:", target)
    print("numbers:", " ".join([str(n) for n in numbers]))

    results = {}
    for label in strategies:
        m = run(get_strategy(label), target, numbers)
        print(label.ljust(18), m)
        results[label] = m
    print('')

    return results


def save_data(data: dict, filename: str, comment=None):

    data_len = len(list(data.values())[0])
    for val in data.values():
        if len(val) != data_len:
            raise ValueError("data must be same length.")

    header = list(data.keys())

    os.makedirs(SAVE_FOLDER, exist_ok=True)

    # write to csv
    with open(os.path.join(SAVE_FOLDER, filename), 'w', newline='') as csvfile:
        writer = csv.writer(csvfile, dialect='excel')

        if comment is not None:
            writer.writerow(['#'] + comment)

        # put header at top
        writer.writerow(header)

        for i in range(data_len):
            writer.writerow([data[h][i] for h in header])


def summarize(all_results, strategies):
    """
    Print the average explored count and how often each strategy hit the target.
    """
    explored = np.array([[res[s].explored for s in strategies] for res in all_results], dtype=np.float64)
    exact = np.array([[res[s].best.exact() for s in strategies] for res in all_results], dtype=np.float64)

    averages = np.sum(explored, axis=0) / explored.shape[0]
    exact_percs = np.sum(exact, axis=0) / exact.shape[0]

    print(" --- Averages ---")
    for i in range(len(strategies)):
        print(" -", str(strategies[i])+":", round(averages[i], 1), "nodes,", str(round(100*exact_percs[i], 1))+"% exact")
    print('')

    return averages, exact_percs


def plot_explored(all_results, problems, strategies, filename="explored.png"):
    """
    Grouped bar chart of explored nodes per problem, one bar per strategy.
    """
    explored = np.array([[res[s].explored for s in strategies] for res in all_results])
    x = np.arange(len(problems))
    width = 0.8 / len(strategies)

    plt.clf()
    fig, ax = plt.subplots()
    fig.set_size_inches(11, 5)
    for i in range(len(strategies)):
        ax.bar(x + i*width - 0.4 + width/2, explored[:, i], width, label=strategies[i])
    ax.set_xticks(x)
    ax.set_xticklabels([str(t) + "\n" + ",".join([str(n) for n in nums]) for t, nums in problems])
    ax.set_yscale("log")
    ax.set_ylabel("Explored nodes")
    ax.set_xlabel("Problem (target / numbers)")
    ax.set_title("Search Nodes Explored by Each Strategy")
    ax.legend(fontsize="small")
    fig.tight_layout()
    plt.savefig(filename)
    plt.close(fig)


def get_eval_data(problems, strategies, save_name=None, plot_name=None):

    all_results = []
    for target, numbers in problems:
        all_results.append(run_test(target, numbers, strategies))

    if save_name is not None:
        data = {"target": [], "numbers": []}
        for s in strategies:
            data[s + " explored"] = []
            data[s + " dist"] = []
        for (target, numbers), res in zip(problems, all_results):
            data["target"].append(target)
            data["numbers"].append(" ".join([str(n) for n in numbers]))
            for s in strategies:
                data[s + " explored"].append(res[s].explored)
                data[s + " dist"].append(res[s].best.dist)
        save_data(data, save_name, comment=["problems="+str(len(problems))])

    if len(all_results) > 0:
        summarize(all_results, strategies)

    if plot_name is not None:
        plot_explored(all_results, problems, strategies, filename=plot_name)

    return all_results


def main(args):

    problems = SCENARIOS
    if args.scenario is not None:
        problems = [SCENARIOS[i] for i in args.scenario]
    elif not args.all:
        problems = [p for p in SCENARIOS if len(p[1]) <= MAX_DEFAULT_NUMBERS]

    strategies = list(STRATEGIES.keys())
    if args.strategy is not None:
        strategies = args.strategy

    get_eval_data(problems, strategies, save_name=args.save, plot_name=args.plot)

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Benchmark the expression search strategies')

    parser.add_argument('--all', dest='all', action='store_const', const=True, default=False,
                    help='Also run the six-number scenarios (slow)')
    parser.add_argument('-s', '--scenario', type=int, nargs='+', default=None,
                    help='Indices of the scenarios to run')
    parser.add_argument('--strategy', type=str, nargs='+', default=None,
                    help='Strategies to compare: '+", ".join(STRATEGIES.keys()))
    parser.add_argument('--save', type=str, default=None,
                    help='CSV filename to save results in '+SAVE_FOLDER)
    parser.add_argument('--plot', type=str, default=None,
                    help='Filename of a bar chart of explored nodes')

    args = parser.parse_args()
    main(args)
