"""N-Queens rules built with the BDD of `qdd`.

Prints the time to build the rules,
the number of nodes, and the number of solutions,
for each board size up to `n_max`.


Reference
=========

[1] Henrik R. Andersen
    "An introduction to binary decision diagrams"
    Lecture notes for "Efficient Algorithms and Programs", 1999
    The IT University of Copenhagen
    Section 6.1
"""
import time

import qdd
import qdd.queens as _queens


def solve_queens(n):
    """Return the rules for the `n`-queens problem.

    @rtype:
        `Function`, `BDD`
    """
    bdd = qdd.BDD(n * n)
    u = _queens.queens_formula(bdd, n)
    return u, bdd


def benchmark(n):
    """Run for `n` queens and print statistics."""
    t0 = time.perf_counter()
    u, bdd = solve_queens(n)
    t1 = time.perf_counter()
    dt = t1 - t0
    s = (
        '------\n'
        f'queens: {n}\n'
        f'time: {dt} (sec)\n'
        f'solutions: {bdd.count(u, n * n)}\n'
        f'nodes of rules: {len(u)}\n'
        f'total nodes: {len(bdd)}\n'
        '------\n')
    print(s)
    return dt


def _example():
    n_max = 6
    times = dict()
    for n in range(1, n_max + 1):
        times[n] = benchmark(n)
    return times


if __name__ == '__main__':
    _example()
