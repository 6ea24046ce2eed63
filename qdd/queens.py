"""N-Queens rules as a binary decision diagram.

Cell `(row, col)` of an `n x n` board is
the variable `row * n + col`, which is TRUE
iff a queen is placed on that cell.
The rules are the conjunction of:

- for each cell, if the cell holds a queen,
  then the cells that it attacks are empty, and
- each row holds at least one queen.

Attacked cells are enumerated only forward
(towards larger columns, or larger rows in
the same column), because attack is symmetric.
A queen in each column follows from the rows
and the exclusions, so it is not asserted.


Reference
=========

[1] Henrik R. Andersen
    "An introduction to binary decision diagrams"
    Lecture notes for "Efficient Algorithms and Programs", 1999
    The IT University of Copenhagen
    Section 6.1
"""
# Copyright 2026 by the qdd developers
# All rights reserved. Licensed under BSD-3.
#
import logging
import typing as _ty

import qdd.autoref as _autoref


logger = logging.getLogger(__name__)
# (row, column) steps:
# down-right and up-right
_DIAGONALS: _ty.Final = ((1, 1), (-1, 1))


_Ref: _ty.TypeAlias = _autoref.Function


def queens_formula(
        bdd:
            _autoref.BDD,
        n:
            int
        ) -> _Ref:
    """Return the rules of the `n`-queens problem.

    The rule of each cell is conjoined in
    variable order, then the rows.

    @param bdd:
        manager with at least `n * n` variables
    """
    if bdd.var_num < n * n:
        raise ValueError(
            f'{n * n} variables needed for {n = }, '
            f'but only {bdd.var_num} are declared')
    rules = bdd.true
    for pos in range(n * n):
        rules &= cell_rule(bdd, pos, n)
    logger.debug(
        f'exclusion rules for {n = }: '
        f'{len(rules)} nodes')
    rules &= coverage_rule(bdd, n)
    logger.debug(
        f'rules for {n = }: {len(rules)} nodes, '
        f'{len(bdd)} nodes in manager')
    return rules


def coverage_rule(
        bdd:
            _autoref.BDD,
        n:
            int
        ) -> _Ref:
    """Return formula that each row has a queen."""
    rule = bdd.true
    for row in range(n):
        rule &= row_rule(bdd, row, n)
    return rule


def row_rule(
        bdd:
            _autoref.BDD,
        row:
            int,
        n:
            int
        ) -> _Ref:
    """Return formula that `row` has a queen."""
    rule = bdd.false
    for col in range(n):
        rule |= bdd.var(cell(row, col, n))
    return rule


def cell_rule(
        bdd:
            _autoref.BDD,
        pos:
            int,
        n:
            int
        ) -> _Ref:
    """Return formula that a queen at `pos` excludes others."""
    empty = bdd.true
    for other in excluded(pos, n):
        empty &= bdd.nvar(other)
    return bdd.var(pos).implies(empty)


def excluded(
        pos:
            int,
        n:
            int
        ) -> list[int]:
    """Return cells after `pos` that a queen at `pos` attacks."""
    return [
        *exclude_horizontal(pos, n),
        *exclude_vertical(pos, n),
        *exclude_diagonal(pos, n)]


def exclude_horizontal(
        pos:
            int,
        n:
            int
        ) -> list[int]:
    """Return cells in the row of `pos`, right of `pos`."""
    _, col = position(pos, n)
    return [pos + c for c in range(1, n - col)]


def exclude_vertical(
        pos:
            int,
        n:
            int
        ) -> list[int]:
    """Return cells in the column of `pos`, below `pos`."""
    row, _ = position(pos, n)
    return [pos + r * n for r in range(1, n - row)]


def exclude_diagonal(
        pos:
            int,
        n:
            int
        ) -> list[int]:
    """Return cells on the diagonals of `pos`, right of `pos`."""
    row, col = position(pos, n)
    cells = list()
    for dr, dc in _DIAGONALS:
        r = row + dr
        c = col + dc
        while 0 <= r < n and c < n:
            cells.append(cell(r, c, n))
            r += dr
            c += dc
    return cells


def cell(
        row:
            int,
        col:
            int,
        n:
            int
        ) -> int:
    """Return variable of cell at `row`, `col`."""
    return row * n + col


def position(
        pos:
            int,
        n:
            int
        ) -> tuple[int, int]:
    """Return `(row, col)` of variable `pos`."""
    return divmod(pos, n)
