"""Interactive N-Queens game, backed by a BDD of the rules.

The board is indexed as `board[col][row]`.
Placing a queen restricts the rules to the
assignments where the queen's cell is TRUE.
Cells where a queen would make the rules FALSE
are marked as blocked, and left empty in the
rules. When exactly one solution
remains, the rest of the queens are placed.

```python
import qdd

game = qdd.Game()
game.initialize_game(8)
game.insert_queen(0, 0)
board = game.game_board()
```
"""
# Copyright 2026 by the qdd developers
# All rights reserved. Licensed under BSD-3.
#
import enum
import logging
import typing as _ty

import qdd.autoref as _autoref
import qdd.queens as _queens


logger = logging.getLogger(__name__)
# capacity of the node pool
NODES: _ty.Final = 2_000_000
# capacity of the operation table
CACHE: _ty.Final = NODES // 10
_SYMBOLS: _ty.Final = {
    -1: 'x',
    0: '.',
    1: 'Q'}


class InvalidSize(ValueError):
    """Board size is not a positive integer."""


class InvalidCoordinate(ValueError):
    """Cell outside the board."""


class Cell(enum.IntEnum):
    """State of a board cell."""

    BLOCKED = -1
    UNSET = 0
    QUEEN = 1


class Game:
    """N-Queens board, with the rules as a BDD.

    Attributes:

      - `size`: number of rows (and columns)
      - `bdd`: `qdd.autoref.BDD` of the current game
      - `rules`: `qdd.autoref.Function` with the
        assignments that remain consistent with
        the queens placed
      - `queens_placed`: number of queens on the board
      - `cells_blocked`: number of blocked cells

    The rules depend only on the unset cells.
    A new manager is created by each call
    to `initialize_game`.
    """

    def __init__(
            self,
            max_nodes:
                int=NODES,
            max_cache:
                int=CACHE):
        self.max_nodes = max_nodes
        self.max_cache = max_cache
        self.size = 0
        self.bdd = None
        self.rules = None
        self.queens_placed = 0
        self.cells_blocked = 0
        self._board = None

    def __str__(
            self
            ) -> str:
        if self._board is None:
            return 'N-Queens game (not initialized)'
        lines = list()
        for row in range(self.size):
            line = ''.join(
                _SYMBOLS[self._board[col][row]]
                for col in range(self.size))
            lines.append(line)
        return '\n'.join(lines)

    def initialize_game(
            self,
            size:
                int
            ) -> None:
        """Start a game on a `size x size` board."""
        valid = (
            isinstance(size, int) and
            not isinstance(size, bool) and
            size > 0)
        if not valid:
            raise InvalidSize(
                f'{size = } (expected integer > 0)')
        bdd = _autoref.BDD(size * size)
        bdd.configure(
            max_nodes=self.max_nodes,
            max_cache=self.max_cache)
        self.rules = _queens.queens_formula(bdd, size)
        self.bdd = bdd
        self.size = size
        self.queens_placed = 0
        self.cells_blocked = 0
        self._board = [
            [Cell.UNSET] * size
            for _ in range(size)]
        logger.info(
            f'new game with {size = }: '
            f'{self.solution_count()} solutions')

    @property
    def board(
            self
            ) -> list[list[Cell]]:
        """Return copy of the board, as `board[col][row]`."""
        self._assert_initialized()
        return [list(column) for column in self._board]

    def game_board(
            self
            ) -> list[list[int]]:
        """Return copy of the board, with `int` values.

        The values are -1 (blocked), 0 (unset), 1 (queen).
        """
        self._assert_initialized()
        return [
            [int(c) for c in column]
            for column in self._board]

    def insert_queen(
            self,
            col:
                int,
            row:
                int
            ) -> bool:
        """Place a queen at `col`, `row`, then update the board.

        Nothing changes if the cell is not unset.
        Return `True`.
        """
        self._assert_initialized()
        self._check_coordinate(col, row)
        if self._board[col][row] != Cell.UNSET:
            return True
        self._add_queen(col, row)
        n_solutions = self.solution_count()
        logger.info(
            f'queen at ({col}, {row}): '
            f'{n_solutions} solutions left')
        self._block_cells()
        if self.solution_count() == 1:
            self._add_remaining_queens()
        return True

    def solution_count(
            self
            ) -> int:
        """Return the number of solutions that remain.

        Counted over the unset cells,
        because the rules no longer depend on
        the cells with queens or blocked.
        """
        self._assert_initialized()
        nvars = (
            self.size**2 -
            self.queens_placed -
            self.cells_blocked)
        return self.bdd.count(self.rules, nvars)

    def is_complete(
            self
            ) -> bool:
        """Return `True` if the board holds a solution."""
        self._assert_initialized()
        return (
            self.queens_placed == self.size and
            self.rules.is_true)

    def _add_queen(self, col, row):
        """Restrict the rules to a queen at `col`, `row`."""
        pos = _queens.cell(row, col, self.size)
        self.rules = self.bdd.restrict(self.rules, pos, True)
        self._board[col][row] = Cell.QUEEN
        self.queens_placed += 1

    def _block_cells(self):
        """Mark and empty the cells where no queen fits anymore."""
        for row in range(self.size):
            for col in range(self.size):
                if self._board[col][row] != Cell.UNSET:
                    continue
                pos = _queens.cell(row, col, self.size)
                u = self.bdd.restrict(self.rules, pos, True)
                if not u.is_false:
                    continue
                self.rules = self.bdd.restrict(
                    self.rules, pos, False)
                self._board[col][row] = Cell.BLOCKED
                self.cells_blocked += 1
                logger.debug(f'blocked ({col}, {row})')

    def _add_remaining_queens(self):
        """Place a queen on each unset cell."""
        logger.debug('one solution left, completing the board')
        for row in range(self.size):
            for col in range(self.size):
                if self._board[col][row] == Cell.UNSET:
                    self._add_queen(col, row)

    def _check_coordinate(self, col, row):
        """Raise `InvalidCoordinate` if outside the board."""
        for k in (col, row):
            inside = (
                isinstance(k, int) and
                not isinstance(k, bool) and
                0 <= k < self.size)
            if not inside:
                raise InvalidCoordinate(
                    f'({col}, {row}) is outside the '
                    f'{self.size} x {self.size} board')

    def _assert_initialized(self):
        if self._board is None:
            raise RuntimeError(
                'call `initialize_game` first')
