"""Tests of the module `qdd.game`."""
import itertools
import logging

import pytest

from qdd import game as _game
from qdd.game import Cell, Game


def test_initialize_game():
    game = Game()
    game.initialize_game(4)
    assert game.size == 4, game.size
    assert game.queens_placed == 0, game.queens_placed
    board = game.game_board()
    assert board == [[0] * 4 for _ in range(4)], board
    assert game.solution_count() == 2, game.solution_count()
    assert not game.is_complete()
    d = game.bdd.configure()
    assert d['max_nodes'] == _game.NODES, d
    assert d['max_cache'] == _game.CACHE, d


@pytest.mark.parametrize(
    'n, count',
    [(1, 1), (2, 0), (3, 0), (4, 2), (5, 10), (6, 4), (7, 40)])
def test_initial_solution_count(n, count):
    game = Game()
    game.initialize_game(n)
    assert game.solution_count() == count, (n, game.solution_count())


@pytest.mark.parametrize('size', [0, -1, 2.5, '4', True, None])
def test_invalid_size(size):
    game = Game()
    with pytest.raises(_game.InvalidSize):
        game.initialize_game(size)
    with pytest.raises(ValueError):
        game.initialize_game(size)


def test_not_initialized():
    game = Game()
    with pytest.raises(RuntimeError):
        game.insert_queen(0, 0)
    with pytest.raises(RuntimeError):
        game.game_board()
    assert 'not initialized' in str(game), str(game)


def test_reinitialize():
    game = Game()
    game.initialize_game(4)
    game.insert_queen(1, 0)
    bdd = game.bdd
    game.initialize_game(5)
    assert game.bdd is not bdd
    assert game.size == 5, game.size
    assert game.queens_placed == 0, game.queens_placed
    assert game.game_board() == [[0] * 5 for _ in range(5)]
    assert game.solution_count() == 10, game.solution_count()


def test_blocked_cells():
    game = Game()
    game.initialize_game(5)
    r = game.insert_queen(0, 0)
    assert r is True, r
    board = game.game_board()
    # attacked cells
    for k in range(1, 5):
        # same column
        assert board[0][k] == -1, (k, board)
        # same row
        assert board[k][0] == -1, (k, board)
        # diagonal
        assert board[k][k] == -1, (k, board)
    # the cells of the two solutions with a queen at (0, 0)
    expected = [[-1] * 5 for _ in range(5)]
    expected[0][0] = 1
    unset = [
        (2, 1), (3, 1),
        (1, 2), (4, 2),
        (1, 3), (4, 3),
        (2, 4), (3, 4)]
    for col, row in unset:
        expected[col][row] = 0
    assert board == expected, board
    assert game.solution_count() == 2, game.solution_count()
    assert game.queens_placed == 1, game.queens_placed


def test_rules_depend_on_unset_cells():
    game = Game()
    game.initialize_game(5)
    game.insert_queen(0, 0)
    board = game.game_board()
    unset = {
        row * 5 + col
        for col, row in itertools.product(range(5), repeat=2)
        if board[col][row] == 0}
    assert len(unset) == 8, unset
    assert game.cells_blocked == 16, game.cells_blocked
    support = game.rules.support
    assert support <= unset, (support, unset)
    assert game.solution_count() == 2, game.solution_count()
    # the solution count matches the models over the unset cells
    models = list(game.bdd.pick_iter(game.rules, care_vars=unset))
    assert len(models) == 2, models
    game.insert_queen(2, 1)
    assert game.cells_blocked == 20, game.cells_blocked
    assert game.rules == game.bdd.true
    assert game.solution_count() == 1, game.solution_count()
    assert game.is_complete()


def test_corner_blocks_small_board():
    # no solution for 4 queens has a queen in a corner
    game = Game()
    game.initialize_game(4)
    game.insert_queen(0, 0)
    board = game.game_board()
    expected = [[-1] * 4 for _ in range(4)]
    expected[0][0] = 1
    assert board == expected, board
    assert game.solution_count() == 0, game.solution_count()
    assert game.rules.is_false
    assert not game.is_complete()


def test_insert_queen_idempotent():
    game = Game()
    game.initialize_game(5)
    game.insert_queen(0, 0)
    board = game.game_board()
    rules = game.rules
    r = game.insert_queen(0, 0)
    assert r is True, r
    assert game.game_board() == board
    assert game.rules == rules
    assert game.queens_placed == 1, game.queens_placed
    # blocked cell
    r = game.insert_queen(0, 1)
    assert r is True, r
    assert game.game_board() == board
    assert game.rules == rules


def test_invalid_coordinate():
    game = Game()
    game.initialize_game(4)
    board = game.game_board()
    rules = game.rules
    cells = [(4, 0), (0, 4), (-1, 0), (0, -1), (1.0, 0), (None, 2)]
    for col, row in cells:
        with pytest.raises(_game.InvalidCoordinate):
            game.insert_queen(col, row)
    assert game.game_board() == board
    assert game.rules == rules
    assert game.queens_placed == 0, game.queens_placed


def test_forced_completion():
    game = Game()
    game.initialize_game(5)
    game.insert_queen(0, 0)
    assert game.solution_count() == 2, game.solution_count()
    game.insert_queen(2, 1)
    board = game.game_board()
    # the queen in row `r` is at column `cols[r]`
    cols = [0, 2, 4, 1, 3]
    expected = [[-1] * 5 for _ in range(5)]
    for row, col in enumerate(cols):
        expected[col][row] = 1
    assert board == expected, board
    assert game.queens_placed == 5, game.queens_placed
    assert game.rules == game.bdd.true
    assert game.is_complete()
    assert_valid_solution(board)


def test_completion_after_first_queen():
    # only one solution for 6 queens has
    # a queen in row 0, column 1
    game = Game()
    game.initialize_game(6)
    game.insert_queen(1, 0)
    board = game.game_board()
    cols = [1, 3, 5, 0, 2, 4]
    for row, col in enumerate(cols):
        assert board[col][row] == 1, (col, row, board)
    assert game.queens_placed == 6, game.queens_placed
    assert game.is_complete()
    assert_valid_solution(board)
    # board is full
    values = {v for column in board for v in column}
    assert values == {-1, 1}, values
    # no effect after completion
    game.insert_queen(0, 0)
    assert game.game_board() == board


def test_single_cell_board():
    game = Game()
    game.initialize_game(1)
    game.insert_queen(0, 0)
    assert game.game_board() == [[1]]
    assert game.is_complete()


def test_solution_count_monotone():
    game = Game()
    game.initialize_game(5)
    counts = [game.solution_count()]
    moves = [(3, 4), (3, 4), (0, 1), (0, 0), (2, 1)]
    for col, row in moves:
        game.insert_queen(col, row)
        counts.append(game.solution_count())
    pairs = zip(counts[:-1], counts[1:])
    assert all(a >= b for a, b in pairs), counts
    assert counts[0] == 10, counts
    assert counts[1] == 2, counts
    assert counts[-1] == 1, counts
    assert game.is_complete()


def test_board_is_a_copy():
    game = Game()
    game.initialize_game(4)
    board = game.board
    assert board[0][0] is Cell.UNSET, board
    board[0][0] = Cell.QUEEN
    assert game.board[0][0] == Cell.UNSET
    board = game.game_board()
    board[1][1] = 1
    assert game.game_board()[1][1] == 0


def test_cell_values():
    assert Cell.UNSET == 0
    assert Cell.QUEEN == 1
    assert Cell.BLOCKED == -1


def test_str():
    game = Game()
    game.initialize_game(4)
    game.insert_queen(0, 0)
    s = str(game)
    lines = s.split('\n')
    assert lines[0] == 'Qxxx', s
    assert lines[1:] == ['xxxx'] * 3, s


def test_node_capacity():
    game = Game(max_nodes=10)
    with pytest.raises(RuntimeError):
        game.initialize_game(4)


def test_logging(caplog):
    game = Game()
    with caplog.at_level(logging.INFO, logger='qdd.game'):
        game.initialize_game(5)
        game.insert_queen(0, 0)
    assert 'solutions left' in caplog.text, caplog.text


def assert_valid_solution(board):
    """Assert that `board` has `n` queens that do not attack."""
    n = len(board)
    queens = [
        (col, row)
        for col, row in itertools.product(range(n), repeat=2)
        if board[col][row] == 1]
    assert len(queens) == n, queens
    for (c1, r1), (c2, r2) in itertools.combinations(queens, 2):
        assert r1 != r2, queens
        assert c1 != c2, queens
        assert abs(r1 - r2) != abs(c1 - c2), queens
