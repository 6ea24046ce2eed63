"""Place queens one at a time, and print the board.

Cells marked `x` are blocked: no solution
remains with a queen there. When a single
solution remains, the board is completed.
"""
import logging

import qdd


def play(n, moves):
    """Place a queen at each `(col, row)` in `moves`."""
    game = qdd.Game()
    game.initialize_game(n)
    print(f'{n} queens: {game.solution_count()} solutions\n')
    for col, row in moves:
        game.insert_queen(col, row)
        print(
            f'queen at column {col}, row {row}: '
            f'{game.solution_count()} solutions left')
        print(game, end='\n\n')
        if game.is_complete():
            print('solved')
            break


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    play(6, [(2, 0), (0, 1)])
