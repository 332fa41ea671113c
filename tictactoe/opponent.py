"""
Simple computer opponent.

Greedy one-ply choice by fixed priority: win now, block, center, a random
corner, then any random free cell. It does not search ahead and can be beaten.
"""

from .board import CENTER, CORNERS, EMPTY, WIN_LINES, empty_cells


def find_completing_move(board, mark):
    """
    first cell that would complete a line holding two of mark, else None
    """
    for line in WIN_LINES:
        cells = [board[i] for i in line]
        if cells.count(mark) == 2 and cells.count(EMPTY) == 1:
            return line[cells.index(EMPTY)]
    return None


def choose_move(board, mark, rng):
    """
    pick a cell for mark on board

    Args:
        board: 9 cells, each '', 'X' or 'O'.
        mark: the computer's mark.
        rng: random source with a choice(seq) method.

    Returns:
        A cell index, or None when the board is full.
    """
    opponent = 'O' if mark == 'X' else 'X'

    move = find_completing_move(board, mark)
    if move is not None:
        return move

    move = find_completing_move(board, opponent)
    if move is not None:
        return move

    if board[CENTER] == EMPTY:
        return CENTER

    corners = [i for i in CORNERS if board[i] == EMPTY]
    if corners:
        return rng.choice(corners)

    free = empty_cells(board)
    if free:
        return rng.choice(free)
    return None
