"""
board layout shared by the engine and the computer opponent

cells are indexed 0-8, row-major:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
EMPTY = ''

CENTER = 4
CORNERS = (0, 2, 6, 8)

# rows, then columns, then diagonals; first match wins
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def find_winning_line(board):
    """
    scan the fixed lines in order, return the first full one or None
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


def empty_cells(board):
    return [i for i, cell in enumerate(board) if cell == EMPTY]


def index_to_row_col(index):
    return divmod(index, BOARD_SIZE)


def row_col_to_index(row, col):
    return row * BOARD_SIZE + col
