"""Board helpers: create, collide, merge, sweep"""
from typing import List, Optional, Sequence
from tetris_piece import Piece, COLS, ROWS

Board = List[List[Optional[str]]]


def new_board(cols: int = COLS, rows: int = ROWS) -> Board:
    return [[None] * cols for _ in range(rows)]


def collide(board: Board, shape: Sequence[Sequence[int]], x: int, y: int) -> bool:
    rows, cols = len(board), len(board[0])
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if not v: continue
            bx, by = x + c, y + r
            if bx < 0 or bx >= cols or by >= rows: return True
            # rows above the top only count against the walls and floor
            if by >= 0 and board[by][bx]: return True
    return False


def merge(board: Board, piece: Piece):
    for bx, by in piece.cells():
        if by >= 0: board[by][bx] = piece.t


def sweep(board: Board) -> List[int]:
    """Remove full rows bottom-up and return the index of each removal.

    An index repeats when the row that slid down into it is full as well.
    """
    cleared = []
    cols = len(board[0])
    y = len(board) - 1
    while y >= 0:
        if all(board[y][x] is not None for x in range(cols)):
            del board[y]; board.insert(0, [None] * cols); cleared.append(y)
        else: y -= 1
    return cleared
