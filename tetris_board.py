
"""Board helpers: collide, merge, sweep, wipe"""
from typing import Optional, List
from tetris_piece import Piece, COLS, ROWS

Board = List[List[Optional[str]]]

def new_board() -> Board:
    return [[None] * COLS for _ in range(ROWS)]

def collide(board: Board, piece: Piece) -> bool:
    """Return True if piece hits a side wall, the floor, or a locked cell.

    Cells above the top row (r < 0) are only checked against the side walls.
    """
    for r, c in piece.cells():
        if c < 0 or c >= COLS or r >= ROWS: return True
        if r >= 0 and board[r][c]: return True
    return False

def merge(board: Board, piece: Piece) -> int:
    """Write the piece into the board, skipping cells outside it. Returns cells written."""
    n = 0
    for r, c in piece.cells():
        if 0 <= r < ROWS and 0 <= c < COLS:
            board[r][c] = piece.t; n += 1
    return n

def sweep(board: Board) -> int:
    """Clear full lines in one pass and return the number of cleared rows."""
    kept = [row for row in board if not all(row)]
    c = len(board) - len(kept)
    if c:
        board[:] = [[None] * COLS for _ in range(c)] + kept
    return c

def wipe(board: Board):
    for row in board:
        row[:] = [None] * COLS
