from dataclasses import dataclass
from typing import Optional, Tuple

from tetris_piece import Color


@dataclass(frozen=True)
class Block:
    """One cell of the active piece, ready to draw"""
    row: int
    column: int
    color: Color


@dataclass(frozen=True)
class GameState:
    """Read-only engine snapshot for the rendering layer"""
    board: Tuple[Tuple[Optional[str], ...], ...]
    cells: Tuple[Tuple[int, int], ...]
    t: str
    score: int
    lines: int
