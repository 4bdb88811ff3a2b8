
"""Piece model: catalogue of tetrominoes, rotation states, active piece"""
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Mapping, List, Tuple

COLS, ROWS = 10, 20
SPAWN_ROW, SPAWN_COL = 0, 3

Offset = Tuple[int, int]
Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Tetromino:
    t: str
    rotations: Tuple[Tuple[Offset, ...], ...]
    color: Color

    def __post_init__(self):
        if not self.rotations:
            raise ValueError(f"{self.t}: no rotation states")
        for i, state in enumerate(self.rotations):
            if len(state) != 4:
                raise ValueError(f"{self.t}: rotation {i} has {len(state)} cells, expected 4")


def _kind(t: str, color: Color, *rotations) -> Tetromino:
    return Tetromino(t, tuple(tuple(r) for r in rotations), color)


# Offsets are (row, col) relative to the anchor.
CATALOGUE: Mapping[str, Tetromino] = MappingProxyType({
    k.t: k for k in (
        _kind("I", (0, 255, 255),
              [(0,0),(0,1),(0,2),(0,3)],
              [(-1,1),(0,1),(1,1),(2,1)]),
        _kind("O", (255, 255, 0),
              [(0,0),(0,1),(1,0),(1,1)]),
        _kind("T", (128, 0, 128),
              [(0,1),(1,0),(1,1),(1,2)],
              [(0,1),(1,1),(1,2),(2,1)],
              [(1,0),(1,1),(1,2),(2,1)],
              [(0,1),(1,0),(1,1),(2,1)]),
        _kind("L", (255, 165, 0),
              [(0,2),(1,0),(1,1),(1,2)],
              [(0,1),(0,2),(1,1),(2,1)],
              [(1,0),(1,1),(1,2),(2,0)],
              [(0,1),(1,1),(2,1),(2,2)]),
        _kind("J", (0, 0, 255),
              [(0,0),(1,0),(1,1),(1,2)],
              [(0,1),(0,2),(1,1),(2,1)],
              [(1,0),(1,1),(1,2),(2,2)],
              [(0,1),(1,1),(2,0),(2,1)]),
        _kind("S", (0, 255, 0),
              [(0,1),(0,2),(1,0),(1,1)],
              [(0,0),(1,0),(1,1),(2,1)]),
        _kind("Z", (255, 0, 0),
              [(0,0),(0,1),(1,1),(1,2)],
              [(0,1),(1,0),(1,1),(2,0)]),
    )
})

PIECES = tuple(CATALOGUE)


@dataclass
class Piece:
    t: str
    state: int
    row: int
    col: int

    @staticmethod
    def spawn(t: str) -> "Piece":
        if t not in CATALOGUE:
            raise KeyError(t)
        return Piece(t, 0, SPAWN_ROW, SPAWN_COL)

    @property
    def kind(self) -> Tetromino:
        return CATALOGUE[self.t]

    def offsets(self) -> Tuple[Offset, ...]:
        rots = self.kind.rotations
        return rots[self.state % len(rots)]

    def cells(self) -> List[Offset]:
        """Absolute (row, col) cells of the piece on the board."""
        return [(self.row + r, self.col + c) for r, c in self.offsets()]

    def moved(self, drow: int = 0, dcol: int = 0) -> "Piece":
        return replace(self, row=self.row + drow, col=self.col + dcol)

    def rotated(self) -> "Piece":
        return replace(self, state=(self.state + 1) % len(self.kind.rotations))
