
"""Seedable piece randomizer"""
import random
from typing import Optional, Protocol, Sequence
from tetris_piece import PIECES

class PieceSource(Protocol):
    def next_piece(self) -> str: ...

class UniformRandom:
    """Independent uniform draws over the catalogue: no bag, no repeat rejection."""
    def __init__(self, seed: Optional[int] = None, pieces: Sequence[str] = PIECES):
        if not pieces:
            raise ValueError("empty piece set")
        self.pieces = tuple(pieces)
        self.seed = seed
        self._rand = random.Random(seed)

    def next_piece(self) -> str:
        return self._rand.choice(self.pieces)
