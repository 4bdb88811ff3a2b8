"""
Classic Tetris: Engine
======================

This module holds the game engine: the board, the falling piece, the score,
and every rule that moves them. It knows nothing about windows, keys or
clocks. A host (see main.py) reads the state between operations and calls
the mutation methods on user input or when its timer fires.

-------------------------------------------------------------
RULES IN SHORT
-------------------------------------------------------------

  • Board is 20 rows x 10 columns (tetris_piece.ROWS / COLS)
  • Pieces spawn at row 0, column 3 in rotation 0, kind drawn uniformly
  • move_left / move_right / rotate apply only when the result fits,
    otherwise nothing happens
  • drop (and tick) moves one row down; if it can't, the piece locks,
    full rows clear (+100 each) and the next piece spawns
  • hard_drop falls all the way, then locks the same way
  • If a spawned piece already collides, the board is wiped and the
    score reset; play continues with that piece

Rotation never tries kick offsets. A tall piece next to a wall or on the
floor may be unable to rotate at all; that is how the game plays.

-------------------------------------------------------------
TIMING
-------------------------------------------------------------

The engine never schedules anything itself. attach() hands tick() and the
period to a Scheduler the host supplies (tetris_timer.PygameTickTimer for
the pygame host, or any object with start/stop). Ticks and user operations
must arrive one at a time; each call finishes its lock/clear/spawn cascade
before returning.
"""

from __future__ import annotations
import logging
from typing import Callable, List, Optional, Protocol, Tuple

from tetris_board import Board, collide, merge, new_board, sweep, wipe
from tetris_config import CONFIG
from tetris_piece import CATALOGUE, Piece
from tetris_rng import PieceSource, UniformRandom
from tetris_state import Block, GameState

log = logging.getLogger(__name__)


class Scheduler(Protocol):
    """Periodic clock owned by the host."""

    def start(self, callback: Callable[[], None], interval_ms: int) -> None: ...

    def stop(self) -> None: ...


class Engine:
    def __init__(self, rng: Optional[PieceSource] = None, period_ms: Optional[int] = None):
        self.rng: PieceSource = rng if rng is not None else UniformRandom(CONFIG["SEED"])
        self.period_ms: int = int(CONFIG["TICK_MS"] if period_ms is None else period_ms)
        self.board: Board = new_board()
        self.score = 0
        self.lines = 0
        self.resets = 0
        self.scheduler: Optional[Scheduler] = None
        self.current: Piece = self.spawn()

    # ---------- timer wiring ----------
    def attach(self, scheduler: Scheduler):
        self.detach()
        self.scheduler = scheduler
        scheduler.start(self.tick, self.period_ms)

    def detach(self):
        if self.scheduler is not None:
            self.scheduler.stop()
            self.scheduler = None

    # ---------- user operations ----------
    def _try(self, test: Piece) -> bool:
        if collide(self.board, test):
            return False
        self.current = test
        return True

    def move_left(self):
        self._try(self.current.moved(dcol=-1))

    def move_right(self):
        self._try(self.current.moved(dcol=1))

    def rotate(self):
        self._try(self.current.rotated())

    def drop(self):
        """One row of gravity; lock, clear and spawn when blocked."""
        if not self._try(self.current.moved(drow=1)):
            self.lock()
            self.clear_lines()
            self.spawn()

    tick = drop

    def hard_drop(self):
        while self._try(self.current.moved(drow=1)):
            pass
        self.lock()
        self.clear_lines()
        self.spawn()

    def reset(self):
        wipe(self.board)
        self.score = 0
        self.lines = 0
        self.spawn()

    # ---------- piece lifecycle ----------
    def lock(self):
        merge(self.board, self.current)

    def clear_lines(self) -> int:
        c = sweep(self.board)
        if c:
            self.score += c * CONFIG["LINE_BONUS"]
            self.lines += c
            log.debug("cleared %d row(s), score %d", c, self.score)
        return c

    def spawn(self, t: Optional[str] = None) -> Piece:
        """Put a new piece at the spawn point; wipe the game if it doesn't fit."""
        self.current = Piece.spawn(t if t is not None else self.rng.next_piece())
        if collide(self.board, self.current):
            log.info("game over at score %d, restarting", self.score)
            wipe(self.board)
            self.score = 0
            self.lines = 0
            self.resets += 1
        else:
            log.debug("spawned %s", self.current.t)
        return self.current

    # ---------- read accessors ----------
    def active_cells(self) -> List[Tuple[int, int]]:
        return self.current.cells()

    def active_blocks(self) -> List[Block]:
        color = CATALOGUE[self.current.t].color
        return [Block(r, c, color) for r, c in self.current.cells()]

    def snapshot(self) -> GameState:
        return GameState(
            board=tuple(tuple(row) for row in self.board),
            cells=tuple(self.current.cells()),
            t=self.current.t,
            score=self.score,
            lines=self.lines,
        )
