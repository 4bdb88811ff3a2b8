
"""
Rendering helpers for the Tetris host.

- Pre-render one cell Surface per piece color and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when the score changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_layout import Dims
from tetris_piece import CATALOGUE, COLS, ROWS
from tetris_state import GameState

@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds pre-rendered assets and draws a GameState snapshot."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, kind in CATALOGUE.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(kind.color)
            self.cell_surf[t] = s

    def draw_cell(self, screen: pygame.Surface, t: str, row: int, col: int):
        if row < 0:
            return
        x, y = self.dims.cell_origin(row, col)
        screen.blit(self.cell_surf[t], (x + 1, y + 1))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, state: GameState):
        screen.blit(self.bg, (0, 0))
        for r, row in enumerate(state.board):
            for c, t in enumerate(row):
                if t:
                    self.draw_cell(screen, t, r, c)
        for r, c in state.cells:
            self.draw_cell(screen, state.t, r, c)
        self.draw_panel_hud(screen, state.score, state.lines)

    def draw_panel_hud(self, screen: pygame.Surface, score: int, lines: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Classic Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (200,210,240))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, (200,210,240))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 68))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("↓ Drop", True, (165,175,215)),
                f.render("Space Hard drop", True, (165,175,215)),
                f.render("R Restart • Esc Quit", True, (165,175,215)),
            ]
        y = d.panel_y + 120
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
