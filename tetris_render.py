"""
Rendering helpers for the Tetris project.

Reads engine state only; never calls an engine action.
- Pre-render block cell Surfaces per kind and size (board size + preview size).
- Pre-render static background (grid + panel frame).
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_layout import Dims
from tetris_piece import COLORS, COLS, ROWS, Piece

BG = (26, 26, 46)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None

def make_block(size: int, color) -> pygame.Surface:
    """Solid block with a light band on top and a dark band at the bottom."""
    inner = size - 2
    band = max(2, size * 8 // 30)
    s = pygame.Surface((inner, inner), pygame.SRCALPHA)
    s.fill(pygame.Color(color))
    hi = pygame.Surface((inner, band), pygame.SRCALPHA); hi.fill((255, 255, 255, 77))
    lo = pygame.Surface((inner, band), pygame.SRCALPHA); lo.fill((0, 0, 0, 77))
    s.blit(hi, (0, 0))
    s.blit(lo, (0, inner - band))
    return s

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self.cell_surf: Dict[str, pygame.Surface] = {t: make_block(dims.cell, c) for t, c in COLORS.items()}
        self.preview_surf: Dict[str, pygame.Surface] = {t: make_block(dims.preview_cell, c) for t, c in COLORS.items()}
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10, 13, 34))
        pygame.draw.rect(self.bg, BG, self.board_rect)
        self.grid = pygame.Surface((d.board_w + 1, d.board_h + 1), pygame.SRCALPHA)
        grid_col = (255, 255, 255, 26)
        for x in range(COLS + 1):
            pygame.draw.line(self.grid, grid_col, (x * d.cell, 0), (x * d.cell, d.board_h))
        for y in range(ROWS + 1):
            pygame.draw.line(self.grid, grid_col, (0, y * d.cell), (d.board_w, y * d.cell))
        pygame.draw.rect(self.bg, (21, 25, 53), self.panel_rect)
        pygame.draw.rect(self.bg, (50, 60, 100), self.panel_rect, 1)
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 150
        frame = pygame.Rect(self.pv_x, self.pv_y, d.preview_size, d.preview_size)
        pygame.draw.rect(self.bg, (15, 18, 40), frame)
        pygame.draw.rect(self.bg, (55, 65, 110), frame, 1)

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    @property
    def panel_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)

    # ---------- Board + pieces ----------
    def draw_cell(self, screen: pygame.Surface, t: str, bx: int, by: int):
        rx = self.dims.board_x + bx * self.dims.cell + 1
        ry = self.dims.board_y + by * self.dims.cell + 1
        screen.blit(self.cell_surf[t], (rx, ry))

    def draw_board(self, screen: pygame.Surface, board):
        for y, row in enumerate(board):
            for x, t in enumerate(row):
                if t: self.draw_cell(screen, t, x, y)

    def draw_piece(self, screen: pygame.Surface, piece: Optional[Piece]):
        if piece is None: return
        for bx, by in piece.cells():
            if by >= 0: self.draw_cell(screen, piece.t, bx, by)

    def draw_grid(self, screen: pygame.Surface):
        screen.blit(self.grid, (self.dims.board_x, self.dims.board_y))

    # ---------- HUD / Panel ----------
    def draw_next(self, screen: pygame.Surface, piece: Optional[Piece]):
        if piece is None: return
        pc = self.dims.preview_cell
        size = self.dims.preview_size
        offx = (size - piece.width * pc) // 2
        offy = (size - piece.height * pc) // 2
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if v:
                    screen.blit(self.preview_surf[piece.t],
                                (self.pv_x + offx + c * pc + 1, self.pv_y + offy + r * pc + 1))

    def draw_panel_hud(self, screen: pygame.Surface, score: int, level: int, lines: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197, 202, 233))
            self.hud.next_label = f.render("Next:", True, (200, 210, 240))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (200, 210, 240))
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, (200, 210, 240))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, (200, 210, 240))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(self.hud.next_label, (d.panel_x + 12, d.panel_y + 126))

    # ---------- Whole frame ----------
    def draw_frame(self, screen: pygame.Surface, engine, effects=None):
        screen.blit(self.bg, (0, 0))
        self.draw_board(screen, engine.board)
        self.draw_piece(screen, engine.current)
        self.draw_grid(screen)
        if effects is not None:
            effects.draw(screen, (self.dims.board_x, self.dims.board_y),
                         (self.dims.board_w, self.dims.board_h))
        self.draw_panel_hud(screen, engine.score, engine.level, engine.lines)
        self.draw_next(screen, engine.next_piece)
