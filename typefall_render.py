
"""
Drawing helpers for the falling-words grid.

Optimizations:
- Pre-render one glyph Surface per (character, style) on first use and blit it.
- Pre-render the static background (play area + separator) when Dims change.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, List, Optional
from typefall_layout import Dims, COLS
from typefall_view import (FrameView, compose, status_line, summary_lines,
                           BLANK, WORD, MATCHED, PENDING, PARTICLE, HELP_TEXT, PAUSE_TEXT)

BG = (10, 13, 34)
# Foreground / optional background per cell style
STYLES: Dict[str, Tuple[Tuple[int,int,int], Optional[Tuple[int,int,int]]]] = {
    WORD: ((0, 206, 209), None),
    PENDING: ((0, 206, 209), None),
    MATCHED: ((0, 0, 0), (0, 255, 255)),
    PARTICLE: ((255, 224, 102), None),
}
SEPARATOR = (0, 206, 209)
STATUS = (204, 204, 204)
PAUSE = (0, 255, 255)
HELP = (136, 136, 136)
TITLE = (0, 255, 255)

@dataclass
class HudCache:
    status: str = ""
    status_s: Optional[pygame.Surface] = None
    pause_s: Optional[pygame.Surface] = None
    help_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, bold_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.bold_font = bold_font
        self.glyphs: Dict[Tuple[str, str], pygame.Surface] = {}
        self.hud = HudCache()
        self._make_static()

    # ---------- Static background (play area + separator) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        sep = self.font.render("─" * COLS, True, SEPARATOR)
        self.bg.blit(sep, (d.board_x, d.status_y))

    def cell_pos(self, col: int, row: int) -> Tuple[int, int]:
        return (self.dims.board_x + col * self.dims.cell_w, self.dims.board_y + row * self.dims.cell_h)

    # ---------- Glyph sprites ----------
    def glyph(self, ch: str, style: str) -> pygame.Surface:
        key = (ch, style)
        s = self.glyphs.get(key)
        if s is None:
            fg, bg = STYLES[style]
            f = self.bold_font if style == MATCHED else self.font
            text = f.render(ch, True, fg)
            s = pygame.Surface((self.dims.cell_w, self.dims.cell_h), pygame.SRCALPHA)
            if bg:
                s.fill(bg)
            s.blit(text, text.get_rect(center=s.get_rect().center))
            self.glyphs[key] = s
        return s

    def invalidate(self):
        """Forget cached text so the next frame is drawn from scratch."""
        self.glyphs.clear()
        self.hud = HudCache()
        self._make_static()

    # ---------- Play area ----------
    def draw_grid(self, screen: pygame.Surface, view: FrameView):
        screen.blit(self.bg, (0, 0))
        for y, row in enumerate(compose(view)):
            for x, (ch, style) in enumerate(row):
                if style != BLANK:
                    screen.blit(self.glyph(ch, style), self.cell_pos(x, y))

    # ---------- HUD ----------
    def draw_hud(self, screen: pygame.Surface, view: FrameView):
        d = self.dims
        f = self.font
        text = status_line(view)
        if text != self.hud.status or self.hud.status_s is None:
            self.hud.status = text
            self.hud.status_s = f.render(text, True, STATUS)
        if self.hud.pause_s is None:
            self.hud.pause_s = self.bold_font.render(PAUSE_TEXT, True, PAUSE)
        if self.hud.help_s is None:
            self.hud.help_s = f.render(HELP_TEXT, True, HELP)
        y = d.status_y + d.cell_h
        screen.blit(self.hud.status_s, (d.board_x, y))
        y += 2 * d.cell_h
        if view.paused:
            screen.blit(self.hud.pause_s, (d.board_x, y))
        screen.blit(self.hud.help_s, (d.board_x, y + d.cell_h))

    # ---------- Game over ----------
    def draw_game_over(self, screen: pygame.Surface, view: FrameView):
        d = self.dims
        screen.fill(BG)
        y = d.board_y + 2 * d.cell_h
        lines: List[str] = summary_lines(view)
        for i, line in enumerate(lines):
            if i == 0:
                surf = self.bold_font.render(line, True, TITLE)
            elif i == len(lines) - 1:
                surf = self.font.render(line, True, HELP)
            else:
                surf = self.font.render(line, True, STATUS)
            screen.blit(surf, (d.board_x, y))
            y += d.cell_h

    def draw(self, screen: pygame.Surface, view: FrameView):
        if view.game_over:
            self.draw_game_over(screen, view)
        else:
            self.draw_grid(screen, view)
            self.draw_hud(screen, view)
