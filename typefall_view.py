
"""
Read-only frame for the renderer.

snapshot() copies what the screen needs out of a GameState so drawing never
touches live game objects. compose() lays the snapshot out as rows of
(glyph, style) cells plus the status text; it has no pygame dependency.
"""
from __future__ import annotations
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple
from typefall_layout import COLS, PLAY_ROWS
from typefall_state import GameState, words_per_minute

# Cell styles understood by the renderer
BLANK, WORD, MATCHED, PENDING, PARTICLE = "blank", "word", "matched", "pending", "particle"

HELP_TEXT = "[ctrl+c: quit | SPACE: pause | ctrl+l: redraw]"
PAUSE_TEXT = "[PAUSED - Press SPACE to resume]"
QUIT_TEXT = "Press 'q' to quit"

Cell = Tuple[str, str]

@dataclass(frozen=True)
class WordView:
    text: str
    x: int
    y: int
    matched: int
    current: bool

@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    glyph: str

@dataclass(frozen=True)
class FrameView:
    words: Tuple[WordView, ...]
    particles: Tuple[ParticleView, ...]
    score: int
    level: int
    lives: int
    words_typed: int
    wpm: int
    input: str
    paused: bool
    game_over: bool

def snapshot(state: GameState, now: Optional[float] = None) -> FrameView:
    now = time.monotonic() if now is None else now
    return FrameView(
        words=tuple(WordView(w.text, w.x, w.y, w.matched, w is state.current) for w in state.words),
        particles=tuple(ParticleView(p.x, p.y, p.glyph) for e in state.effects for p in e.particles),
        score=state.score,
        level=state.level,
        lives=state.lives,
        words_typed=state.words_typed,
        wpm=words_per_minute(state, now),
        input=state.input,
        paused=state.paused,
        game_over=state.game_over,
    )

def status_line(view: FrameView) -> str:
    return (f"Score: {view.score}  Level: {view.level}  Lives: {view.lives}  "
            f"Words: {view.words_typed}  WPM: {view.wpm}  Input: {view.input}")

def summary_lines(view: FrameView) -> List[str]:
    return [
        "GAME OVER",
        "",
        f"Final Score: {view.score}",
        f"Level Reached: {view.level}",
        f"Words Typed: {view.words_typed}",
        "",
        QUIT_TEXT,
    ]

def compose(view: FrameView) -> List[List[Cell]]:
    """COLS x PLAY_ROWS grid: words first, particles drawn over them."""
    grid: List[List[Cell]] = [[(" ", BLANK)] * COLS for _ in range(PLAY_ROWS)]
    for w in view.words:
        if not 0 <= w.y < PLAY_ROWS:
            continue
        for i, ch in enumerate(w.text):
            col = w.x + i
            if 0 <= col < COLS:
                if w.current:
                    style = MATCHED if i < w.matched else PENDING
                else:
                    style = WORD
                grid[w.y][col] = (ch, style)
    for p in view.particles:
        px, py = int(p.x), int(p.y)
        if 0 <= px < COLS and 0 <= py < PLAY_ROWS:
            grid[py][px] = (p.glyph, PARTICLE)
    return grid
