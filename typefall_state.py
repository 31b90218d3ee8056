
"""Game state aggregate and lifecycle phase"""
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional
from typefall_config import CONFIG
from typefall_effects import Effect
from typefall_word import Word


class Phase(Enum):
    """Lifecycle of a single game."""
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()   # terminal, only quit is accepted


@dataclass
class GameState:
    """
    Everything that changes while a game runs.

    The host loop holds the only reference and applies one event at a time;
    the renderer works from a snapshot (typefall_view.snapshot).
    """
    dictionary: List[str]
    words: List[Word] = field(default_factory=list)        # spawn order
    effects: List[Effect] = field(default_factory=list)
    score: int = 0
    level: int = 1
    lives: int = field(default_factory=lambda: CONFIG["START_LIVES"])
    words_typed: int = 0
    input: str = ""
    current: Optional[Word] = None
    phase: Phase = Phase.PLAYING
    start_time: float = field(default_factory=time.monotonic)
    quit_requested: bool = False

    @property
    def paused(self) -> bool:
        return self.phase is Phase.PAUSED

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def clear_input(self) -> None:
        """Drop the typed buffer and whatever word it was tracking."""
        if self.current is not None:
            self.current.matched = 0
        self.input = ""
        self.current = None


def words_per_minute(state: GameState, now: Optional[float] = None) -> int:
    now = time.monotonic() if now is None else now
    elapsed = now - state.start_time
    if elapsed <= 0:
        return 0
    return int(state.words_typed * 60.0 / elapsed)
