
"""Game events, keyboard translation and dispatch"""
import logging
from dataclasses import dataclass
from typing import Optional, Union
import pygame
from typefall_engine import advance_tick
from typefall_input import BACKSPACE, apply_keystroke, is_letter
from typefall_rng import GameRandom
from typefall_state import GameState, Phase

log = logging.getLogger("typefall.events")

@dataclass(frozen=True)
class Tick:
    pass

@dataclass(frozen=True)
class Letter:
    char: str

@dataclass(frozen=True)
class Backspace:
    pass

@dataclass(frozen=True)
class PauseToggle:
    pass

@dataclass(frozen=True)
class Resize:
    width: int
    height: int

@dataclass(frozen=True)
class Quit:
    pass

@dataclass(frozen=True)
class Redraw:
    pass

Event = Union[Tick, Letter, Backspace, PauseToggle, Resize, Quit, Redraw]

def translate_key(key: int, unicode: str, mod: int, game_over: bool = False) -> Optional[Event]:
    """Map a KEYDOWN to an event; None for keys the game ignores."""
    if mod & pygame.KMOD_CTRL:
        if key == pygame.K_c: return Quit()
        if key == pygame.K_l: return Redraw()
        return None
    if key == pygame.K_ESCAPE: return Quit()
    if game_over:
        return Quit() if key == pygame.K_q else None
    if key == pygame.K_BACKSPACE: return Backspace()
    if key == pygame.K_SPACE: return PauseToggle()
    if is_letter(unicode): return Letter(unicode)
    return None

def toggle_pause(state: GameState) -> GameState:
    if state.phase is Phase.PLAYING:
        state.phase = Phase.PAUSED
    elif state.phase is Phase.PAUSED:
        state.phase = Phase.PLAYING
    return state

def dispatch(state: GameState, event: Event, rng: GameRandom) -> GameState:
    """Apply one event. Resize and Redraw only concern the screen and leave the game alone."""
    if isinstance(event, Tick):
        return advance_tick(state, rng)
    if isinstance(event, Letter):
        return apply_keystroke(state, event.char, rng)
    if isinstance(event, Backspace):
        return apply_keystroke(state, BACKSPACE, rng)
    if isinstance(event, PauseToggle):
        return toggle_pause(state)
    if isinstance(event, Quit):
        state.quit_requested = True
        return state
    if isinstance(event, (Resize, Redraw)):
        return state
    raise TypeError(f"not a game event: {event!r}")
