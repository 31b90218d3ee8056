
"""Keystroke matching against the falling words"""
import logging
from typing import Optional
from typefall_config import CONFIG
from typefall_effects import spawn_effect
from typefall_rng import GameRandom
from typefall_state import GameState, Phase
from typefall_word import Word

log = logging.getLogger("typefall.input")

BACKSPACE = "\b"

def is_letter(ch: str) -> bool:
    return len(ch) == 1 and "a" <= ch <= "z"

def find_match(state: GameState) -> Optional[Word]:
    """First word, in spawn order, that starts with the typed buffer."""
    for w in state.words:
        if w.text.startswith(state.input):
            return w
    return None

def hit(state: GameState, word: Word, rng: GameRandom) -> GameState:
    state.score += len(word.text) * (state.level + 1)
    state.words_typed += 1
    state.effects.append(spawn_effect(word.x, word.y, len(word.text), rng))
    state.words = [w for w in state.words if w is not word]
    state.input = ""
    state.current = None
    if state.words_typed % CONFIG["WORDS_PER_LEVEL"] == 0:
        state.level += 1
        log.info("Level %d after %d words", state.level, state.words_typed)
    return state

def type_letter(state: GameState, ch: str, rng: GameRandom) -> GameState:
    state.input += ch
    word = find_match(state)
    if word is None:
        log.debug("Miss on %r", state.input)
        state.clear_input()
        return state
    if state.current is not None and state.current is not word:
        state.current.matched = 0
    state.current = word
    word.matched = len(state.input)
    if word.text == state.input:
        hit(state, word, rng)
    return state

def backspace(state: GameState) -> GameState:
    state.input = state.input[:-1]
    if state.current is not None:
        state.current.matched = 0
    # The next letter matches from scratch
    state.current = None
    return state

def apply_keystroke(state: GameState, ch: str, rng: GameRandom) -> GameState:
    """Apply a letter a-z or BACKSPACE. Ignored unless the game is running."""
    if state.phase is not Phase.PLAYING:
        return state
    if ch == BACKSPACE:
        return backspace(state)
    if is_letter(ch):
        return type_letter(state, ch, rng)
    return state
