
"""Per-tick simulation: descent, effect decay, spawning"""
import logging
from typefall_config import CONFIG
from typefall_effects import decay
from typefall_layout import PLAY_ROWS
from typefall_rng import GameRandom
from typefall_state import GameState, Phase
from typefall_word import Word

log = logging.getLogger("typefall.engine")

def spawn_chance(level: int) -> float:
    return CONFIG["SPAWN_BASE"] + level * CONFIG["SPAWN_PER_LEVEL"]

def min_words(level: int) -> int:
    return 1 + level // 3

def descend(state: GameState) -> GameState:
    """Move every word down a row; words past the play area cost a life each."""
    kept = []
    lost = 0
    for w in state.words:
        w.y += 1
        if w.y >= PLAY_ROWS:
            lost += 1
            if w is state.current:
                state.clear_input()
        else:
            kept.append(w)
    state.words = kept
    if lost:
        state.lives = max(0, state.lives - lost)
        log.debug("%d word(s) reached the bottom, %d lives left", lost, state.lives)
        if state.lives == 0:
            state.phase = Phase.GAME_OVER
            log.info("Game over: score %d, level %d, %d words", state.score, state.level, state.words_typed)
    return state

def update_effects(state: GameState) -> GameState:
    state.effects = decay(state.effects)
    return state

def maybe_spawn(state: GameState, rng: GameRandom) -> GameState:
    """Top up the falling words: always below the level minimum, otherwise by chance."""
    if len(state.words) >= CONFIG["MAX_WORDS"]:
        return state
    if len(state.words) < min_words(state.level) or rng.roll() < spawn_chance(state.level):
        w = Word.spawn(state.dictionary, rng)
        state.words.append(w)
        log.debug("Spawned %r at column %d", w.text, w.x)
    return state

def advance_tick(state: GameState, rng: GameRandom) -> GameState:
    """One timer interval. Does nothing while paused or after game over."""
    if state.phase is not Phase.PLAYING:
        return state
    descend(state)
    if state.game_over:
        return state
    update_effects(state)
    maybe_spawn(state, rng)
    return state
