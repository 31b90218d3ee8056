"""
Shared fixtures: game states with a fixed dictionary and predictable randomness.
"""
import pytest
from typefall_rng import GameRandom
from typefall_state import GameState
from typefall_word import Word


class ScriptedRandom(GameRandom):
    """GameRandom with a fixed spawn roll and column; particle sampling stays seeded."""

    def __init__(self, roll=0.99, column=0, seed=1234):
        super().__init__(seed)
        self.fixed_roll = roll
        self.column = column

    def roll(self):
        return self.fixed_roll

    def spawn_column(self, max_x):
        return min(self.column, max_x)


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def state():
    return GameState(["cat", "dog", "fish"], start_time=0.0)


def place(state, text, x=0, y=0):
    """Put a word on the board as if it had just spawned."""
    w = Word(text, x, y)
    state.words.append(w)
    return w
