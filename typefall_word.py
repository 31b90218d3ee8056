
"""Word model and spawn placement"""
from dataclasses import dataclass
from typing import Sequence
from typefall_layout import COLS
from typefall_rng import GameRandom

@dataclass(eq=False)
class Word:
    text: str
    x: int
    y: int
    matched: int = 0

    @staticmethod
    def spawn(dictionary: Sequence[str], rng: GameRandom) -> "Word":
        text = rng.next_word(dictionary)
        # Keep one column free on the right edge
        max_x = max(0, COLS - len(text) - 1)
        return Word(text, rng.spawn_column(max_x), 0)
