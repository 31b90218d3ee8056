
"""Random source for spawning words and scattering particles"""
import math
import random
from typing import Optional, Sequence

class GameRandom:
    def __init__(self, seed: Optional[int] = None):
        # None seeds from OS entropy; an int makes a run reproducible
        self._r = random.Random(seed)

    def roll(self) -> float:
        return self._r.random()

    def next_word(self, dictionary: Sequence[str]) -> str:
        return dictionary[self._r.randrange(len(dictionary))]

    def spawn_column(self, max_x: int) -> int:
        return self._r.randint(0, max(0, max_x))

    def direction(self) -> float:
        return self._r.uniform(0.0, 2.0 * math.pi)

    def speed(self, lo: float, hi: float) -> float:
        return self._r.uniform(lo, hi)

    def glyph(self, glyphs: Sequence[str]) -> str:
        return glyphs[self._r.randrange(len(glyphs))]

    def lifetime(self, lo: int, hi: int) -> int:
        return self._r.randint(lo, hi)
