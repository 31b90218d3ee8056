
"""Particle bursts left behind by destroyed words"""
import math
from dataclasses import dataclass, field
from typing import List
from typefall_rng import GameRandom

GLYPHS = ["*", "+", "#", "o", ".", "~", "^", "x"]
SPEED_RANGE = (0.5, 2.0)
LIFETIME_RANGE = (3, 5)

@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    glyph: str
    lifetime: int

@dataclass
class Effect:
    particles: List[Particle] = field(default_factory=list)

    @property
    def done(self) -> bool:
        return not self.particles

def spawn_effect(x: int, y: int, word_length: int, rng: GameRandom) -> Effect:
    """Burst of 8 + 2*word_length particles spread across the word's columns."""
    span = max(1, word_length)
    particles = []
    for i in range(8 + 2 * word_length):
        angle = rng.direction()
        speed = rng.speed(*SPEED_RANGE)
        particles.append(Particle(
            x=float(x + i % span),
            y=float(y),
            vx=speed * math.cos(angle),
            vy=speed * math.sin(angle),
            glyph=rng.glyph(GLYPHS),
            lifetime=rng.lifetime(*LIFETIME_RANGE),
        ))
    return Effect(particles)

def decay(effects: List[Effect]) -> List[Effect]:
    """Move every particle one step and age it; return the effects that still have particles."""
    alive = []
    for effect in effects:
        kept = []
        for p in effect.particles:
            p.x += p.vx
            p.y += p.vy
            p.lifetime = max(0, p.lifetime - 1)
            if p.lifetime > 0:
                kept.append(p)
        effect.particles = kept
        if not effect.done:
            alive.append(effect)
    return alive
