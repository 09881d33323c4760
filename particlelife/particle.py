"""A single particle in the simulation."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from particlelife.geometry import Vec2


def _zero() -> Vec2:
    return Vec2(0.0, 0.0)


@dataclass(slots=True)
class Particle:
    """A point mass with position, velocity, accumulated acceleration and a kind."""

    pos: Vec2 = field(default_factory=_zero)
    vel: Vec2 = field(default_factory=_zero)
    acc: Vec2 = field(default_factory=_zero)
    mass: float = 1.0
    active: bool = True
    kind: int = -1

    def update(self, timestep: float) -> None:
        """Integrate one step and clear the accumulated acceleration."""
        if not self.active:
            return
        self.vel = self.vel + self.acc * (timestep * timestep)
        self.pos = self.pos + self.vel
        self.acc = _zero()

    def copy(self) -> "Particle":
        """Return an independent copy of this particle."""
        return dataclasses.replace(self)