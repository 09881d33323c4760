"""Particle-life simulation on a toroidal rectangle with a spatial hash grid."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from particlelife.geometry import Grid, Rect, Vec2
from particlelife.particle import Particle

_OFFSETS = (-1, 0, 1)


@dataclass(slots=True)
class Cell:
    """One bucket of the spatial grid."""

    particles: list[Particle] = field(default_factory=list)

    def clear(self) -> None:
        """Remove every particle from the cell."""
        self.particles.clear()


def _empty_cells() -> Grid[Cell]:
    return Grid(0, 0, Cell)


@dataclass(eq=False)
class Simulation:
    """Particles of several kinds that attract or repel each other by a ruleset."""

    bounds: Rect = field(default_factory=Rect)
    delta_time: float = 1.0
    radius: float = 0.0
    friction: float = 0.0
    force_mult: float = 0.0
    repell_mult: float = 0.0
    max_force: float = 0.0
    rng: random.Random = field(default_factory=random.Random)
    particles: list[Particle] = field(default_factory=list)
    ruleset: Grid[float] = field(default_factory=Grid)
    cells: Grid[Cell] = field(default_factory=_empty_cells)

    def step(self) -> None:
        """Advance the simulation by one tick."""
        self.update_grid()
        self.calculate_interactions()
        self.update_particles()

    def update_grid(self) -> None:
        """Rebuild the spatial grid from the particles' predicted positions."""
        for cell in self.cells.cells():
            cell.clear()
        for particle in self.particles:
            self.cells[self.grid_pos(particle.pos + particle.vel)].particles.append(
                particle
            )

    def grid_pos(self, pos: Vec2) -> Vec2:
        """Return the (wrapped) grid cell that holds a world position."""
        cols, rows = self.cells.width, self.cells.height
        if cols == 0 or rows == 0:
            raise RuntimeError("the grid is not initialised; call init_grid() first")
        frac_x = min(0.999999, (pos.x - self.bounds.c1.x) / self.bounds.width)
        frac_y = min(0.999999, (pos.y - self.bounds.c1.y) / self.bounds.height)
        return Vec2(int(frac_x * cols) % cols, int(frac_y * rows) % rows)

    def calculate_interactions(self) -> None:
        """Accumulate the forces between every pair of neighbouring particles."""
        span_x = self.bounds.width
        span_y = self.bounds.height
        radius = self.radius
        radius_squared = radius * radius
        cols, rows = self.cells.width, self.cells.height

        for particle in self.particles:
            pos = particle.pos + particle.vel
            gx, gy = self.grid_pos(pos)
            acc_x, acc_y = particle.acc.x, particle.acc.y
            for dx in _OFFSETS:
                for dy in _OFFSETS:
                    cell = self.cells[(gx + dx) % cols, (gy + dy) % rows]
                    for other in cell.particles:
                        if other is particle:
                            continue
                        other_pos = other.pos + other.vel
                        found = None
                        # Look for a periodic image within reach; a later
                        # column of images overrides an earlier one.
                        for sx in _OFFSETS:
                            for sy in _OFFSETS:
                                axis_x = other_pos.x - (pos.x + sx * span_x)
                                axis_y = other_pos.y - (pos.y + sy * span_y)
                                dist_sq = axis_x * axis_x + axis_y * axis_y
                                if dist_sq < radius_squared:
                                    found = (axis_x, axis_y, dist_sq)
                                    break
                        if found is None:
                            continue
                        axis_x, axis_y, dist_sq = found
                        dist = math.sqrt(dist_sq)
                        if dist == 0.0:
                            # Coincident particles have no direction to push along.
                            continue
                        force = self._force(
                            dist / radius, self.ruleset[particle.kind, other.kind]
                        )
                        inv = 1 / dist
                        acc_x += force * (axis_x * inv)
                        acc_y += force * (axis_y * inv)
            particle.acc = Vec2(acc_x, acc_y)

    def _force(self, frac: float, mult: float) -> float:
        if frac < 1 / 3.0:
            force = self.repell_mult * (3 * frac - 1)
        elif frac < 2 / 3.0:
            force = mult * (3 * (frac - 1 / 3.0))
        else:
            force = mult * (1 - 3 * (frac - 2 / 3.0))
        force *= self.force_mult
        return max(-self.max_force, min(self.max_force, force))

    def update_particles(self) -> None:
        """Integrate every particle, apply friction and wrap it into the bounds."""
        low, high = self.bounds.c1, self.bounds.c2
        span_x, span_y = self.bounds.width, self.bounds.height
        for particle in self.particles:
            particle.update(self.delta_time)
            particle.vel = particle.vel - self.friction * particle.vel * self.delta_time
            x, y = particle.pos
            if x < low.x:
                x += span_x
            elif x >= high.x:
                x -= span_x
            if y < low.y:
                y += span_y
            elif y >= high.y:
                y -= span_y
            particle.pos = Vec2(x, y)

    def fill_bounds(self, count: int, types: int) -> None:
        """Add count particles at random positions with random kinds and small speeds."""
        if types < 1:
            raise ValueError("there must be at least one particle type")
        low, high = self.bounds.c1, self.bounds.c2
        for _ in range(count):
            pos = Vec2(self.rng.uniform(low.x, high.x), self.rng.uniform(low.y, high.y))
            vel = Vec2(
                self.rng.uniform(-1, 1) * self.delta_time,
                self.rng.uniform(-1, 1) * self.delta_time,
            )
            kind = self.rng.randint(0, types - 1)
            self.particles.append(Particle(pos=pos, vel=vel, kind=kind))

    def random_ruleset(self, types: int) -> None:
        """Draw a random attraction factor in [-1, 1) for every pair of kinds."""
        if types < 1:
            raise ValueError("there must be at least one particle type")
        self.ruleset = Grid(types, types, float)
        for i in range(types):
            for j in range(types):
                self.ruleset[i, j] = self.rng.uniform(-1, 1)

    def init_grid(self) -> None:
        """Size the spatial grid so that each cell is at least one radius wide."""
        if self.radius <= 0:
            raise ValueError("radius must be positive")
        size_x = int(self.bounds.width / self.radius)
        size_y = int(self.bounds.height / self.radius)
        self.cells = Grid(size_x, size_y, Cell)