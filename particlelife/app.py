"""Command-line entry point: build a simulation, run it and optionally draw it."""

from __future__ import annotations

import argparse
import math
import random
import threading
from typing import Optional

from particlelife.geometry import Rect, Timer, Vec2
from particlelife.simulation import Simulation

Color = tuple[int, int, int]

WINDOW_SIZE = 800
CIRCLE_SIZE = 16
TITLE = "Simulation"


def wrap_mod(a: float, n: float) -> float:
    """Floating-point modulo whose result has the sign of n."""
    return math.fmod(math.fmod(a, n) + n, n)


def build_simulation(seed: int, num_types: int = 6, count: int = 10000) -> Simulation:
    """Create the default world: a 3200 x 3200 torus with random rules and particles."""
    sim = Simulation(
        bounds=Rect(Vec2(0.0, 0.0), Vec2(3200.0, 3200.0)),
        delta_time=0.05,
        radius=50.0,
        rng=random.Random(seed),
    )
    sim.random_ruleset(num_types)
    sim.fill_bounds(count, num_types)
    sim.friction = 5.0
    sim.force_mult = 50.0
    sim.repell_mult = 15.0
    sim.max_force = sim.repell_mult * sim.force_mult
    sim.init_grid()
    return sim


def make_type_colors(rng: random.Random, num_types: int) -> dict[int, Color]:
    """Pick a random colour per kind, scaled so that its channels sum to about 255."""
    colors: dict[int, Color] = {}
    for kind in range(num_types):
        channels = [rng.randint(0, 255) for _ in range(3)]
        total = sum(channels)
        if total:
            scale = 1.0 / (total / 255.0)
            channels = [int(c * scale) for c in channels]
        colors[kind] = (channels[0], channels[1], channels[2])
    return colors


def _simulate(sim: Simulation, frames: Optional[int], stop: threading.Event) -> int:
    timer = Timer()
    frame = 0
    while (frames is None or frame < frames) and not stop.is_set():
        elapsed = timer()
        fps = int(1 / elapsed) if elapsed > 0 else 0
        print(f"Frame: {frame}, FPS: {fps}", flush=True)
        sim.step()
        frame += 1
    return frame


def run_headless(sim: Simulation, frames: Optional[int] = None) -> int:
    """Step the simulation, reporting each frame; run forever when frames is None."""
    return _simulate(sim, frames, threading.Event())


def draw_loop(
    sim: Simulation,
    type_colors: dict[int, Color],
    window_x: int,
    window_y: int,
    title: str,
    circle_size: int,
) -> None:
    """Show the particles in a window until it is closed.

    Arrow keys pan the view, '[' zooms out and ']' zooms in.
    """
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((window_x, window_y), pygame.RESIZABLE)
        pygame.display.set_caption(title)

        span_x, span_y = sim.bounds.width, sim.bounds.height
        target_x, target_y = span_x / 2, span_y / 2
        zoom = window_x / span_x
        pan_speed = 5 / zoom
        draw_rad = sim.radius / 6

        sprites = {}
        for kind, color in type_colors.items():
            sprite = pygame.Surface((circle_size, circle_size), pygame.SRCALPHA)
            half = circle_size / 2
            pygame.draw.circle(sprite, color, (half, half), half)
            sprites[kind] = sprite

        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()
        white = (255, 255, 255)
        offset_x, offset_y = window_x / 2, window_y / 2

        def to_screen(x: float, y: float) -> tuple[int, int]:
            return (
                int((x - target_x) * zoom + offset_x),
                int((y - target_y) * zoom + offset_y),
            )

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            screen.fill((0, 0, 0))
            size = max(1, round(draw_rad * zoom))
            scaled = {
                kind: pygame.transform.smoothscale(sprite, (size, size))
                for kind, sprite in sprites.items()
            }
            for particle in list(sim.particles):
                sprite = scaled.get(particle.kind)
                if sprite is None:
                    continue
                screen.blit(
                    sprite,
                    to_screen(
                        particle.pos.x - draw_rad / 2, particle.pos.y - draw_rad / 2
                    ),
                )

            left, top = to_screen(sim.bounds.c1.x, sim.bounds.c1.y)
            right, bottom = to_screen(sim.bounds.c2.x, sim.bounds.c2.y)
            pygame.draw.rect(
                screen, white, pygame.Rect(left, top, right - left, bottom - top), 1
            )
            fps_text = font.render(f"{int(clock.get_fps())} FPS", True, (0, 228, 48))
            screen.blit(fps_text, (10, 10))
            pygame.display.flip()
            clock.tick(60)

            keys = pygame.key.get_pressed()
            if keys[pygame.K_UP]:
                target_y -= pan_speed
            if keys[pygame.K_DOWN]:
                target_y += pan_speed
            if keys[pygame.K_LEFT]:
                target_x -= pan_speed
            if keys[pygame.K_RIGHT]:
                target_x += pan_speed
            if keys[pygame.K_LEFTBRACKET]:
                zoom *= 0.95
            if keys[pygame.K_RIGHTBRACKET]:
                zoom /= 0.95
            width, height = screen.get_size()
            offset_x, offset_y = width / 2, height / 2
    finally:
        pygame.quit()


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Optional[list[str]] = None) -> int:
    """Run the particle-life simulation."""
    parser = argparse.ArgumentParser(
        prog="particlelife", description="Run a particle-life simulation."
    )
    parser.add_argument("--seed", type=int, help="random seed (default: random)")
    parser.add_argument("--types", type=_positive_int, default=6,
                        help="number of particle kinds")
    parser.add_argument("--count", type=_non_negative_int, default=10000,
                        help="number of particles")
    parser.add_argument("--frames", type=_non_negative_int, default=None,
                        help="stop after this many steps")
    parser.add_argument("--headless", action="store_true",
                        help="simulate without opening a window")
    args = parser.parse_args(argv)

    seed = args.seed if args.seed is not None else random.randrange(2**31)
    print(f"Seed: {seed} ", flush=True)
    sim = build_simulation(seed, args.types, args.count)
    type_colors = make_type_colors(sim.rng, args.types)

    if args.headless:
        run_headless(sim, args.frames)
        return 0

    stop = threading.Event()
    worker = threading.Thread(
        target=_simulate, args=(sim, args.frames, stop), daemon=True
    )
    worker.start()
    try:
        draw_loop(sim, type_colors, WINDOW_SIZE, WINDOW_SIZE, TITLE, CIRCLE_SIZE)
    finally:
        stop.set()
        worker.join()
    return 0