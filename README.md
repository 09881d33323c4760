# particlelife

A particle life simulation. Particles of several kinds move about a rectangular
world whose edges wrap around. Each ordered pair of kinds has a randomly chosen
attraction or repulsion strength in [-1, 1). Particles that come very close
always push each other apart. Out of these simple rules, moving clusters and
cell-like structures form.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
particlelife
```

This prints the random seed and then opens an 800 × 800 window that shows the
simulation, while the simulation runs on a background thread. The world starts
with 10,000 particles of 6 kinds in a 3200 × 3200 area. For each step the
console prints the frame number and the simulation rate.

Controls in the window:

- Arrow keys pan the view.
- `[` zooms out and `]` zooms in.

Closing the window ends the program.

Options:

- `--seed N` – random seed (default: chosen at random).
- `--types N` – number of particle kinds (default 6, at least 1).
- `--count N` – number of particles (default 10000).
- `--frames N` – stop stepping after N steps.
- `--headless` – simulate in the console only, without opening a window.

For example, to run 100 steps of a smaller world without a window:

```
particlelife --headless --seed 1234 --count 2000 --frames 100
```

## Using it as a library

```python
from particlelife.app import build_simulation, run_headless

sim = build_simulation(seed=1234, num_types=6, count=2000)
run_headless(sim, frames=100)

for particle in sim.particles[:5]:
    print(particle.kind, particle.pos.x, particle.pos.y)
```

`run_headless` returns the number of steps taken; with `frames=None` it runs
forever.

`particlelife.simulation.Simulation` holds the world:

- `bounds` is the world rectangle (a `Rect`).
- `radius` is the interaction radius.
- `friction`, `force_mult`, `repell_mult` and `max_force` set the forces.
- `delta_time` is the time step.
- `rng` is the `random.Random` used for all random choices.
- `ruleset` is the kind-by-kind `Grid` of attraction strengths.
- `particles` is the list of `particlelife.particle.Particle` objects, each with
  `pos`, `vel`, `acc`, `mass`, `active` and `kind`.

Build the world in this order:

1. `random_ruleset(types)`
2. `fill_bounds(count, types)`
3. `init_grid()`

After that, advance the simulation by calling `step()` once per frame.
`step()` runs `update_grid()`, `calculate_interactions()` and
`update_particles()` in turn.

`particlelife.app.make_type_colors(rng, num_types)` picks one colour per kind,
and `draw_loop(...)` opens the pygame window used by the command.

`particlelife.geometry` provides the `Vec2`, `Rect` and `Grid` types that the
simulation is built on, a `Timer`, and the functions `lerp`, `mag`, `norm`,
`dot` and `convolution`.