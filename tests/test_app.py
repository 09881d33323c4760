import math
import random

import pytest

from particlelife.app import build_simulation, main, make_type_colors, run_headless, wrap_mod


class ZeroRandom(random.Random):
    def randint(self, a, b):
        return 0


def test_wrap_mod_negative_value():
    assert wrap_mod(-1.0, 5.0) == pytest.approx(4.0)


@pytest.mark.parametrize("a,n", [(-7.5, 3.0), (12.25, 4.0), (0.0, 2.0), (-0.5, 1.0), (9.0, 9.5)])
def test_wrap_mod_range_and_congruence(a, n):
    r = wrap_mod(a, n)
    assert 0.0 <= r < n
    k = (a - r) / n
    assert k == pytest.approx(round(k))


def test_build_simulation_settings():
    sim = build_simulation(3, num_types=2, count=25)
    assert len(sim.particles) == 25
    assert sim.bounds.width == 3200.0
    assert sim.bounds.height == 3200.0
    assert sim.delta_time == 0.05
    assert sim.radius == 50.0
    assert sim.max_force == sim.repell_mult * sim.force_mult
    assert sim.cells.width * sim.radius == sim.bounds.width
    assert (sim.ruleset.width, sim.ruleset.height) == (2, 2)
    assert {p.kind for p in sim.particles} <= {0, 1}


def test_build_simulation_is_deterministic_per_seed():
    a = build_simulation(11, num_types=3, count=30)
    b = build_simulation(11, num_types=3, count=30)
    assert [p.pos for p in a.particles] == [p.pos for p in b.particles]
    assert list(a.ruleset.cells()) == list(b.ruleset.cells())


def test_make_type_colors_are_normalised():
    colors = make_type_colors(random.Random(5), 8)
    assert sorted(colors) == list(range(8))
    for color in colors.values():
        assert all(0 <= c <= 255 for c in color)
        assert 252 <= sum(color) <= 255


def test_make_type_colors_deterministic():
    first = make_type_colors(random.Random(9), 4)
    second = make_type_colors(random.Random(9), 4)
    assert sorted(first) == [0, 1, 2, 3]
    assert first == second
    for kind in range(4):
        assert tuple(first[kind]) == tuple(second[kind])


def test_make_type_colors_all_zero_channels_stay_black():
    assert make_type_colors(ZeroRandom(), 1) == {0: (0, 0, 0)}


def test_run_headless_reports_each_frame(capsys):
    sim = build_simulation(1, num_types=2, count=10)
    assert run_headless(sim, 2) == 2
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Frame: 0, FPS: ")
    assert lines[1].startswith("Frame: 1, FPS: ")


def test_run_headless_keeps_particles_in_bounds():
    sim = build_simulation(2, num_types=2, count=20)
    run_headless(sim, 3)
    assert all(sim.bounds.check_bound(p.pos) for p in sim.particles)
    assert all(math.isfinite(p.vel.x) and math.isfinite(p.vel.y) for p in sim.particles)


def test_main_headless(capsys):
    code = main(["--headless", "--frames", "1", "--count", "20", "--types", "2", "--seed", "7"])
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0].strip() == "Seed: 7"
    assert out[1].startswith("Frame: 0, FPS: ")


def test_main_rejects_zero_types():
    with pytest.raises(SystemExit) as excinfo:
        main(["--headless", "--types", "0"])
    assert excinfo.value.code == 2