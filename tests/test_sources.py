"""Tests for the leaf noise generators and their analytic bounds."""

import math

import numpy as np
import pytest

from terranoise import Builder, CellFunc, Constant, DistanceFunc, EdgeFunc, Interpolation, NoiseConfigError, SourceType
from terranoise.core import noise_util
from terranoise.sources import Perlin, Simplex
from terranoise.sources.params import NoiseParams

SEEDS = [0, 1, 1337, -42, 2**31 - 1]


def sample_points():
    """A spread of coordinates including negatives, lattice points and fractions."""
    coords = [-1000.5, -37.25, -1.0, 0.0, 0.3, 1.0, 12.75, 99.99, 512.0, 12345.678]
    return [(x, y) for x in coords for y in coords[::3]]


@pytest.mark.parametrize("kind", list(SourceType))
@pytest.mark.parametrize("seed", SEEDS)
def test_source_stays_within_bounds(kind, seed):
    """Every generator family respects min_value <= evaluate <= max_value."""
    module = Builder(seed=seed, octaves=4, frequency=0.37).build(kind)
    for x, y in sample_points():
        value = module.evaluate(x, y)
        assert module.min_value() <= value <= module.max_value(), (kind, seed, x, y, value)


@pytest.mark.parametrize("kind", list(SourceType))
def test_source_bounds_are_normalised(kind):
    module = Builder().build(kind)
    assert module.min_value() == 0.0
    assert module.max_value() == 1.0


@pytest.mark.parametrize("kind", list(SourceType))
def test_source_is_deterministic(kind):
    """Fresh graphs built from the same settings agree bit for bit."""
    first = Builder(seed=99, frequency=0.13).build(kind)
    second = Builder(seed=99, frequency=0.13).build(kind)
    for x, y in sample_points():
        a = first.evaluate(x, y)
        assert a == first.evaluate(x, y)
        assert a == second.evaluate(x, y)


@pytest.mark.parametrize("kind", [k for k in SourceType if k is not SourceType.SIN])
def test_seed_changes_output(kind):
    a = Builder(seed=1, frequency=0.21).build(kind)
    b = Builder(seed=2, frequency=0.21).build(kind)
    values_a = [a.evaluate(x, y) for x, y in sample_points()]
    values_b = [b.evaluate(x, y) for x, y in sample_points()]
    assert values_a != values_b


@pytest.mark.parametrize("kind", list(SourceType))
def test_non_finite_input_yields_nan(kind):
    module = Builder().build(kind)
    assert math.isnan(module.evaluate(math.nan, 0.0))
    assert math.isnan(module.evaluate(0.0, math.inf))


def test_two_octave_perlin_bounds():
    """Two octaves at gain 0.5 have raw bounds of +-1.5 and output in [0, 1]."""
    for seed in (1, 7, 1337):
        perlin = Builder(seed=seed, octaves=2, gain=0.5).perlin()
        assert perlin.raw_min == -1.5
        assert perlin.raw_max == 1.5
        assert (perlin.min_value(), perlin.max_value()) == (0.0, 1.0)
        for x, y in [(0.0, 0.0), (13.7, -4.2), (250.5, 250.5), (-999.0, 31.4)]:
            assert 0.0 <= perlin.evaluate(x, y) <= 1.0


def test_perlin_is_centred_on_lattice_points():
    """Gradient noise is zero at integer lattice points, i.e. 0.5 once normalised."""
    perlin = Builder(octaves=1, frequency=1.0).perlin()
    for x, y in [(0, 0), (3, -7), (-12, 40)]:
        assert perlin.evaluate(float(x), float(y)) == pytest.approx(0.5)


def test_perlin_interpolation_changes_field():
    hermite = Builder(interpolation=Interpolation.HERMITE, frequency=0.3).perlin()
    quintic = Builder(interpolation=Interpolation.QUINTIC, frequency=0.3).perlin()
    assert hermite.evaluate(1.3, 2.9) != quintic.evaluate(1.3, 2.9)


def test_simplex_bounds_use_signal_table():
    simplex = Builder(octaves=2, gain=0.5).simplex()
    assert simplex.raw_max == pytest.approx(0.810 * 1.5)
    assert simplex.raw_min == -simplex.raw_max


def test_ridge_defaults_to_high_gain():
    assert Builder().ridge().gain == 0.975
    assert Builder().billow().gain == 0.5
    assert Builder(gain=0.4).ridge().gain == 0.4


def test_ridge_and_billow_raw_bounds_are_non_negative():
    params = NoiseParams(octaves=3, gain=0.5)
    for module in (Builder(octaves=3, gain=0.5).ridge(), Builder(octaves=3, gain=0.5).billow()):
        assert module.raw_min == 0.0
        assert module.raw_max == pytest.approx(noise_util.fractal_bound(params.octaves, params.gain))


def test_fractal_sum_matches_manual_octaves():
    params = NoiseParams(seed=5, octaves=3, gain=0.5, lacunarity=2.0, frequency=1.0)
    perlin = Perlin(params)
    x, y = 0.37, 1.91
    expected = 0.0
    for i in range(3):
        expected += perlin.octave(x * 2.0**i, y * 2.0**i, 5 + i) * 0.5**i
    assert perlin.raw_value(x, y) == pytest.approx(expected)


@pytest.mark.parametrize("dist_func", list(DistanceFunc))
@pytest.mark.parametrize("cell_func", [CellFunc.CELL_VALUE, CellFunc.DISTANCE])
def test_cell_within_bounds(dist_func, cell_func):
    cell = Builder(frequency=0.5, dist_func=dist_func, cell_func=cell_func).cell()
    values = cell.sample(24, 24, x=-10.0, y=-10.0, step=0.77)
    assert np.all(values >= 0.0) and np.all(values <= 1.0)


@pytest.mark.parametrize("dist_func", list(DistanceFunc))
def test_cell_distance_stays_below_analytic_bound(dist_func):
    """The raw nearest distance never needs clamping."""
    cell = Builder(frequency=1.0, dist_func=dist_func, cell_func=CellFunc.DISTANCE).cell()
    for x, y in sample_points():
        raw = cell.raw_value(x * 0.731, y * 0.731)
        assert 0.0 <= raw <= dist_func.nearest_bound


@pytest.mark.parametrize("edge_func", list(EdgeFunc))
@pytest.mark.parametrize("dist_func", list(DistanceFunc))
def test_cell_edge_raw_value_within_analytic_bounds(edge_func, dist_func):
    edge = Builder(frequency=1.0, edge_func=edge_func, dist_func=dist_func).cell_edge()
    low, high = edge_func.bounds(dist_func)
    for x, y in sample_points():
        raw = edge.raw_value(x * 0.613, y * 0.613)
        assert low <= raw <= high


def test_cell_value_is_constant_inside_a_cell_near_its_point():
    cell = Builder(frequency=1.0).cell()
    vx, vy = noise_util.cell_offset(cell.seed, 4, 4)
    px, py = 4 + vx, 4 + vy
    assert cell.evaluate(px, py) == cell.evaluate(px + 0.01, py - 0.01)


def test_cell_noise_lookup_uses_source_bounds():
    lookup = Constant(0.25)
    cell = Builder(cell_func=CellFunc.NOISE_LOOKUP, source=lookup).cell()
    assert cell.raw_min == cell.raw_max == 0.25
    assert cell.evaluate(10.0, 20.0) == 0.0


def test_cell_noise_lookup_without_source_fails():
    with pytest.raises(NoiseConfigError):
        Builder(cell_func=CellFunc.NOISE_LOOKUP).cell()


def test_sin_without_phase_is_a_wave_along_x():
    wave = Builder(frequency=1.0).sin()
    assert wave.evaluate(0.0, 5.0) == pytest.approx(0.5)
    assert wave.evaluate(math.pi / 2, -3.0) == pytest.approx(1.0)
    assert wave.evaluate(-math.pi / 2, 8.0) == pytest.approx(0.0)


def test_sin_phase_source_shifts_the_wave():
    wave = Builder(frequency=1.0, source=Constant(math.pi / 2)).sin()
    assert wave.evaluate(0.0, 0.0) == pytest.approx(1.0)


def test_rand_is_constant_per_cell():
    rand = Builder(frequency=1.0).rand()
    assert rand.evaluate(3.1, 4.2) == rand.evaluate(3.9, 4.8)


def test_constant_bounds():
    constant = Constant(-3.5)
    assert constant.evaluate(1.0, 2.0) == -3.5
    assert constant.min_value() == constant.max_value() == -3.5


class TestHashing:
    def test_to_int32_wraps(self):
        assert noise_util.to_int32(2**31) == -(2**31)
        assert noise_util.to_int32(2**32 + 5) == 5
        assert noise_util.to_int32(-1) == -1

    def test_value_coord_range(self):
        for x in range(-20, 20, 3):
            for y in range(-20, 20, 7):
                assert -1.0 <= noise_util.value_coord_2d(1337, x, y) < 1.0

    def test_hash_is_seed_dependent(self):
        assert noise_util.hash_2d(1, 10, 10) != noise_util.hash_2d(2, 10, 10)

    def test_tables_are_read_only(self):
        with pytest.raises(ValueError):
            noise_util.CELL_2D[0, 0] = 1.0
        assert noise_util.CELL_2D.shape == (256, 2)
        assert noise_util.GRAD_2D.shape == (8, 2)

    def test_map_range_clamps(self):
        assert noise_util.map_range(5.0, -1.0, 1.0) == 1.0
        assert noise_util.map_range(-5.0, -1.0, 1.0) == 0.0
        assert noise_util.map_range(0.0, -1.0, 1.0) == 0.5
        assert noise_util.map_range(3.0, 2.0, 2.0) == 0.0


def test_simplex_constructor_validates_params():
    with pytest.raises(NoiseConfigError):
        Simplex(NoiseParams(octaves=0))
