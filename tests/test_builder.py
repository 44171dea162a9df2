"""Tests for Builder configuration, snapshots and validation."""

import math

import pytest

from terranoise import Builder, Constant, Interpolation, NoiseConfigError, SourceType
from terranoise.modifiers import Turbulence
from terranoise.sources import Cell, CellEdge, Perlin, Ridge
from terranoise.sources.builder import SOURCE_FACTORIES


def test_every_source_type_has_a_factory():
    assert set(SOURCE_FACTORIES) == set(SourceType)


def test_built_module_keeps_its_snapshot():
    """Mutating the builder after build() does not affect earlier modules."""
    builder = Builder(seed=10, octaves=2, frequency=0.05)
    first = builder.perlin()
    before = [first.evaluate(x, 3.0) for x in range(0, 200, 17)]

    builder.seed = 999
    builder.octaves = 6
    builder.frequency = 0.5
    second = builder.perlin()

    assert first.seed == 10
    assert first.octaves == 2
    assert first.params.frequency == 0.05
    assert [first.evaluate(x, 3.0) for x in range(0, 200, 17)] == before
    assert second.seed == 999
    assert second.octaves == 6


def test_reused_builder_with_seed_increment():
    builder = Builder(seed=42)
    a = builder.perlin()
    builder.seed += 1
    b = builder.perlin()
    assert a.seed == 42
    assert b.seed == 43


@pytest.mark.parametrize("name,cls", [
    ("perlin", Perlin),
    ("ridge", Ridge),
    ("CELL", Cell),
    ("cell_edge", CellEdge),
])
def test_build_accepts_string_kinds(name, cls):
    assert isinstance(Builder().build(name), cls)


def test_build_unknown_kind_raises():
    with pytest.raises(NoiseConfigError, match="Unknown source type"):
        Builder().build("wavelet")


@pytest.mark.parametrize("changes", [
    {"octaves": 0},
    {"octaves": -3},
    {"gain": 0.0},
    {"gain": -0.5},
    {"lacunarity": 0.0},
    {"frequency": math.nan},
    {"frequency": math.inf},
])
def test_invalid_settings_raise(changes):
    with pytest.raises(NoiseConfigError):
        Builder(**changes).perlin()


def test_scale_is_reciprocal_of_frequency():
    builder = Builder()
    builder.scale = 200
    assert builder.frequency == pytest.approx(0.005)
    assert builder.scale == pytest.approx(200)


def test_zero_frequency_has_infinite_scale():
    assert Builder(frequency=0.0).scale == math.inf


def test_zero_scale_raises():
    builder = Builder()
    with pytest.raises(NoiseConfigError):
        builder.scale = 0


def test_copy_is_independent():
    builder = Builder(seed=3, interpolation=Interpolation.QUINTIC)
    other = builder.copy(seed=4)
    other.octaves = 8
    assert builder.seed == 3
    assert builder.octaves == 3
    assert other.interpolation is Interpolation.QUINTIC


def test_snapshot_resolves_default_gain():
    builder = Builder()
    assert builder.snapshot().gain == 0.5
    assert builder.snapshot(default_gain=0.975).gain == 0.975
    builder.gain = 0.3
    assert builder.snapshot(default_gain=0.975).gain == 0.3


def test_constant_helper():
    constant = Builder().constant(0.7)
    assert isinstance(constant, Constant)
    assert constant.evaluate(123.0, -4.0) == 0.7


def test_turbulence_requires_source():
    with pytest.raises(NoiseConfigError):
        Builder().turbulence()


def test_turbulence_seeds_two_fields():
    source = Builder(seed=5).perlin()
    turbulence = Builder(seed=20, source=source, power=4.0).turbulence()
    assert isinstance(turbulence, Turbulence)
    assert turbulence.turb0.seed == 20
    assert turbulence.turb1.seed == 21
    assert turbulence.power == 4.0
    assert turbulence.source is source
    assert (turbulence.min_value(), turbulence.max_value()) == (source.min_value(), source.max_value())
