"""Tests for loading noise graphs from YAML."""

import pytest

from terranoise import (
    Blend,
    Cache,
    CellFunc,
    Constant,
    DistanceFunc,
    GraphLoader,
    Interpolation,
    MultiBlend,
    NoiseConfigError,
    Perlin,
    Ridge,
    Warp,
)
from terranoise.layout import parse_enum

TERRAIN_YAML = """
defaults:
  seed: 42
  frequency: 0.005
nodes:
  continents:
    type: perlin
    octaves: 5
  hills:
    type: ridge
    seed: 43
  plains:
    type: constant
    value: 0.2
  terrain:
    type: blend
    control: continents
    sources: [plains, hills]
    midpoint: 0.6
    range: 0.2
    interpolation: hermite
root: terrain
"""


@pytest.fixture
def loader():
    return GraphLoader()


def test_load_string_builds_root(loader):
    root = loader.load_string(TERRAIN_YAML)
    assert isinstance(root, Blend)
    assert isinstance(root.control, Perlin)
    assert isinstance(root.upper, Ridge)
    assert root.interpolation is Interpolation.HERMITE
    assert root.control.seed == 42
    assert root.control.octaves == 5
    assert root.upper.seed == 43
    assert root.upper.frequency == 0.005
    assert root.min_value() <= root.evaluate(100.0, 200.0) <= root.max_value()


def test_shared_references_build_once(loader):
    nodes = loader.build_all({
        "nodes": {
            "base": {"type": "perlin"},
            "cached": {"type": "cache", "source": "base"},
            "sum": {"type": "add", "inputs": ["base", "cached"]},
        },
    })
    assert isinstance(nodes["cached"], Cache)
    assert nodes["cached"].source is nodes["base"]
    assert nodes["sum"].modules[0] is nodes["base"]


def test_inline_definitions(loader):
    root = loader.build({
        "root": {
            "type": "multi_blend",
            "control": {"type": "cell", "dist_func": "manhattan", "cell_func": "DISTANCE"},
            "sources": [{"type": "constant", "value": 0}, {"type": "constant", "value": 1}],
            "blend": 0.25,
        },
    })
    assert isinstance(root, MultiBlend)
    assert root.control.dist_func is DistanceFunc.MANHATTAN
    assert root.control.cell_func is CellFunc.DISTANCE
    assert root.blend == 0.25


def test_modifier_nodes(loader):
    root = loader.load_string("""
nodes:
  base: {type: simplex, scale: 200}
  shaped: {type: curve, power: 2, source: {type: bias, amount: 1, source: base}}
  final: {type: clamp, low: 0.2, high: 0.8, source: shaped}
root: final
""")
    assert (root.min_value(), root.max_value()) == (0.2, 0.8)
    assert root.source.source.source.frequency == pytest.approx(0.005)


def test_warp_node(loader):
    root = loader.load_string("""
defaults: {seed: 5}
nodes:
  base: {type: perlin}
  warped:
    type: warp
    source: base
    domain:
      type: compound
      domains:
        - {type: noise, kind: simplex, strength: 20}
        - type: direction
          direction: {type: perlin, seed: 9}
          strength: {type: constant, value: 3}
root: warped
""")
    assert isinstance(root, Warp)
    assert root.domain.a.x.seed == 5
    assert root.domain.a.y.seed == 6
    assert 0.0 <= root.evaluate(10.0, 10.0) <= 1.0


def test_turbulence_node(loader):
    root = loader.load_string("""
nodes:
  base: {type: perlin}
  turb: {type: turbulence, source: base, seed: 7, power: 0}
root: turb
""")
    assert root.turb0.seed == 7
    assert root.evaluate(3.0, 4.0) == root.source.evaluate(3.0, 4.0)


def test_sin_phase_source(loader):
    root = loader.load_string("""
nodes:
  phase: {type: constant, value: 0}
  wave: {type: sin, frequency: 1.0, source: phase}
root: wave
""")
    assert root.phase.evaluate(0.0, 0.0) == 0.0
    assert root.evaluate(0.0, 0.0) == pytest.approx(0.5)


@pytest.mark.parametrize("text,match", [
    ("nodes: {a: {type: wobble}}\nroot: a", "Unknown node type"),
    ("nodes: {a: {type: perlin, colour: red}}\nroot: a", "Unknown setting"),
    ("nodes: {a: {type: perlin, interpolation: bicubic}}\nroot: a", "Unknown Interpolation"),
    ("nodes: {a: {type: perlin}}\nroot: b", "unknown node"),
    ("nodes: {a: {type: abs, source: missing}}\nroot: a", "unknown node 'missing'"),
    ("nodes: {a: {type: perlin}}", "no 'root'"),
    ("nodes: {a: {type: bias, source: {type: perlin}}}\nroot: a", "missing"),
    ("nodes: {a: {type: select, control: {type: perlin}, sources: []}}\nroot: a", "exactly 2 sources"),
    ("nodes: {a: {type: perlin, octaves: 0}}\nroot: a", "octaves"),
    ("- just\n- a list", "mapping"),
])
def test_invalid_definitions(loader, text, match):
    with pytest.raises(NoiseConfigError, match=match):
        loader.load_string(text)


def test_cycle_detected(loader):
    text = """
nodes:
  a: {type: abs, source: b}
  b: {type: invert, source: a}
root: a
"""
    with pytest.raises(NoiseConfigError, match="Cyclic node reference: a -> b -> a"):
        loader.load_string(text)


def test_load_file(loader, tmp_path):
    path = tmp_path / "graph.yaml"
    path.write_text(TERRAIN_YAML)
    root = loader.load(path)
    assert isinstance(root, Blend)


def test_load_missing_file(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load(tmp_path / "missing.yaml")


def test_parse_enum():
    assert parse_enum(Interpolation, "quintic") is Interpolation.QUINTIC
    assert parse_enum(Interpolation, "LINEAR") is Interpolation.LINEAR
    assert parse_enum(Interpolation, Interpolation.HERMITE) is Interpolation.HERMITE
    with pytest.raises(NoiseConfigError):
        parse_enum(Interpolation, "smooth")


def test_constant_node_value(loader):
    root = loader.load_string("nodes: {c: {type: constant, value: 1.5}}\nroot: c")
    assert isinstance(root, Constant)
    assert root.evaluate(0.0, 0.0) == 1.5
