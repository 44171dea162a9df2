"""Load noise graphs from YAML definitions."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, TypeVar

import yaml

from ..combiners import Add, Max, Min, Multiply
from ..core.exceptions import NoiseConfigError
from ..core.funcs import CellFunc, DistanceFunc, EdgeFunc, Interpolation
from ..core.module import Module
from ..domain import AddWarp, CompoundWarp, Direct, DirectionWarp, Domain, DomainWarp
from ..modifiers import Abs, Bias, Cache, Clamp, Invert, Map, PowerCurve, Scale, Turbulence, Warp
from ..selectors import Blend, MultiBlend, Select
from ..sources.builder import Builder
from ..sources.misc import Constant
from ..sources.params import SourceType

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Builder fields a source node may set, with the enum type for enum-valued ones
SOURCE_FIELDS: dict[str, type[Enum] | None] = {
    "seed": None,
    "octaves": None,
    "gain": None,
    "lacunarity": None,
    "frequency": None,
    "scale": None,
    "interpolation": Interpolation,
    "cell_func": CellFunc,
    "edge_func": EdgeFunc,
    "dist_func": DistanceFunc,
    "source": None,
}

COMBINERS = {
    "add": Add,
    "mult": Multiply,
    "min": Min,
    "max": Max,
}


def parse_enum(enum_type: type[E], value: Any) -> E:
    """Resolve an enum member from itself, its value or its name (any case)."""
    if isinstance(value, enum_type):
        return value
    text = str(value)
    for member in enum_type:
        if text.lower() == member.value or text.upper() == member.name:
            return member
    choices = ", ".join(member.value for member in enum_type)
    raise NoiseConfigError(f"Unknown {enum_type.__name__} '{value}' (expected one of: {choices})")


class GraphLoader:
    """Builds module graphs from YAML definitions.

    YAML format:
    ```yaml
    defaults:            # builder settings shared by every source node
      seed: 42
      frequency: 0.005
    nodes:
      continents:
        type: perlin
        octaves: 5
      hills:
        type: ridge
        seed: 43
      terrain:
        type: blend
        control: continents
        sources: [continents, hills]
        midpoint: 0.6
        range: 0.2
    root: terrain
    ```

    Source nodes use a SourceType value as ``type`` and accept any Builder
    field. Composite nodes name their inputs; an input may also be an inline
    node definition. Nodes are built once and shared between all parents.
    """

    def __init__(self) -> None:
        self._node_builders: dict[str, Callable[[dict[str, Any]], Module]] = {
            "constant": self._build_constant,
            "blend": self._build_blend,
            "select": self._build_select,
            "multi_blend": self._build_multi_blend,
            "abs": lambda spec: Abs(self._input(spec, "source")),
            "invert": lambda spec: Invert(self._input(spec, "source")),
            "cache": lambda spec: Cache(self._input(spec, "source")),
            "norm": lambda spec: self._input(spec, "source").norm(),
            "bias": lambda spec: Bias(self._input(spec, "source"), float(spec["amount"])),
            "scale": lambda spec: Scale(self._input(spec, "source"), float(spec["factor"])),
            "clamp": lambda spec: Clamp(self._input(spec, "source"), float(spec["low"]), float(spec["high"])),
            "map": lambda spec: Map(self._input(spec, "source"), float(spec["low"]), float(spec["high"])),
            "curve": lambda spec: PowerCurve(self._input(spec, "source"), float(spec["power"])),
            "turbulence": self._build_turbulence,
            "warp": self._build_warp,
        }
        self._specs: dict[str, Any] = {}
        self._defaults: dict[str, Any] = {}
        self._built: dict[str, Module] = {}
        self._resolving: list[str] = []

    def load(self, path: str | Path) -> Module:
        """Load a graph from a YAML file and return its root module.

        Raises:
            FileNotFoundError: If the file does not exist
            NoiseConfigError: If the definition is invalid
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)
        logger.info("Loading noise graph from %s", path)
        return self.build(data)

    def load_string(self, yaml_string: str) -> Module:
        """Load a graph from a YAML string and return its root module."""
        return self.build(yaml.safe_load(yaml_string))

    def build(self, data: dict[str, Any]) -> Module:
        """Build the graph described by parsed YAML data and return its root."""
        if not isinstance(data, dict):
            raise NoiseConfigError("Graph definition must be a mapping")
        root = data.get("root")
        if root is None:
            raise NoiseConfigError("Graph definition has no 'root'")
        nodes = self.build_all(data)
        if isinstance(root, str):
            if root not in nodes:
                raise NoiseConfigError(f"Root references unknown node '{root}'")
            return nodes[root]
        return self._resolve(root)

    def build_all(self, data: dict[str, Any]) -> dict[str, Module]:
        """Build every named node of a graph definition."""
        self._specs = dict(data.get("nodes") or {})
        self._defaults = dict(data.get("defaults") or {})
        self._built = {}
        self._resolving = []
        for name in self._specs:
            self._resolve(name)
        logger.info("Built noise graph with %d nodes", len(self._built))
        return dict(self._built)

    def _resolve(self, ref: Any) -> Module:
        """Resolve a node name or inline node definition to a module."""
        if isinstance(ref, dict):
            return self._create(ref)
        if not isinstance(ref, str):
            raise NoiseConfigError(f"Invalid node reference: {ref!r}")
        if ref in self._built:
            return self._built[ref]
        if ref not in self._specs:
            raise NoiseConfigError(f"Reference to unknown node '{ref}'")
        if ref in self._resolving:
            cycle = " -> ".join([*self._resolving, ref])
            raise NoiseConfigError(f"Cyclic node reference: {cycle}")

        self._resolving.append(ref)
        try:
            module = self._create(self._specs[ref])
        finally:
            self._resolving.pop()
        self._built[ref] = module
        logger.debug("Built node '%s': %r", ref, module)
        return module

    def _create(self, spec: dict[str, Any]) -> Module:
        if not isinstance(spec, dict) or "type" not in spec:
            raise NoiseConfigError(f"Node definition needs a 'type': {spec!r}")
        node_type = str(spec["type"]).lower()

        if node_type in COMBINERS:
            inputs = [self._resolve(ref) for ref in spec.get("inputs", [])]
            return COMBINERS[node_type](*inputs)

        node_builder = self._node_builders.get(node_type)
        if node_builder is not None:
            try:
                return node_builder(spec)
            except KeyError as e:
                raise NoiseConfigError(f"Node of type '{node_type}' is missing {e}") from None

        try:
            kind = SourceType(node_type)
        except ValueError:
            raise NoiseConfigError(f"Unknown node type: {node_type}") from None
        return self._build_source(kind, spec)

    def _input(self, spec: dict[str, Any], key: str) -> Module:
        if key not in spec:
            raise NoiseConfigError(f"Node of type '{spec['type']}' needs '{key}'")
        return self._resolve(spec[key])

    def _sources(self, spec: dict[str, Any]) -> list[Module]:
        return [self._resolve(ref) for ref in spec.get("sources", [])]

    def _interpolation(self, spec: dict[str, Any]) -> Interpolation | None:
        value = spec.get("interpolation")
        return None if value is None else parse_enum(Interpolation, value)

    def _build_source(self, kind: SourceType, spec: dict[str, Any]) -> Module:
        settings = {**self._defaults, **{k: v for k, v in spec.items() if k != "type"}}
        builder = Builder()
        for key, value in settings.items():
            if key not in SOURCE_FIELDS:
                raise NoiseConfigError(f"Unknown setting '{key}' for {kind.value} node")
            enum_type = SOURCE_FIELDS[key]
            if enum_type is not None:
                value = parse_enum(enum_type, value)
            elif key == "source":
                value = self._resolve(value)
            setattr(builder, key, value)
        return builder.build(kind)

    def _build_constant(self, spec: dict[str, Any]) -> Module:
        return Constant(float(spec["value"]))

    def _build_blend(self, spec: dict[str, Any]) -> Module:
        lower, upper = self._pair(spec)
        return Blend(
            self._input(spec, "control"),
            lower,
            upper,
            midpoint=float(spec.get("midpoint", 0.5)),
            blend_range=float(spec.get("range", 0.2)),
            interpolation=self._interpolation(spec),
        )

    def _build_select(self, spec: dict[str, Any]) -> Module:
        lower, upper = self._pair(spec)
        return Select(self._input(spec, "control"), lower, upper, threshold=float(spec.get("threshold", 0.5)))

    def _build_multi_blend(self, spec: dict[str, Any]) -> Module:
        return MultiBlend(
            self._input(spec, "control"),
            *self._sources(spec),
            blend=float(spec.get("blend", 0.5)),
            interpolation=self._interpolation(spec),
        )

    def _pair(self, spec: dict[str, Any]) -> tuple[Module, Module]:
        sources = self._sources(spec)
        if len(sources) != 2:
            raise NoiseConfigError(f"Node of type '{spec['type']}' needs exactly 2 sources, got {len(sources)}")
        return sources[0], sources[1]

    def _build_turbulence(self, spec: dict[str, Any]) -> Module:
        return Turbulence.from_params(
            self._input(spec, "source"),
            seed=int(spec.get("seed", self._defaults.get("seed", 1337))),
            frequency=float(spec.get("frequency", self._defaults.get("frequency", 0.01))),
            octaves=int(spec.get("octaves", 1)),
            power=float(spec.get("power", 1.0)),
        )

    def _build_warp(self, spec: dict[str, Any]) -> Module:
        if "domain" not in spec:
            raise NoiseConfigError("Node of type 'warp' needs 'domain'")
        return Warp(self._input(spec, "source"), self._domain(spec["domain"]))

    def _domain(self, spec: dict[str, Any]) -> Domain:
        """Build a Domain from its definition.

        Supported types: ``direct``, ``noise`` (DomainWarp.from_builder),
        ``warp`` (x/y modules), ``direction``, ``add`` and ``compound``.
        """
        if not isinstance(spec, dict) or "type" not in spec:
            raise NoiseConfigError(f"Domain definition needs a 'type': {spec!r}")
        domain_type = str(spec["type"]).lower()

        if domain_type == "direct":
            return Direct()
        if domain_type == "noise":
            kind = parse_enum(SourceType, spec.get("kind", "perlin"))
            return DomainWarp.from_builder(
                kind.value,
                seed=int(spec.get("seed", self._defaults.get("seed", 1337))),
                frequency=float(spec.get("frequency", self._defaults.get("frequency", 0.01))),
                octaves=int(spec.get("octaves", 1)),
                strength=float(spec.get("strength", 1.0)),
            )
        if domain_type == "warp":
            return DomainWarp(self._input(spec, "x"), self._input(spec, "y"), float(spec.get("strength", 1.0)))
        if domain_type == "direction":
            return DirectionWarp(self._input(spec, "direction"), self._input(spec, "strength"))
        if domain_type in ("add", "compound"):
            domains = [self._domain(d) for d in spec.get("domains", [])]
            if len(domains) < 2:
                raise NoiseConfigError(f"Domain of type '{domain_type}' needs at least 2 domains")
            combine = AddWarp if domain_type == "add" else CompoundWarp
            result = domains[0]
            for domain in domains[1:]:
                result = combine(result, domain)
            return result
        raise NoiseConfigError(f"Unknown domain type: {domain_type}")
