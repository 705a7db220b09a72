"""
Generator Configuration

Declarative settings a caller can apply to any generator in one step,
loadable from YAML:

    generator:
      seed: 42
      directed: true
      randomly_directed: true
      node_labels: false
      edge_labels: true
      use_internal_graph: true
      node_attributes:
        weight: [0, 10]     # uniform in [0, 10)
        load:               # uniform in [0, 1)
      edge_attributes:
        capacity: {min: 1, max: 100}
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass(frozen=True)
class AttributeRange:
    """Uniform range for a numeric attribute."""
    min: float = 0.0
    max: float = 1.0

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Invalid attribute range: min {self.min} > max {self.max}")

    @classmethod
    def from_value(cls, value: Any) -> "AttributeRange":
        """Accepts None, a [min, max] pair or a {min, max} mapping."""
        if value is None:
            return cls()
        if isinstance(value, dict):
            return cls(min=float(value.get("min", 0.0)), max=float(value.get("max", 1.0)))
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return cls(min=float(value[0]), max=float(value[1]))
        raise ValueError(f"Invalid attribute range specification: {value!r}")

    def to_dict(self) -> Dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass
class GeneratorConfig:
    """Configuration for a generator run."""
    seed: Optional[int] = None
    directed: bool = False
    randomly_directed: bool = False
    node_labels: bool = False
    edge_labels: bool = False
    use_internal_graph: bool = False

    node_attributes: Dict[str, AttributeRange] = field(default_factory=dict)
    edge_attributes: Dict[str, AttributeRange] = field(default_factory=dict)

    def __post_init__(self):
        self.node_attributes = _coerce_ranges(self.node_attributes)
        self.edge_attributes = _coerce_ranges(self.edge_attributes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorConfig":
        if not data:
            return cls()
        seed = data.get("seed")
        return cls(
            seed=int(seed) if seed is not None else None,
            directed=bool(data.get("directed", False)),
            randomly_directed=bool(data.get("randomly_directed", False)),
            node_labels=bool(data.get("node_labels", False)),
            edge_labels=bool(data.get("edge_labels", False)),
            use_internal_graph=bool(data.get("use_internal_graph", False)),
            node_attributes=data.get("node_attributes") or {},
            edge_attributes=data.get("edge_attributes") or {},
        )

    @classmethod
    def from_yaml(cls, data: Dict[str, Any]) -> "GeneratorConfig":
        """Build from parsed YAML, with or without a top-level ``generator`` key."""
        data = data or {}
        return cls.from_dict(data.get("generator", data))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "directed": self.directed,
            "randomly_directed": self.randomly_directed,
            "node_labels": self.node_labels,
            "edge_labels": self.edge_labels,
            "use_internal_graph": self.use_internal_graph,
            "node_attributes": {k: v.to_dict() for k, v in self.node_attributes.items()},
            "edge_attributes": {k: v.to_dict() for k, v in self.edge_attributes.items()},
        }


def _coerce_ranges(attributes: Dict[str, Any]) -> Dict[str, AttributeRange]:
    if not isinstance(attributes, dict):
        raise ValueError(f"Attribute specification must be a mapping, got {type(attributes).__name__}")
    return {
        str(name): entry if isinstance(entry, AttributeRange) else AttributeRange.from_value(entry)
        for name, entry in attributes.items()
    }


def load_config(path: Union[str, Path]) -> GeneratorConfig:
    """Load generator configuration from a YAML file."""
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    return GeneratorConfig.from_yaml(data)
