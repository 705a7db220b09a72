"""
Graph Generation Package
"""
from .attributes import AttributeRegistry, AttributeFactory, range_factory
from .direction import DirectionPolicy, DirectionMode
from .mirror import MirrorGraph
from .config import GeneratorConfig, AttributeRange, load_config
from .base_generator import BaseGenerator, LABEL_ATTRIBUTE, POSITION_ATTRIBUTE

__all__ = [
    "AttributeRegistry",
    "AttributeFactory",
    "range_factory",
    "DirectionPolicy",
    "DirectionMode",
    "MirrorGraph",
    "GeneratorConfig",
    "AttributeRange",
    "load_config",
    "BaseGenerator",
    "LABEL_ATTRIBUTE",
    "POSITION_ATTRIBUTE",
]
