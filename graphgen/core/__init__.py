"""
Core Primitives

Random source, generator identity, event records and sink/generator ports.
"""
from .random_source import RandomSource
from .identity import GeneratorIdRegistry, next_generator_id, SOURCE_ID_FORMAT
from .events import (
    EventType,
    GraphEvent,
    NodeAdded,
    NodeRemoved,
    EdgeAdded,
    EdgeRemoved,
    NodeAttributeAdded,
    EdgeAttributeAdded,
)
from .interfaces import ElementSink, AttributeSink, Sink, Generator

__all__ = [
    "RandomSource",
    "GeneratorIdRegistry",
    "next_generator_id",
    "SOURCE_ID_FORMAT",
    "EventType",
    "GraphEvent",
    "NodeAdded",
    "NodeRemoved",
    "EdgeAdded",
    "EdgeRemoved",
    "NodeAttributeAdded",
    "EdgeAttributeAdded",
    "ElementSink",
    "AttributeSink",
    "Sink",
    "Generator",
]
