"""
graphgen - Event-Driven Graph Generator Core

Base machinery for incremental graph generators: a generator emits nodes,
edges and attributes as a stream of events to sinks, with seeded random
attribute values, optional random edge orientation, and an optional
internal mirror graph for bookkeeping.

Usage:
    from graphgen import BaseGenerator, EventRecorder

    class PathGenerator(BaseGenerator):
        def __init__(self, length):
            super().__init__()
            self.length = length
            self.current = 0

        def begin(self):
            self._add_node("0")

        def next_events(self):
            self.current += 1
            self._add_node(str(self.current))
            self._add_edge(None, str(self.current - 1), str(self.current))
            return self.current < self.length

    recorder = EventRecorder()
    generator = PathGenerator(5)
    generator.add_sink(recorder)
    generator.set_random_seed(42)
    generator.begin()
    while generator.next_events():
        pass
    generator.end()
"""

from .core import (
    RandomSource,
    GeneratorIdRegistry,
    next_generator_id,
    EventType,
    GraphEvent,
    NodeAdded,
    NodeRemoved,
    EdgeAdded,
    EdgeRemoved,
    NodeAttributeAdded,
    EdgeAttributeAdded,
    ElementSink,
    AttributeSink,
    Sink,
    Generator,
)
from .generation import (
    AttributeRegistry,
    DirectionPolicy,
    DirectionMode,
    MirrorGraph,
    GeneratorConfig,
    AttributeRange,
    load_config,
    BaseGenerator,
)
from .sinks import EventRecorder, NetworkXGraphSink, LoggingSink

__all__ = [
    # Core
    "RandomSource",
    "GeneratorIdRegistry",
    "next_generator_id",
    # Events
    "EventType",
    "GraphEvent",
    "NodeAdded",
    "NodeRemoved",
    "EdgeAdded",
    "EdgeRemoved",
    "NodeAttributeAdded",
    "EdgeAttributeAdded",
    # Ports
    "ElementSink",
    "AttributeSink",
    "Sink",
    "Generator",
    # Generation
    "AttributeRegistry",
    "DirectionPolicy",
    "DirectionMode",
    "MirrorGraph",
    "GeneratorConfig",
    "AttributeRange",
    "load_config",
    "BaseGenerator",
    # Sinks
    "EventRecorder",
    "NetworkXGraphSink",
    "LoggingSink",
]

__version__ = "1.0.0"
