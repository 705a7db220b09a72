"""
Base Generator

Foundation for incremental, event-driven graph generators. Subclasses
implement ``begin()`` and ``next_events()`` and, inside them, call the
protected emission operations:

    _add_node(id)            NodeAdded, label, registered node attributes
    _add_node_at(id, x, y)   same, plus an "xy" attribute
    _del_node(id)            NodeRemoved
    _add_edge(id, from, to)  EdgeAdded, label, registered edge attributes
    _del_edge(id)            EdgeRemoved

Every operation pushes its events synchronously to the registered sinks and,
when enabled, mirrors them into an internal graph. All stochastic decisions
draw from one RandomSource in a fixed order, so a given seed and call
sequence always produce the same events.

Usage:
    class RingGenerator(BaseGenerator):
        def begin(self):
            self._add_node("0")
        ...

    generator = RingGenerator(directed=True, randomly_directed=True)
    generator.add_sink(EventRecorder())
    generator.set_random_seed(42)
    generator.begin()
    while generator.next_events():
        pass
    generator.end()
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from graphgen.core.identity import next_generator_id
from graphgen.core.interfaces import AttributeSink, ElementSink
from graphgen.core.random_source import RandomSource
from .attributes import AttributeFactory, AttributeRegistry
from .config import GeneratorConfig
from .direction import DirectionMode, DirectionPolicy
from .mirror import MirrorGraph

LABEL_ATTRIBUTE = "label"
POSITION_ATTRIBUTE = "xy"


class BaseGenerator(ABC):
    """
    Base class for graph generators.

    Can put randomly chosen values on arbitrary node and edge attributes and
    randomly choose edge directions. By default edges are undirected and no
    attribute is added. When edges are directed, the order of the two nodes
    given to ``_add_edge`` is used unless random orientation is requested.
    """

    def __init__(
        self,
        directed: bool = False,
        randomly_directed: bool = False,
        node_attribute: Optional[str] = None,
        edge_attribute: Optional[str] = None,
    ) -> None:
        """
        Args:
            directed: If True, generated edges are directed.
            randomly_directed: If True (with ``directed``), each edge's
                direction is chosen at random.
            node_attribute: Optional attribute put on every node, uniform in [0, 1).
            edge_attribute: Optional attribute put on every edge, uniform in [0, 1).
        """
        self.logger = logging.getLogger(__name__)
        self._source_id = next_generator_id()

        self.random = RandomSource()
        self.direction = DirectionPolicy(directed, randomly_directed)
        self.node_attributes = AttributeRegistry("node")
        self.edge_attributes = AttributeRegistry("edge")

        self.node_labels = False
        self.edge_labels = False

        self._use_internal_graph = False
        self.internal_graph: Optional[MirrorGraph] = None

        self._element_sinks: List[ElementSink] = []
        self._attribute_sinks: List[AttributeSink] = []

        if node_attribute is not None:
            self.add_node_attribute(node_attribute)
        if edge_attribute is not None:
            self.add_edge_attribute(edge_attribute)

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    @property
    def source_id(self) -> str:
        return self._source_id

    # -------------------------------------------------------------------------
    # Generation contract
    # -------------------------------------------------------------------------

    @abstractmethod
    def begin(self) -> None:
        """Start generation."""

    @abstractmethod
    def next_events(self) -> bool:
        """Emit the next increment of events. Return False when finished."""

    def end(self) -> None:
        """
        Finish the generation.

        Must be called once ``next_events()`` returned False (or earlier to
        stop). Clears kept identifiers and data so the next run starts anew;
        configuration and the random source are left untouched.
        """
        self.logger.info(f"[{self._source_id}] generation ended")
        self._clear_kept_data()

    def _clear_kept_data(self) -> None:
        """Empty the internal graph if one is in use."""
        if self._use_internal_graph:
            self.internal_graph.clear()

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_random_seed(self, seed: int) -> None:
        self.random.set_seed(seed)

    def add_node_labels(self, on: bool) -> None:
        """Put a "label" attribute equal to the id on every new node."""
        self.node_labels = on

    def add_edge_labels(self, on: bool) -> None:
        """Put a "label" attribute equal to the id on every new edge."""
        self.edge_labels = on

    def set_directed_edges(self, directed: bool, randomly: bool) -> None:
        """
        Make generated edges directed or not.

        Args:
            directed: If True, edges are directed.
            randomly: If True, edges are directed and the direction is chosen
                randomly. Ignored unless ``directed`` is True.
        """
        self.direction.set_directed_edges(directed, randomly)

    @property
    def directed(self) -> bool:
        return self.direction.directed

    @property
    def randomly_directed(self) -> bool:
        return self.direction.randomly_directed

    @property
    def direction_mode(self) -> DirectionMode:
        return self.direction.mode

    def add_node_attribute(
        self,
        name: str,
        factory: Optional[AttributeFactory] = None,
        *,
        min_value: float = 0.0,
        max_value: float = 1.0,
    ) -> None:
        """
        Put this attribute on every generated node.

        Args:
            name: The attribute name.
            factory: Callable receiving the RandomSource and returning the
                value. When omitted the value is uniform in
                ``[min_value, max_value)``.
        """
        if factory is not None:
            self.node_attributes.add(name, factory)
        else:
            self.node_attributes.add_range(name, min_value, max_value)

    def remove_node_attribute(self, name: str) -> None:
        self.node_attributes.remove(name)

    def add_edge_attribute(
        self,
        name: str,
        factory: Optional[AttributeFactory] = None,
        *,
        min_value: float = 0.0,
        max_value: float = 1.0,
    ) -> None:
        """Same as ``add_node_attribute`` for generated edges."""
        if factory is not None:
            self.edge_attributes.add(name, factory)
        else:
            self.edge_attributes.add_range(name, min_value, max_value)

    def remove_edge_attribute(self, name: str) -> None:
        self.edge_attributes.remove(name)

    def set_use_internal_graph(self, on: bool) -> None:
        """
        Enable or disable the internal graph.

        When enabled, nodes, edges and their attributes are also stored in a
        MirrorGraph that subclasses can query. Disabling clears and drops it.
        """
        self._use_internal_graph = on

        if not on and self.internal_graph is not None:
            self.internal_graph.clear()
            self.internal_graph = None
            self.logger.info(f"[{self._source_id}] internal graph released")

        if on and self.internal_graph is None:
            cls = type(self)
            self.internal_graph = MirrorGraph(f"{cls.__module__}.{cls.__qualname__}-internal_graph")
            self.logger.info(f"[{self._source_id}] internal graph enabled")

    def is_using_internal_graph(self) -> bool:
        return self._use_internal_graph

    def configure(self, config: GeneratorConfig) -> None:
        """Apply a GeneratorConfig: seed, direction, labels, attributes, internal graph."""
        if config.seed is not None:
            self.set_random_seed(config.seed)
        self.set_directed_edges(config.directed, config.randomly_directed)
        self.add_node_labels(config.node_labels)
        self.add_edge_labels(config.edge_labels)
        for name, attr_range in config.node_attributes.items():
            self.add_node_attribute(name, min_value=attr_range.min, max_value=attr_range.max)
        for name, attr_range in config.edge_attributes.items():
            self.add_edge_attribute(name, min_value=attr_range.min, max_value=attr_range.max)
        self.set_use_internal_graph(config.use_internal_graph)

    # -------------------------------------------------------------------------
    # Sinks
    # -------------------------------------------------------------------------

    def add_sink(self, sink) -> None:
        """Register a sink for both structural and attribute events."""
        self.add_element_sink(sink)
        self.add_attribute_sink(sink)

    def remove_sink(self, sink) -> None:
        self.remove_element_sink(sink)
        self.remove_attribute_sink(sink)

    def add_element_sink(self, sink: ElementSink) -> None:
        if sink not in self._element_sinks:
            self._element_sinks.append(sink)
            self.logger.debug(f"[{self._source_id}] element sink added: {sink!r}")

    def remove_element_sink(self, sink: ElementSink) -> None:
        if sink in self._element_sinks:
            self._element_sinks.remove(sink)

    def add_attribute_sink(self, sink: AttributeSink) -> None:
        if sink not in self._attribute_sinks:
            self._attribute_sinks.append(sink)
            self.logger.debug(f"[{self._source_id}] attribute sink added: {sink!r}")

    def remove_attribute_sink(self, sink: AttributeSink) -> None:
        if sink in self._attribute_sinks:
            self._attribute_sinks.remove(sink)

    def clear_sinks(self) -> None:
        self.clear_element_sinks()
        self.clear_attribute_sinks()

    def clear_element_sinks(self) -> None:
        self._element_sinks.clear()

    def clear_attribute_sinks(self) -> None:
        self._attribute_sinks.clear()

    def element_sinks(self) -> List[ElementSink]:
        return list(self._element_sinks)

    def attribute_sinks(self) -> List[AttributeSink]:
        return list(self._attribute_sinks)

    def _send_node_added(self, node_id: str) -> None:
        for sink in list(self._element_sinks):
            sink.on_node_added(self._source_id, node_id)

    def _send_node_removed(self, node_id: str) -> None:
        for sink in list(self._element_sinks):
            sink.on_node_removed(self._source_id, node_id)

    def _send_edge_added(self, edge_id: str, from_id: str, to_id: str, directed: bool) -> None:
        for sink in list(self._element_sinks):
            sink.on_edge_added(self._source_id, edge_id, from_id, to_id, directed)

    def _send_edge_removed(self, edge_id: str) -> None:
        for sink in list(self._element_sinks):
            sink.on_edge_removed(self._source_id, edge_id)

    def _send_node_attribute_added(self, node_id: str, name: str, value) -> None:
        for sink in list(self._attribute_sinks):
            sink.on_node_attribute_added(self._source_id, node_id, name, value)

    def _send_edge_attribute_added(self, edge_id: str, name: str, value) -> None:
        for sink in list(self._attribute_sinks):
            sink.on_edge_attribute_added(self._source_id, edge_id, name, value)

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def _add_node(self, node_id: str) -> None:
        """Add a node and put attributes on it if needed."""
        self._send_node_added(node_id)

        if self.node_labels:
            self._send_node_attribute_added(node_id, LABEL_ATTRIBUTE, node_id)

        if self._use_internal_graph:
            self.internal_graph.add_node(node_id)
            if self.node_labels:
                self.internal_graph.set_node_attribute(node_id, LABEL_ATTRIBUTE, node_id)

        for name, value in self.node_attributes.apply_all(self.random):
            self._send_node_attribute_added(node_id, name, value)

            if self._use_internal_graph:
                self.internal_graph.set_node_attribute(node_id, name, value)

    def _add_node_at(self, node_id: str, x: float, y: float) -> None:
        """Same as ``_add_node`` plus an "xy" attribute positioning the node on a plane."""
        self._add_node(node_id)
        self._send_node_attribute_added(node_id, POSITION_ATTRIBUTE, [x, y])

        if self._use_internal_graph:
            self.internal_graph.set_node_attribute(node_id, POSITION_ATTRIBUTE, [x, y])

    def _del_node(self, node_id: str) -> None:
        """Remove a node. The mirror is updated before the event is sent."""
        if self._use_internal_graph:
            self.internal_graph.remove_node(node_id)

        self._send_node_removed(node_id)

    def _add_edge(self, edge_id: Optional[str], from_id: str, to_id: str) -> str:
        """
        Add an edge, choosing its orientation and putting attributes on it if needed.

        Args:
            edge_id: The edge identifier. If None it is built from the
                (possibly swapped) node ids as ``"<from>_<to>"``.
            from_id: Source node; may be swapped with the target when
                orientation is random.
            to_id: Target node.

        Returns:
            The identifier of the edge that was emitted.
        """
        from_id, to_id = self.direction.orient(from_id, to_id, self.random)

        if edge_id is None:
            edge_id = f"{from_id}_{to_id}"

        directed = self.direction.directed
        self._send_edge_added(edge_id, from_id, to_id, directed)

        if self._use_internal_graph:
            self.internal_graph.add_edge(edge_id, from_id, to_id, directed)

        if self.edge_labels:
            self._send_edge_attribute_added(edge_id, LABEL_ATTRIBUTE, edge_id)

            if self._use_internal_graph:
                self.internal_graph.set_edge_attribute(edge_id, LABEL_ATTRIBUTE, edge_id)

        for name, value in self.edge_attributes.apply_all(self.random):
            self._send_edge_attribute_added(edge_id, name, value)

            if self._use_internal_graph:
                self.internal_graph.set_edge_attribute(edge_id, name, value)

        return edge_id

    def _del_edge(self, edge_id: str) -> None:
        """Remove an edge. The event is sent before the mirror is updated."""
        self._send_edge_removed(edge_id)

        if self._use_internal_graph:
            self.internal_graph.remove_edge(edge_id)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source_id={self._source_id!r}, "
            f"direction={self.direction.mode.value}, "
            f"internal_graph={self._use_internal_graph})"
        )
