"""
NetworkX Graph Sink

Materializes an event stream into a networkx MultiDiGraph so the generated
structure can be analysed with the usual networkx tooling.

Edges are stored once, oriented ``from -> to`` and keyed by edge id, with a
``directed`` attribute. ``to_undirected_view`` / ``to_simple_graph`` give the
common projections.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Tuple

import networkx as nx


class NetworkXGraphSink:
    """Sink building a networkx graph from generator events."""

    def __init__(self, graph: Optional[nx.MultiDiGraph] = None):
        self.logger = logging.getLogger(__name__)
        self.graph = graph if graph is not None else nx.MultiDiGraph()
        self._edges: Dict[str, Tuple[str, str]] = {}

    # -------------------------------------------------------------------------
    # Element events
    # -------------------------------------------------------------------------

    def on_node_added(self, source_id: str, node_id: str) -> None:
        self.graph.add_node(node_id)

    def on_node_removed(self, source_id: str, node_id: str) -> None:
        if node_id not in self.graph:
            self.logger.debug(f"Removal of unknown node '{node_id}' from {source_id} ignored")
            return
        for edge_id in [k for k, (u, v) in self._edges.items() if node_id in (u, v)]:
            del self._edges[edge_id]
        self.graph.remove_node(node_id)

    def on_edge_added(
        self, source_id: str, edge_id: str, from_id: str, to_id: str, directed: bool
    ) -> None:
        if edge_id in self._edges:
            self.logger.debug(f"Duplicate edge '{edge_id}' from {source_id} ignored")
            return
        self.graph.add_edge(from_id, to_id, key=edge_id, directed=directed)
        self._edges[edge_id] = (from_id, to_id)

    def on_edge_removed(self, source_id: str, edge_id: str) -> None:
        endpoints = self._edges.pop(edge_id, None)
        if endpoints is None:
            self.logger.debug(f"Removal of unknown edge '{edge_id}' from {source_id} ignored")
            return
        self.graph.remove_edge(endpoints[0], endpoints[1], key=edge_id)

    # -------------------------------------------------------------------------
    # Attribute events
    # -------------------------------------------------------------------------

    def on_node_attribute_added(self, source_id: str, node_id: str, name: str, value: Any) -> None:
        if node_id in self.graph:
            self.graph.nodes[node_id][name] = value

    def on_edge_attribute_added(self, source_id: str, edge_id: str, name: str, value: Any) -> None:
        endpoints = self._edges.get(edge_id)
        if endpoints is not None:
            self.graph.edges[endpoints[0], endpoints[1], edge_id][name] = value

    # -------------------------------------------------------------------------
    # Projections
    # -------------------------------------------------------------------------

    def edge_endpoints(self, edge_id: str) -> Optional[Tuple[str, str]]:
        return self._edges.get(edge_id)

    def to_undirected_view(self) -> nx.MultiGraph:
        """Undirected multigraph view of everything received."""
        return self.graph.to_undirected(as_view=True)

    def to_simple_graph(self) -> nx.Graph:
        """Simple undirected graph (parallel edges merged, last attributes win)."""
        simple = nx.Graph()
        simple.add_nodes_from(self.graph.nodes(data=True))
        for u, v, data in self.graph.edges(data=True):
            simple.add_edge(u, v, **data)
        return simple

    def clear(self) -> None:
        self.graph.clear()
        self._edges.clear()
