"""
Mirror Graph

Internal replica of the structure a generator has emitted, kept in lock-step
with the event stream so concrete generators can query what already exists
(ids, degree, neighbours, attribute values).

Backed by a networkx MultiDiGraph: every edge is stored once, oriented
``from -> to``, keyed by its edge id and tagged with a ``directed`` flag, so
directed and undirected edges can coexist.

The mirror is non-strict. Operations that a strict graph would reject are
skipped instead:
    - adding a node or edge id that already exists
    - adding an edge whose endpoints are unknown
    - setting an attribute on an unknown node or edge
    - removing an unknown node or edge
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import networkx as nx

logger = logging.getLogger(__name__)


class MirrorGraph:
    """Non-strict, mixed directed/undirected graph used for bookkeeping."""

    def __init__(self, name: str = "internal_graph") -> None:
        self.name = name
        self.graph = nx.MultiDiGraph(name=name)
        # edge id -> (from, to)
        self._edges: Dict[str, Tuple[str, str]] = {}

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_node(self, node_id: str) -> None:
        if node_id in self.graph:
            logger.debug(f"[{self.name}] node '{node_id}' already present, skipped")
            return
        self.graph.add_node(node_id)

    def remove_node(self, node_id: str) -> None:
        """Remove a node together with its incident edges."""
        if node_id not in self.graph:
            logger.debug(f"[{self.name}] unknown node '{node_id}', removal skipped")
            return
        incident = [key for _, _, key in self.graph.out_edges(node_id, keys=True)]
        incident += [key for _, _, key in self.graph.in_edges(node_id, keys=True)]
        for edge_id in incident:
            self._edges.pop(edge_id, None)
        self.graph.remove_node(node_id)

    def add_edge(self, edge_id: str, from_id: str, to_id: str, directed: bool = False) -> None:
        if edge_id in self._edges:
            logger.debug(f"[{self.name}] edge '{edge_id}' already present, skipped")
            return
        if from_id not in self.graph or to_id not in self.graph:
            logger.debug(
                f"[{self.name}] edge '{edge_id}' references unknown node "
                f"({from_id} -> {to_id}), skipped"
            )
            return
        self.graph.add_edge(from_id, to_id, key=edge_id, directed=directed)
        self._edges[edge_id] = (from_id, to_id)

    def remove_edge(self, edge_id: str) -> None:
        endpoints = self._edges.pop(edge_id, None)
        if endpoints is None:
            logger.debug(f"[{self.name}] unknown edge '{edge_id}', removal skipped")
            return
        self.graph.remove_edge(endpoints[0], endpoints[1], key=edge_id)

    def set_node_attribute(self, node_id: str, name: str, value: Any) -> None:
        if node_id not in self.graph:
            logger.debug(f"[{self.name}] unknown node '{node_id}', attribute '{name}' skipped")
            return
        self.graph.nodes[node_id][name] = value

    def set_edge_attribute(self, edge_id: str, name: str, value: Any) -> None:
        endpoints = self._edges.get(edge_id)
        if endpoints is None:
            logger.debug(f"[{self.name}] unknown edge '{edge_id}', attribute '{name}' skipped")
            return
        self.graph.edges[endpoints[0], endpoints[1], edge_id][name] = value

    def clear(self) -> None:
        """Drop every node and edge; the mirror stays usable."""
        self.graph.clear()
        self.graph.graph["name"] = self.name
        self._edges.clear()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_node(self, node_id: str) -> bool:
        return node_id in self.graph

    def has_edge(self, edge_id: str) -> bool:
        return edge_id in self._edges

    def node_ids(self) -> List[str]:
        return list(self.graph.nodes)

    def edge_ids(self) -> List[str]:
        return list(self._edges)

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return len(self._edges)

    def edge_endpoints(self, edge_id: str) -> Optional[Tuple[str, str]]:
        """``(from, to)`` of an edge, or None if unknown."""
        return self._edges.get(edge_id)

    def is_directed(self, edge_id: str) -> Optional[bool]:
        endpoints = self._edges.get(edge_id)
        if endpoints is None:
            return None
        return self.graph.edges[endpoints[0], endpoints[1], edge_id]["directed"]

    def get_node_attribute(self, node_id: str, name: str, default: Any = None) -> Any:
        if node_id not in self.graph:
            return default
        return self.graph.nodes[node_id].get(name, default)

    def get_edge_attribute(self, edge_id: str, name: str, default: Any = None) -> Any:
        endpoints = self._edges.get(edge_id)
        if endpoints is None:
            return default
        return self.graph.edges[endpoints[0], endpoints[1], edge_id].get(name, default)

    def degree(self, node_id: str) -> int:
        """Number of edges incident to the node, whatever their orientation."""
        if node_id not in self.graph:
            return 0
        return self.graph.degree(node_id)

    def neighbors(self, node_id: str) -> List[str]:
        """Nodes sharing an edge with ``node_id``, in first-seen order."""
        if node_id not in self.graph:
            return []
        seen = dict.fromkeys(self.graph.successors(node_id))
        seen.update(dict.fromkeys(self.graph.predecessors(node_id)))
        return list(seen)

    def to_networkx(self) -> nx.MultiDiGraph:
        """Independent copy of the underlying networkx graph."""
        return self.graph.copy()

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.graph

    def __repr__(self) -> str:
        return f"MirrorGraph(name={self.name!r}, nodes={self.node_count()}, edges={self.edge_count()})"
