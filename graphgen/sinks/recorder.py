"""
Event Recorder

Sink that keeps every received event, in order, as GraphEvent records.
Useful for replaying a run, comparing two runs, or asserting on output.
"""

from typing import Any, Dict, List, Set, Type

from graphgen.core.events import (
    EdgeAdded,
    EdgeAttributeAdded,
    EdgeRemoved,
    GraphEvent,
    NodeAdded,
    NodeAttributeAdded,
    NodeRemoved,
)


class EventRecorder:
    """Records the event stream of one or more generators."""

    def __init__(self) -> None:
        self.events: List[GraphEvent] = []

    def on_node_added(self, source_id: str, node_id: str) -> None:
        self.events.append(NodeAdded(source_id, node_id))

    def on_node_removed(self, source_id: str, node_id: str) -> None:
        self.events.append(NodeRemoved(source_id, node_id))

    def on_edge_added(
        self, source_id: str, edge_id: str, from_id: str, to_id: str, directed: bool
    ) -> None:
        self.events.append(EdgeAdded(source_id, edge_id, from_id, to_id, directed))

    def on_edge_removed(self, source_id: str, edge_id: str) -> None:
        self.events.append(EdgeRemoved(source_id, edge_id))

    def on_node_attribute_added(self, source_id: str, node_id: str, name: str, value: Any) -> None:
        self.events.append(NodeAttributeAdded(source_id, node_id, name, value))

    def on_edge_attribute_added(self, source_id: str, edge_id: str, name: str, value: Any) -> None:
        self.events.append(EdgeAttributeAdded(source_id, edge_id, name, value))

    def of_type(self, event_class: Type[GraphEvent]) -> List[GraphEvent]:
        return [e for e in self.events if isinstance(e, event_class)]

    def live_node_ids(self) -> Set[str]:
        """Node ids added and not removed since."""
        live: Set[str] = set()
        for event in self.events:
            if isinstance(event, NodeAdded):
                live.add(event.node_id)
            elif isinstance(event, NodeRemoved):
                live.discard(event.node_id)
        return live

    def live_edge_ids(self) -> Set[str]:
        """Edge ids added and not removed since."""
        live: Set[str] = set()
        for event in self.events:
            if isinstance(event, EdgeAdded):
                live.add(event.edge_id)
            elif isinstance(event, EdgeRemoved):
                live.discard(event.edge_id)
        return live

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.events]

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
