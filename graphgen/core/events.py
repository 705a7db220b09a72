"""
Graph Events

Pure data records for everything a generator can emit:

Structural:
- NODE_ADDED: {source_id, node_id}
- NODE_REMOVED: {source_id, node_id}
- EDGE_ADDED: {source_id, edge_id, from_id, to_id, directed}
- EDGE_REMOVED: {source_id, edge_id}

Attribute:
- NODE_ATTRIBUTE_ADDED: {source_id, node_id, name, value}
- EDGE_ATTRIBUTE_ADDED: {source_id, edge_id, name, value}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class EventType(str, Enum):
    """Kinds of events delivered to sinks"""
    NODE_ADDED = "NODE_ADDED"
    NODE_REMOVED = "NODE_REMOVED"
    EDGE_ADDED = "EDGE_ADDED"
    EDGE_REMOVED = "EDGE_REMOVED"
    NODE_ATTRIBUTE_ADDED = "NODE_ATTRIBUTE_ADDED"
    EDGE_ATTRIBUTE_ADDED = "EDGE_ATTRIBUTE_ADDED"


@dataclass(frozen=True)
class GraphEvent:
    """Base for all generator events."""
    source_id: str

    @property
    def event_type(self) -> EventType:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        d = {"event_type": self.event_type.value}
        d.update(self.__dict__)
        return d


@dataclass(frozen=True)
class NodeAdded(GraphEvent):
    node_id: str

    @property
    def event_type(self) -> EventType:
        return EventType.NODE_ADDED


@dataclass(frozen=True)
class NodeRemoved(GraphEvent):
    node_id: str

    @property
    def event_type(self) -> EventType:
        return EventType.NODE_REMOVED


@dataclass(frozen=True)
class EdgeAdded(GraphEvent):
    edge_id: str
    from_id: str
    to_id: str
    directed: bool

    @property
    def event_type(self) -> EventType:
        return EventType.EDGE_ADDED


@dataclass(frozen=True)
class EdgeRemoved(GraphEvent):
    edge_id: str

    @property
    def event_type(self) -> EventType:
        return EventType.EDGE_REMOVED


@dataclass(frozen=True)
class NodeAttributeAdded(GraphEvent):
    node_id: str
    name: str
    value: Any

    @property
    def event_type(self) -> EventType:
        return EventType.NODE_ATTRIBUTE_ADDED


@dataclass(frozen=True)
class EdgeAttributeAdded(GraphEvent):
    edge_id: str
    name: str
    value: Any

    @property
    def event_type(self) -> EventType:
        return EventType.EDGE_ATTRIBUTE_ADDED
