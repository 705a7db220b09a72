"""
Generator Interfaces

Defines the Protocols at the edges of the generator core:

- ElementSink / AttributeSink / Sink: push-based consumers of the event
  stream. Calls are synchronous and arrive in emission order.
- Generator: the contract a driving loop relies on.

Implementations satisfy these Protocols via structural subtyping; no
explicit inheritance required.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ElementSink(Protocol):
    """Port for structural events (nodes and edges)."""

    def on_node_added(self, source_id: str, node_id: str) -> None:
        """A node with this id was created."""
        ...

    def on_node_removed(self, source_id: str, node_id: str) -> None:
        """The node with this id was removed."""
        ...

    def on_edge_added(
        self,
        source_id: str,
        edge_id: str,
        from_id: str,
        to_id: str,
        directed: bool,
    ) -> None:
        """An edge was created between two nodes."""
        ...

    def on_edge_removed(self, source_id: str, edge_id: str) -> None:
        """The edge with this id was removed."""
        ...


@runtime_checkable
class AttributeSink(Protocol):
    """Port for attribute events."""

    def on_node_attribute_added(
        self, source_id: str, node_id: str, name: str, value: Any
    ) -> None:
        """An attribute was set on a node."""
        ...

    def on_edge_attribute_added(
        self, source_id: str, edge_id: str, name: str, value: Any
    ) -> None:
        """An attribute was set on an edge."""
        ...


@runtime_checkable
class Sink(ElementSink, AttributeSink, Protocol):
    """Consumer of both structural and attribute events."""


@runtime_checkable
class Generator(Protocol):
    """
    Contract between a generator and the loop driving it.

    Typical use::

        generator.add_sink(sink)
        generator.begin()
        while generator.next_events():
            pass
        generator.end()
    """

    def begin(self) -> None:
        """Start generation, usually emitting the initial structure."""
        ...

    def next_events(self) -> bool:
        """Emit the next increment of events. Return False once done."""
        ...

    def end(self) -> None:
        """Finish generation and drop bookkeeping so the generator can restart."""
        ...
