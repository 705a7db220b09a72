"""
Direction Policy

Decides for each new edge whether it is directed and, when the direction is
random, whether its endpoints are swapped.

Flag semantics follow the historical toggle behaviour:
``set_directed_edges(False, ...)`` leaves ``randomly_directed`` untouched,
so turning ``directed`` back on later reactivates random orientation.
"""

from enum import Enum
from typing import Tuple

from graphgen.core.random_source import RandomSource


class DirectionMode(str, Enum):
    """Effective orientation mode derived from the two flags"""
    UNDIRECTED = "UNDIRECTED"
    DIRECTED = "DIRECTED"
    DIRECTED_RANDOM = "DIRECTED_RANDOM"


class DirectionPolicy:
    """Edge orientation rules for a generator."""

    def __init__(self, directed: bool = False, randomly_directed: bool = False) -> None:
        self.directed = False
        self.randomly_directed = False
        self.set_directed_edges(directed, randomly_directed)

    def set_directed_edges(self, directed: bool, randomly: bool) -> None:
        """
        Make generated edges directed or not.

        ``randomly`` only takes effect together with ``directed``; it is
        never cleared here.
        """
        self.directed = directed
        if directed and randomly:
            self.randomly_directed = randomly

    @property
    def random_orientation(self) -> bool:
        return self.directed and self.randomly_directed

    @property
    def mode(self) -> DirectionMode:
        if not self.directed:
            return DirectionMode.UNDIRECTED
        if self.randomly_directed:
            return DirectionMode.DIRECTED_RANDOM
        return DirectionMode.DIRECTED

    def orient(self, from_id: str, to_id: str, random: RandomSource) -> Tuple[str, str]:
        """
        Return the effective ``(from, to)`` pair.

        Consumes exactly one draw when orientation is random, none otherwise.
        """
        if self.random_orientation and random.next_float() > 0.5:
            return to_id, from_id
        return from_id, to_id

    def __repr__(self) -> str:
        return f"DirectionPolicy(mode={self.mode.value})"
