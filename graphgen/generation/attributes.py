"""
Attribute Factory Registry

Maps attribute names to factories ``(RandomSource) -> value``. A generator
keeps one registry for nodes and one for edges and applies it to every new
element.

Enumeration follows insertion order, and that order fixes the sequence of
random draws. Overwriting a name keeps its original position.
"""

from typing import Any, Callable, Dict, List, Tuple

from graphgen.core.random_source import RandomSource

AttributeFactory = Callable[[RandomSource], Any]


def range_factory(min_value: float, max_value: float) -> AttributeFactory:
    """Factory drawing uniformly from ``[min_value, max_value)``."""
    def factory(random: RandomSource) -> float:
        return min_value + (max_value - min_value) * random.next_double()
    return factory


class AttributeRegistry:
    """Ordered registry of attribute factories for one element scope."""

    def __init__(self, scope: str = "node") -> None:
        self.scope = scope
        self._factories: Dict[str, AttributeFactory] = {}

    def add(self, name: str, factory: AttributeFactory) -> None:
        """Register or replace the factory for ``name``."""
        self._factories[name] = factory

    def add_range(self, name: str, min_value: float, max_value: float) -> None:
        """Register a uniform numeric attribute in ``[min_value, max_value)``."""
        self.add(name, range_factory(min_value, max_value))

    def add_default(self, name: str) -> None:
        """Register a uniform numeric attribute in ``[0, 1)``."""
        self.add_range(name, 0, 1)

    def remove(self, name: str) -> None:
        """Deregister ``name``; unknown names are ignored."""
        self._factories.pop(name, None)

    def clear(self) -> None:
        self._factories.clear()

    def names(self) -> List[str]:
        return list(self._factories)

    def apply_all(self, random: RandomSource) -> List[Tuple[str, Any]]:
        """
        Compute a fresh value for every registered attribute.

        Args:
            random: Source every factory draws from.

        Returns:
            ``(name, value)`` pairs in registry order.
        """
        return [(name, factory(random)) for name, factory in self._factories.items()]

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"AttributeRegistry(scope={self.scope!r}, names={self.names()})"
