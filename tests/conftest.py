"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for testing the graphgen package.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "mirror"        # Run only mirror tests
    pytest tests/ --quick            # Skip slow statistical tests
"""

import pytest
from pathlib import Path
from typing import List, Optional, Tuple

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphgen import BaseGenerator, EventRecorder


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Concrete Generators
# =============================================================================

class ManualGenerator(BaseGenerator):
    """
    Generator without an algorithm of its own: tests call the protected
    emission operations directly through the public helpers below.
    """

    def begin(self) -> None:
        pass

    def next_events(self) -> bool:
        return False

    def node(self, node_id: str) -> None:
        self._add_node(node_id)

    def node_at(self, node_id: str, x: float, y: float) -> None:
        self._add_node_at(node_id, x, y)

    def del_node(self, node_id: str) -> None:
        self._del_node(node_id)

    def edge(self, edge_id: Optional[str], from_id: str, to_id: str) -> str:
        return self._add_edge(edge_id, from_id, to_id)

    def del_edge(self, edge_id: str) -> None:
        self._del_edge(edge_id)


class ChainGenerator(BaseGenerator):
    """Grows a path 0-1-2-...; every third step removes the oldest edge."""

    def __init__(self, length: int = 10, **kwargs) -> None:
        super().__init__(**kwargs)
        self.length = length
        self.current = 0
        self.edges: List[str] = []

    def begin(self) -> None:
        self.current = 0
        self.edges = []
        self._add_node("0")

    def next_events(self) -> bool:
        self.current += 1
        node_id = str(self.current)
        self._add_node(node_id)
        self.edges.append(self._add_edge(None, str(self.current - 1), node_id))
        if self.current % 3 == 0:
            self._del_edge(self.edges.pop(0))
        return self.current < self.length


def run_generator(generator: BaseGenerator) -> None:
    generator.begin()
    while generator.next_events():
        pass
    generator.end()


def signature(recorder: EventRecorder) -> List[Tuple]:
    """Event stream without source ids, comparable across generator instances."""
    result = []
    for event in recorder.to_dicts():
        event = dict(event)
        event.pop("source_id")
        result.append(tuple(sorted((k, repr(v)) for k, v in event.items())))
    return result


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def recorder() -> EventRecorder:
    """Fresh event recorder"""
    return EventRecorder()


@pytest.fixture
def generator(recorder) -> ManualGenerator:
    """Manual generator wired to the recorder, seeded for reproducibility"""
    gen = ManualGenerator()
    gen.add_sink(recorder)
    gen.set_random_seed(42)
    return gen


@pytest.fixture
def mirrored_generator(generator) -> ManualGenerator:
    """Manual generator with the internal graph enabled"""
    generator.set_use_internal_graph(True)
    return generator


@pytest.fixture
def config_file(tmp_path) -> Path:
    """YAML generator configuration on disk"""
    path = tmp_path / "generator.yaml"
    path.write_text(
        "generator:\n"
        "  seed: 7\n"
        "  directed: true\n"
        "  randomly_directed: true\n"
        "  node_labels: true\n"
        "  edge_labels: false\n"
        "  use_internal_graph: true\n"
        "  node_attributes:\n"
        "    weight: [0, 10]\n"
        "    load:\n"
        "  edge_attributes:\n"
        "    capacity: {min: 1, max: 100}\n"
    )
    return path
