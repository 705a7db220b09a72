"""
Unit Tests for graphgen.core

Tests for:
    - random_source.py: seeding, draw counting, ranges
    - identity.py: source id format, monotonic counter, thread safety
    - events.py: event records and serialization
    - interfaces.py: structural subtyping of sinks and generators
"""

import threading

import pytest

from graphgen.core import (
    RandomSource,
    GeneratorIdRegistry,
    next_generator_id,
    EventType,
    NodeAdded,
    EdgeAdded,
    NodeAttributeAdded,
    ElementSink,
    AttributeSink,
    Sink,
    Generator,
)
from graphgen.sinks import EventRecorder, NetworkXGraphSink, LoggingSink

from conftest import ManualGenerator


# =============================================================================
# RandomSource Tests
# =============================================================================

class TestRandomSource:
    """Tests for the seeded random source."""

    def test_same_seed_same_sequence(self):
        a = RandomSource(123)
        b = RandomSource(123)
        assert [a.next_double() for _ in range(20)] == [b.next_double() for _ in range(20)]

    def test_different_seeds_differ(self):
        a = RandomSource(1)
        b = RandomSource(2)
        assert [a.next_double() for _ in range(5)] != [b.next_double() for _ in range(5)]

    def test_reseed_restarts_sequence(self):
        source = RandomSource(99)
        first = [source.next_double() for _ in range(5)]
        source.next_bool()
        source.set_seed(99)
        assert [source.next_double() for _ in range(5)] == first

    def test_every_draw_counted_once(self):
        source = RandomSource(5)
        source.next_double()
        source.next_float()
        source.next_bool()
        source.uniform(3, 4)
        assert source.draw_count == 4

    def test_reseed_resets_draw_count(self):
        source = RandomSource(5)
        source.next_double()
        source.set_seed(6)
        assert source.draw_count == 0
        assert source.seed == 6

    def test_uniform_within_bounds(self):
        source = RandomSource(11)
        for _ in range(1000):
            value = source.uniform(-2.0, 3.0)
            assert -2.0 <= value < 3.0

    def test_underlying_rng_is_private(self):
        assert RandomSource(1).get_rng() is not RandomSource(1).get_rng()


# =============================================================================
# Identity Tests
# =============================================================================

class TestGeneratorIdentity:
    """Tests for generator source ids."""

    def test_format(self):
        registry = GeneratorIdRegistry()
        assert registry.next_id() == "generator-00000000"
        assert registry.next_id() == "generator-00000001"

    def test_hex_formatting(self):
        registry = GeneratorIdRegistry(start=255)
        assert registry.next_id() == "generator-000000ff"

    def test_process_ids_are_unique_and_increasing(self):
        ids = [next_generator_id() for _ in range(5)]
        assert len(set(ids)) == 5
        values = [int(i.split("-")[1], 16) for i in ids]
        assert values == sorted(values)

    def test_generators_get_distinct_ids(self):
        a, b = ManualGenerator(), ManualGenerator()
        assert a.source_id != b.source_id
        assert a.source_id.startswith("generator-")
        assert len(a.source_id) == len("generator-") + 8

    def test_source_id_is_read_only(self):
        gen = ManualGenerator()
        with pytest.raises(AttributeError):
            gen.source_id = "other"

    def test_concurrent_reservations_never_collide(self):
        registry = GeneratorIdRegistry()
        results = []
        lock = threading.Lock()

        def worker():
            local = [registry.next_id() for _ in range(200)]
            with lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 1600
        assert len(set(results)) == 1600
        assert registry.peek() == 1600


# =============================================================================
# Event Tests
# =============================================================================

class TestEvents:
    """Tests for event records."""

    def test_event_types(self):
        assert NodeAdded("g", "n").event_type == EventType.NODE_ADDED
        assert EdgeAdded("g", "e", "a", "b", True).event_type == EventType.EDGE_ADDED

    def test_to_dict(self):
        event = NodeAttributeAdded("g", "n1", "weight", 0.5)
        assert event.to_dict() == {
            "event_type": "NODE_ATTRIBUTE_ADDED",
            "source_id": "g",
            "node_id": "n1",
            "name": "weight",
            "value": 0.5,
        }

    def test_events_are_immutable(self):
        event = NodeAdded("g", "n")
        with pytest.raises(AttributeError):
            event.node_id = "m"

    def test_equality(self):
        assert EdgeAdded("g", "e", "a", "b", False) == EdgeAdded("g", "e", "a", "b", False)


# =============================================================================
# Protocol Tests
# =============================================================================

class TestProtocols:
    """Sinks and generators satisfy the ports structurally."""

    @pytest.mark.parametrize("sink_class", [EventRecorder, NetworkXGraphSink, LoggingSink])
    def test_bundled_sinks_are_sinks(self, sink_class):
        sink = sink_class()
        assert isinstance(sink, Sink)
        assert isinstance(sink, ElementSink)
        assert isinstance(sink, AttributeSink)

    def test_partial_sink(self):
        class CountingElementSink:
            def on_node_added(self, source_id, node_id): pass
            def on_node_removed(self, source_id, node_id): pass
            def on_edge_added(self, source_id, edge_id, from_id, to_id, directed): pass
            def on_edge_removed(self, source_id, edge_id): pass

        sink = CountingElementSink()
        assert isinstance(sink, ElementSink)
        assert not isinstance(sink, AttributeSink)

    def test_generator_protocol(self):
        assert isinstance(ManualGenerator(), Generator)
