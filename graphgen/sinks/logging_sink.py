"""
Logging Sink

Writes every event it receives to a standard-library logger, one line per
event. Attach it next to other sinks to trace a generation run.
"""

import logging
from typing import Any, Optional


class LoggingSink:
    """Sink that logs the event stream."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def on_node_added(self, source_id: str, node_id: str) -> None:
        self.logger.log(self.level, f"[{source_id}] + node {node_id}")

    def on_node_removed(self, source_id: str, node_id: str) -> None:
        self.logger.log(self.level, f"[{source_id}] - node {node_id}")

    def on_edge_added(
        self, source_id: str, edge_id: str, from_id: str, to_id: str, directed: bool
    ) -> None:
        arrow = "->" if directed else "--"
        self.logger.log(self.level, f"[{source_id}] + edge {edge_id} ({from_id} {arrow} {to_id})")

    def on_edge_removed(self, source_id: str, edge_id: str) -> None:
        self.logger.log(self.level, f"[{source_id}] - edge {edge_id}")

    def on_node_attribute_added(self, source_id: str, node_id: str, name: str, value: Any) -> None:
        self.logger.log(self.level, f"[{source_id}] node {node_id}.{name} = {value!r}")

    def on_edge_attribute_added(self, source_id: str, edge_id: str, name: str, value: Any) -> None:
        self.logger.log(self.level, f"[{source_id}] edge {edge_id}.{name} = {value!r}")
