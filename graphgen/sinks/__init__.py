"""
Event Sinks

Ready-made consumers for generator event streams.
"""
from .recorder import EventRecorder
from .graph_sink import NetworkXGraphSink
from .logging_sink import LoggingSink

__all__ = [
    "EventRecorder",
    "NetworkXGraphSink",
    "LoggingSink",
]
