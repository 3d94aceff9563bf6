"""
Structured events for template context generation.

The builder reports its progress to an injected :class:`EventSink` rather than
printing debug output. :class:`LoggingEventSink` is the default.
"""

from .sinks import EventSink, LoggingEventSink, MemoryEventSink, NullEventSink, emit
from .types import ContextEvent, EventType, Severity

__all__ = [
    "ContextEvent",
    "EventType",
    "Severity",
    "EventSink",
    "LoggingEventSink",
    "MemoryEventSink",
    "NullEventSink",
    "emit",
]
