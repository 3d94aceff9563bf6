import json
import logging
from abc import ABC, abstractmethod
from typing import List

from django.core.serializers.json import DjangoJSONEncoder

from .types import ContextEvent, EventType

logger = logging.getLogger(__name__)


class EventSink(ABC):
    """Base class for event sinks."""

    @abstractmethod
    def write(self, event: ContextEvent) -> None:
        """Write event to the sink."""
        pass

    def flush(self) -> None:
        """Flush any buffered events."""
        pass

    def close(self) -> None:
        """Clean up resources."""
        pass


class LoggingEventSink(EventSink):
    """Writes events to Python logging (structured JSON)."""

    def __init__(self, logger_name: str = "codegen_core.events"):
        self.logger = logging.getLogger(logger_name)

    def write(self, event: ContextEvent) -> None:
        level = {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "error": logging.ERROR,
        }.get(event.severity.value, logging.INFO)
        if not self.logger.isEnabledFor(level):
            return
        message = json.dumps(event.to_dict(), cls=DjangoJSONEncoder, ensure_ascii=False)
        self.logger.log(level, message)


class MemoryEventSink(EventSink):
    """Keeps events in a list. Useful in tests and for post-run reporting."""

    def __init__(self):
        self.events: List[ContextEvent] = []

    def write(self, event: ContextEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> List[ContextEvent]:
        return [e for e in self.events if e.event_type == event_type]

    def close(self) -> None:
        self.events.clear()


class NullEventSink(EventSink):
    """Discards every event."""

    def write(self, event: ContextEvent) -> None:
        pass


def emit(sink: EventSink, event: ContextEvent) -> None:
    """Send ``event`` to ``sink``; a failing sink never aborts the caller."""
    try:
        sink.write(event)
    except Exception as e:
        logger.error(f"Sink {sink.__class__.__name__} failed: {e}")
