from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class EventType(str, Enum):
    """Events emitted while building a template context."""
    CONTEXT_STARTED = "context.started"
    INTROSPECTION_TYPES_COLLECTED = "context.introspection.collected"
    TYPES_FILTERED = "context.types.filtered"
    CONTEXT_COMPLETED = "context.completed"
    CLASSIFICATION_FAILED = "context.classification.failed"


class Severity(str, Enum):
    """Event severity levels (aligned with syslog)."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


DEFAULT_SEVERITY = {
    EventType.CONTEXT_STARTED: Severity.DEBUG,
    EventType.INTROSPECTION_TYPES_COLLECTED: Severity.DEBUG,
    EventType.TYPES_FILTERED: Severity.DEBUG,
    EventType.CONTEXT_COMPLETED: Severity.INFO,
    EventType.CLASSIFICATION_FAILED: Severity.ERROR,
}


@dataclass
class ContextEvent:
    """Structured record of one step of template context generation."""
    event_type: EventType
    message: str = ""
    severity: Optional[Severity] = None
    type_name: Optional[str] = None

    # Counters and names relevant to the step
    context: dict = field(default_factory=dict)

    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.severity is None:
            self.severity = DEFAULT_SEVERITY.get(self.event_type, Severity.INFO)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        data["event_type"] = self.event_type.value
        data["severity"] = self.severity.value
        data["timestamp"] = self.timestamp.isoformat()
        return data
