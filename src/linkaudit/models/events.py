"""Event types for the streaming audit API."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class EventType(str, Enum):
    """Types of events emitted while auditing a batch."""

    # Lifecycle events
    STARTED = "started"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    # Per-document events
    DOCUMENT_STARTED = "document_started"
    DOCUMENT_COMPLETED = "document_completed"
    DOCUMENT_FAILED = "document_failed"


@dataclass
class AuditEvent:
    """
    Event emitted during an audit run.

    Example:
        async for event in auditor.run(documents):
            if event.type == EventType.DOCUMENT_STARTED:
                print(f"Progress: {event.current}/{event.total}")
            elif event.type == EventType.DOCUMENT_FAILED:
                print(f"Error: {event.url} - {event.error}")
    """

    type: EventType

    # Timestamp (always UTC)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    url: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None

    # Progress tracking
    current: Optional[int] = None
    total: Optional[int] = None

    @property
    def progress_percent(self) -> Optional[float]:
        """Calculate progress percentage if current and total are set."""
        if self.current is not None and self.total and self.total > 0:
            return (self.current / self.total) * 100
        return None

    @property
    def is_error(self) -> bool:
        """Check if this is an error event."""
        return self.type == EventType.DOCUMENT_FAILED


@dataclass
class AuditStats:
    """Cumulative statistics for an audit run."""

    documents_processed: int = 0
    documents_failed: int = 0
    duration_seconds: float = 0.0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as a percentage."""
        if self.documents_processed == 0:
            return 0.0
        succeeded = self.documents_processed - self.documents_failed
        return (succeeded / self.documents_processed) * 100

    def to_dict(self) -> dict:
        """Convert stats to dictionary for serialization."""
        return {
            "documents_processed": self.documents_processed,
            "documents_failed": self.documents_failed,
            "duration_seconds": round(self.duration_seconds, 2),
            "success_rate": round(self.success_rate, 1),
        }
