# solkit/monitoring/__init__.py

# Import classes using relative paths within this package
from .base import EventConfig, ExtractedEvent, ParsedLogEntry
from .discriminator import DiscriminatorCache, compute_event_discriminator
from .logs_event_processor import LogsEventProcessor, log_messages_from

__all__ = [
    "EventConfig",
    "ExtractedEvent",
    "ParsedLogEntry",
    "DiscriminatorCache",
    "compute_event_discriminator",
    "LogsEventProcessor",
    "log_messages_from",
]
