# solkit/monitoring/base.py
from dataclasses import dataclass, field
from typing import Callable, Generic, Tuple, TypeVar

from ..core.constants import DISCRIMINATOR_LENGTH

T = TypeVar("T")


@dataclass(frozen=True)
class EventConfig(Generic[T]):
    """An event type to look for: name, 8-byte discriminator and payload decoder."""
    name: str
    discriminator: bytes
    decode: Callable[[bytes], T] = field(compare=False)


@dataclass(frozen=True)
class ExtractedEvent(Generic[T]):
    name: str
    data: T
    raw_data: bytes  # includes the discriminator prefix

    @property
    def payload(self) -> bytes:
        """Raw bytes after the discriminator."""
        return self.raw_data[DISCRIMINATOR_LENGTH:]


@dataclass(frozen=True)
class ParsedLogEntry:
    """Log lines of one program invocation, framing lines included."""
    program_id: str
    logs: Tuple[str, ...]

