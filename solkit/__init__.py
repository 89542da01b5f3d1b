# solkit/__init__.py

from .core import (
    AddressService,
    AddressSeed,
    BytesSeed,
    PdaAddress,
    Seed,
    TextSeed,
    U32Seed,
    U64Seed,
    as_seed,
    encode_seed,
    encode_seeds,
)
from .monitoring import (
    DiscriminatorCache,
    EventConfig,
    ExtractedEvent,
    LogsEventProcessor,
    ParsedLogEntry,
)

__version__ = "0.1.0"

__all__ = [
    "AddressService",
    "AddressSeed",
    "BytesSeed",
    "PdaAddress",
    "Seed",
    "TextSeed",
    "U32Seed",
    "U64Seed",
    "as_seed",
    "encode_seed",
    "encode_seeds",
    "DiscriminatorCache",
    "EventConfig",
    "ExtractedEvent",
    "LogsEventProcessor",
    "ParsedLogEntry",
]
