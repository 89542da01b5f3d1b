# solkit/monitoring/discriminator.py

import base64
import hashlib
import threading
from typing import Dict

from ..core.constants import DISCRIMINATOR_LENGTH, EVENT_DISCRIMINATOR_PREFIX
from ..utils.logger import get_logger

logger = get_logger(__name__)


def compute_event_discriminator(event_name: str) -> bytes:
    """Anchor event discriminator: first 8 bytes of sha256("event:<EventName>")."""
    preimage = f"{EVENT_DISCRIMINATOR_PREFIX}{event_name}".encode("utf-8")
    return hashlib.sha256(preimage).digest()[:DISCRIMINATOR_LENGTH]


class DiscriminatorCache:
    """
    Memoises event discriminators by name for the lifetime of the instance.

    Lookups are lock-free; inserts take the lock and keep the first value
    stored for a name. Two threads racing on a new name both hash it, which
    is harmless since the result is identical.
    """

    def __init__(self):
        self._cache: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, event_name: str) -> bool:
        return event_name in self._cache

    def get(self, event_name: str) -> bytes:
        cached = self._cache.get(event_name)
        if cached is not None:
            return cached

        discriminator = compute_event_discriminator(event_name)
        with self._lock:
            stored = self._cache.setdefault(event_name, discriminator)
        logger.debug(f"Cached discriminator for '{event_name}': {stored.hex()}")
        return stored

    def get_base64(self, event_name: str) -> str:
        return base64.b64encode(self.get(event_name)).decode("ascii")

    def matches(self, data: bytes, event_name: str) -> bool:
        """True if data starts with the event's discriminator. Short data never matches."""
        if len(data) < DISCRIMINATOR_LENGTH:
            return False
        return bytes(data[:DISCRIMINATOR_LENGTH]) == self.get(event_name)
