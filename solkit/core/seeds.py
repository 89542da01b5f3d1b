# solkit/core/seeds.py
"""
Seed values for program derived address (PDA) derivation.

Each seed is a small tagged value; encode_seed() turns it into the exact
bytes the runtime hashes. Integer widths are inferred from magnitude for
U32Seed and fixed at 8 bytes for U64Seed.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Union

from solders.pubkey import Pubkey

from .exceptions import (
    NegativeNotSupportedError,
    OutOfRangeError,
    SeedEncodingError,
    TooLargeError,
)
from .pubkeys import is_valid_address, pubkey_bytes

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class Seed:
    """Base of the seed variants. `kind` is the tag encode_seed dispatches on."""
    kind = "seed"


@dataclass(frozen=True)
class BytesSeed(Seed):
    raw: bytes
    kind = "bytes"


@dataclass(frozen=True)
class TextSeed(Seed):
    text: str
    kind = "text"


@dataclass(frozen=True)
class AddressSeed(Seed):
    address: Union[Pubkey, str, bytes]
    kind = "address"


@dataclass(frozen=True)
class U32Seed(Seed):
    value: int
    kind = "u32"


@dataclass(frozen=True)
class U64Seed(Seed):
    value: int
    kind = "u64"


SeedLike = Union[Seed, bytes, bytearray, str, Pubkey, int]


def _encode_bytes(seed: BytesSeed) -> bytes:
    return bytes(seed.raw)


def _encode_text(seed: TextSeed) -> bytes:
    # Stringified addresses are hashed as their 32-byte form, not as text
    if is_valid_address(seed.text):
        return pubkey_bytes(seed.text)
    return seed.text.encode("utf-8")


def _encode_address(seed: AddressSeed) -> bytes:
    return pubkey_bytes(seed.address)


def _encode_u32(seed: U32Seed) -> bytes:
    value = seed.value
    if value < 0 or value > U32_MAX:
        raise OutOfRangeError(f"Number out of range for u32: {value}")
    if value <= U8_MAX:
        width = 1
    elif value <= U16_MAX:
        width = 2
    else:
        width = 4
    return value.to_bytes(width, "little")


def _encode_u64(seed: U64Seed) -> bytes:
    value = seed.value
    if value < 0:
        raise NegativeNotSupportedError(f"Negative integer not supported: {value}")
    if value > U64_MAX:
        raise TooLargeError(f"Integer too large for u64: {value}")
    return value.to_bytes(8, "little")


_ENCODERS: Dict[str, Callable[[Seed], bytes]] = {
    BytesSeed.kind: _encode_bytes,
    TextSeed.kind: _encode_text,
    AddressSeed.kind: _encode_address,
    U32Seed.kind: _encode_u32,
    U64Seed.kind: _encode_u64,
}


def encode_seed(seed: Seed) -> bytes:
    """
    Encodes a single seed into its canonical byte form.

    Raises:
        OutOfRangeError, NegativeNotSupportedError, TooLargeError: integer
            seeds outside their width.
        InvalidAddressError: AddressSeed values that fail address validation.
    """
    encoder = _ENCODERS.get(seed.kind)
    if encoder is None:
        raise SeedEncodingError(f"Unknown seed kind: {seed.kind!r}")
    return encoder(seed)


def as_seed(value: SeedLike) -> Seed:
    """
    Wraps a plain Python value in its seed variant.

    bytes -> BytesSeed, str -> TextSeed, Pubkey -> AddressSeed,
    int -> U32Seed. Use U64Seed explicitly for 8-byte integers.
    """
    if isinstance(value, Seed):
        return value
    if isinstance(value, (bytes, bytearray)):
        return BytesSeed(bytes(value))
    if isinstance(value, str):
        return TextSeed(value)
    if isinstance(value, Pubkey):
        return AddressSeed(value)
    # bool is an int subclass but never a meaningful seed
    if isinstance(value, int) and not isinstance(value, bool):
        return U32Seed(value)
    raise SeedEncodingError(f"Unsupported seed type: {type(value).__name__}")


def encode_seeds(seeds: Iterable[SeedLike]) -> List[bytes]:
    return [encode_seed(as_seed(seed)) for seed in seeds]
