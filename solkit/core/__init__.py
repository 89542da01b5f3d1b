# solkit/core/__init__.py

# Import directly available classes/modules via relative imports
from .address import AddressService, PdaAddress
from .pubkeys import SolanaProgramAddresses, is_valid_address, to_pubkey
from .seeds import (
    AddressSeed,
    BytesSeed,
    Seed,
    TextSeed,
    U32Seed,
    U64Seed,
    as_seed,
    encode_seed,
    encode_seeds,
)

__all__ = [
    "AddressService",
    "PdaAddress",
    "SolanaProgramAddresses",
    "is_valid_address",
    "to_pubkey",
    "AddressSeed",
    "BytesSeed",
    "Seed",
    "TextSeed",
    "U32Seed",
    "U64Seed",
    "as_seed",
    "encode_seed",
    "encode_seeds",
]
