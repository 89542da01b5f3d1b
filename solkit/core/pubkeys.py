# solkit/core/pubkeys.py

from typing import Union

from base58 import b58decode
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID_SOLDERS  # Renamed to avoid conflict
from spl.token.constants import TOKEN_PROGRAM_ID as TOKEN_PROGRAM_ID_SPL  # Renamed to avoid conflict

from .exceptions import InvalidAddressError


class SolanaProgramAddresses:
    SYSTEM_PROGRAM_ID: Pubkey = SYSTEM_PROGRAM_ID_SOLDERS
    TOKEN_PROGRAM_ID: Pubkey = TOKEN_PROGRAM_ID_SPL
    ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID: Pubkey = Pubkey.from_string(
        "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
    )
    COMPUTE_BUDGET_PROGRAM_ID: Pubkey = Pubkey.from_string(
        "ComputeBudget111111111111111111111111111111"
    )


# --- Address codec helpers ---
ADDRESS_LENGTH = 32
_MIN_ADDRESS_STR_LEN = 32
_MAX_ADDRESS_STR_LEN = 44


def is_valid_address(value) -> bool:
    """True if value is a base58 string that decodes to exactly 32 bytes."""
    if not isinstance(value, str):
        return False
    if not _MIN_ADDRESS_STR_LEN <= len(value) <= _MAX_ADDRESS_STR_LEN:
        return False
    try:
        decoded = b58decode(value)
    except ValueError:
        return False
    return len(decoded) == ADDRESS_LENGTH


def to_pubkey(value: Union[Pubkey, str, bytes]) -> Pubkey:
    """Coerces a Pubkey, base58 string or 32 raw bytes into a Pubkey."""
    if isinstance(value, Pubkey):
        return value
    if isinstance(value, str):
        if not is_valid_address(value):
            raise InvalidAddressError(f"Invalid address string: {value!r}")
        return Pubkey.from_string(value)
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ADDRESS_LENGTH:
            raise InvalidAddressError(
                f"Address must be {ADDRESS_LENGTH} bytes, got {len(value)}"
            )
        return Pubkey(bytes(value))
    raise InvalidAddressError(f"Unsupported address type: {type(value).__name__}")


def pubkey_bytes(value: Union[Pubkey, str, bytes]) -> bytes:
    """Canonical 32-byte form of an address."""
    return bytes(to_pubkey(value))
