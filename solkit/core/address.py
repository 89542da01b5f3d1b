# solkit/core/address.py

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from solders.pubkey import Pubkey

from .constants import MAX_SEED_LENGTH, MAX_SEEDS
from .exceptions import SeedTooLongError, TooManySeedsError
from .pubkeys import SolanaProgramAddresses, is_valid_address, pubkey_bytes, to_pubkey
from .seeds import SeedLike, encode_seeds
from ..utils.logger import get_logger

logger = get_logger(__name__)

AddressLike = Union[Pubkey, str]


@dataclass(frozen=True)
class PdaAddress:
    address: Pubkey
    bump: int


class AddressService:
    """
    Program derived address (PDA) and associated token account (ATA)
    derivation, plus address validation and byte conversion.
    """

    def __init__(self, token_program_id: Optional[AddressLike] = None):
        self.token_program_id: Pubkey = (
            to_pubkey(token_program_id)
            if token_program_id is not None
            else SolanaProgramAddresses.TOKEN_PROGRAM_ID
        )

    def derive_pda(self, program_id: AddressLike, seeds: Sequence[SeedLike]) -> PdaAddress:
        """
        Derive a PDA for program_id from a mixed list of seeds.

        Args:
            program_id: Owning program (Pubkey or base58 string).
            seeds: Up to 15 seeds (the bump is appended); plain values are wrapped with as_seed().

        Returns:
            PdaAddress with the off-curve address and its bump seed.
        """
        program = to_pubkey(program_id)
        encoded = self._checked_seeds(encode_seeds(seeds))
        pda, bump = Pubkey.find_program_address(encoded, program)
        logger.debug(f"Derived PDA {pda} (bump {bump}) for program {program}")
        return PdaAddress(address=pda, bump=bump)

    def derive_ata(
        self,
        owner: AddressLike,
        mint: AddressLike,
        token_program: Optional[AddressLike] = None,
    ) -> Pubkey:
        """ATA = PDA of the ATA program over [owner, token_program, mint]."""
        token_program_id = (
            to_pubkey(token_program) if token_program is not None else self.token_program_id
        )
        seeds = [pubkey_bytes(owner), bytes(token_program_id), pubkey_bytes(mint)]
        ata, _ = Pubkey.find_program_address(
            seeds, SolanaProgramAddresses.ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID
        )
        return ata

    @staticmethod
    def is_valid_address(value: str) -> bool:
        return is_valid_address(value)

    @staticmethod
    def to_address(value: AddressLike) -> Pubkey:
        """Raises InvalidAddressError for malformed input."""
        return to_pubkey(value)

    @staticmethod
    def address_to_bytes(addr: AddressLike) -> bytes:
        return pubkey_bytes(addr)

    @staticmethod
    def bytes_to_address(raw: bytes) -> Pubkey:
        return to_pubkey(bytes(raw))

    @staticmethod
    def _checked_seeds(encoded: List[bytes]) -> List[bytes]:
        # the bump seed takes the last slot
        max_caller_seeds = MAX_SEEDS - 1
        if len(encoded) > max_caller_seeds:
            raise TooManySeedsError(
                f"At most {max_caller_seeds} seeds allowed, got {len(encoded)}"
            )
        for index, seed in enumerate(encoded):
            if len(seed) > MAX_SEED_LENGTH:
                raise SeedTooLongError(
                    f"Seed {index} is {len(seed)} bytes (max {MAX_SEED_LENGTH})"
                )
        return encoded
