# solkit/core/constants.py

import math
from typing import Union

# Solana-wide constants
LAMPORTS_PER_SOL = 1_000_000_000

# Runtime limits for program derived addresses
MAX_SEED_LENGTH = 32
MAX_SEEDS = 16

# Anchor event discriminator: sha256("event:<Name>")[:8]
EVENT_DISCRIMINATOR_PREFIX = "event:"
DISCRIMINATOR_LENGTH = 8


def lamports_to_sol(lamports: int) -> float:
    """Converts lamports to SOL (1 SOL = 1e9 lamports)."""
    return lamports / LAMPORTS_PER_SOL


def sol_to_lamports(sol: Union[int, float]) -> int:
    """Converts SOL to lamports, rounding down to a whole lamport."""
    return int(math.floor(sol * LAMPORTS_PER_SOL))
