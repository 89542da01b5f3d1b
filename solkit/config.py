# solkit/config.py

import os
from typing import Any, Dict

from dotenv import load_dotenv

from .core.exceptions import InvalidAddressError
from .core.pubkeys import SolanaProgramAddresses, to_pubkey
from .utils.logger import DEFAULT_LOG_FORMAT, get_logger

logger = get_logger(__name__)

# Load .env from the working directory (or any parent) without overriding the environment
load_dotenv()

# --- Logging ---
LOG_LEVEL = os.getenv("SOLKIT_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("SOLKIT_LOG_FORMAT", DEFAULT_LOG_FORMAT)

# --- Address derivation ---
# Token program used for ATA derivation when none is given explicitly
TOKEN_PROGRAM_ID = os.getenv("SOLKIT_TOKEN_PROGRAM_ID", str(SolanaProgramAddresses.TOKEN_PROGRAM_ID))

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> Dict[str, Any]:
    """
    Returns the effective settings, reading the environment at call time.
    Invalid values fall back to defaults with a warning.
    """
    config: Dict[str, Any] = {
        "LOG_LEVEL": LOG_LEVEL,
        "LOG_FORMAT": LOG_FORMAT,
        "TOKEN_PROGRAM_ID": TOKEN_PROGRAM_ID,
    }
    for var in config:
        raw = os.getenv(f"SOLKIT_{var}")
        if raw:
            config[var] = raw

    level = str(config["LOG_LEVEL"]).upper()
    if level not in _VALID_LOG_LEVELS:
        logger.warning(f"Config warning: invalid SOLKIT_LOG_LEVEL '{config['LOG_LEVEL']}', using INFO")
        level = "INFO"
    config["LOG_LEVEL"] = level

    try:
        config["TOKEN_PROGRAM_ID"] = to_pubkey(config["TOKEN_PROGRAM_ID"])
    except InvalidAddressError:
        default = SolanaProgramAddresses.TOKEN_PROGRAM_ID
        logger.warning(f"Config warning: invalid SOLKIT_TOKEN_PROGRAM_ID, using default {default}")
        config["TOKEN_PROGRAM_ID"] = default

    return config
