"""Shared fixtures for solkit tests."""

from __future__ import annotations

import base64
import hashlib

import pytest

from solkit.core.address import AddressService
from solkit.monitoring.logs_event_processor import LogsEventProcessor

PROGRAM_A = "ProgA111111111111111111111111111111111111111"
PROGRAM_B = "ProgB222222222222222222222222222222222222222"


def anchor_discriminator(name: str) -> bytes:
    """Reference discriminator computed independently of the package."""
    return hashlib.sha256(f"event:{name}".encode()).digest()[:8]


def data_log(payload: bytes) -> str:
    return "Program data: " + base64.b64encode(payload).decode()


@pytest.fixture()
def processor() -> LogsEventProcessor:
    return LogsEventProcessor()


@pytest.fixture()
def address_service() -> AddressService:
    return AddressService()


@pytest.fixture()
def nested_logs() -> list[str]:
    """A outer call to PROGRAM_A with a CPI into PROGRAM_B."""
    return [
        f"Program {PROGRAM_A} invoke [1]",
        "Program log: Instruction: Deposit",
        f"Program {PROGRAM_B} invoke [2]",
        "Program log: Instruction: Transfer",
        f"Program {PROGRAM_B} success",
        "Program log: deposit done",
        f"Program {PROGRAM_A} success",
    ]
