# solkit/monitoring/logs_event_processor.py

import base64
import binascii
import re
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from solders.pubkey import Pubkey

from .base import EventConfig, ExtractedEvent, ParsedLogEntry, T
from .discriminator import DiscriminatorCache
from ..core.constants import DISCRIMINATOR_LENGTH
from ..utils.logger import get_logger

logger = get_logger(__name__)

PROGRAM_DATA_PREFIX = "Program data: "

PROGRAM_INVOKE_RE = re.compile(r"^Program (\w+) invoke")
PROGRAM_SUCCESS_RE = re.compile(r"^Program (\w+) success")
PROGRAM_FAILED_RE = re.compile(r"^Program (\w+) failed")


def log_messages_from(payload: Any) -> List[str]:
    """
    Pulls the log lines out of the shapes RPC responses hand back:
    a plain list, a logsNotification result ({"value": {"logs": [...]}}),
    its value ({"logs": [...]}) or a transaction ({"meta": {"logMessages": [...]}}).
    Unknown shapes yield no lines.
    """
    if isinstance(payload, list):
        return [str(line) for line in payload]
    if not isinstance(payload, dict):
        return []
    if "value" in payload:
        return log_messages_from(payload.get("value"))
    if "meta" in payload:
        return log_messages_from(payload.get("meta"))
    for key in ("logs", "logMessages"):
        if key in payload:
            return log_messages_from(payload.get(key) or [])
    return []


class LogsEventProcessor:
    """
    Parses Anchor-style 'Program data:' entries into typed events and
    splits transaction logs into per-program invocation scopes.
    """

    def __init__(self, discriminators: Optional[DiscriminatorCache] = None):
        self.discriminators = discriminators or DiscriminatorCache()

    # --- Discriminators ---

    def get_event_discriminator(self, event_name: str) -> bytes:
        return self.discriminators.get(event_name)

    def get_event_discriminator_base64(self, event_name: str) -> str:
        return self.discriminators.get_base64(event_name)

    def matches_discriminator(self, data: bytes, event_name: str) -> bool:
        return self.discriminators.matches(data, event_name)

    def create_event_config(self, name: str, decode: Callable[[bytes], T]) -> EventConfig[T]:
        """Builds an EventConfig whose discriminator is derived from name."""
        return EventConfig(name=name, discriminator=self.get_event_discriminator(name), decode=decode)

    # --- Data logs ---

    @staticmethod
    def parse_log_data(log: str) -> Optional[bytes]:
        """
        Decodes the base64 payload of a "Program data: <base64>" line.
        Missing "=" padding is accepted. Returns None for other lines and
        for malformed base64.
        """
        if not log.startswith(PROGRAM_DATA_PREFIX):
            return None
        encoded = log[len(PROGRAM_DATA_PREFIX):].rstrip("=")
        encoded += "=" * (-len(encoded) % 4)
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError):
            return None

    def extract_all_data_logs(self, logs: Iterable[str]) -> List[bytes]:
        data_logs = []
        for log in logs:
            data = self.parse_log_data(log)
            if data is not None:
                data_logs.append(data)
        return data_logs

    # --- Events ---

    @staticmethod
    def try_decode_event(config: EventConfig[T], data: bytes) -> Optional[ExtractedEvent[T]]:
        """
        Runs config.decode on the bytes after the discriminator.
        A failing decoder is logged and reported as None so extraction can go on.
        """
        try:
            decoded = config.decode(data[DISCRIMINATOR_LENGTH:])
        except Exception as e:
            logger.warning(f"Failed to decode event '{config.name}': {e}")
            return None
        return ExtractedEvent(name=config.name, data=decoded, raw_data=data)

    def extract_events(
        self,
        logs: Iterable[str],
        event_configs: Sequence[EventConfig[T]],
    ) -> List[ExtractedEvent[T]]:
        """
        Extracts events from transaction logs in log order, then config order.

        A data line may match several configs; each match yields its own
        event from the same raw bytes.
        """
        events: List[ExtractedEvent[T]] = []
        for log in logs:
            data = self.parse_log_data(log)
            if data is None or len(data) < DISCRIMINATOR_LENGTH:
                continue

            prefix = data[:DISCRIMINATOR_LENGTH]
            for config in event_configs:
                if prefix != bytes(config.discriminator):
                    continue
                event = self.try_decode_event(config, data)
                if event is not None:
                    events.append(event)
        return events

    # --- Program scopes ---

    @staticmethod
    def filter_logs_by_program(logs: Iterable[str], program_id: Union[Pubkey, str]) -> List[str]:
        """
        Returns the lines between a program's invoke and its matching
        success/failed line, nested invocations of any program included.
        Reentrant invocations of the same program are tracked by depth.
        """
        invoke_marker = f"Program {program_id} invoke"
        success_marker = f"Program {program_id} success"
        failed_marker = f"Program {program_id} failed"

        filtered: List[str] = []
        in_program = False
        depth = 0
        for log in logs:
            if invoke_marker in log:
                in_program = True
                depth += 1

            if in_program:
                filtered.append(log)

            if in_program and (success_marker in log or failed_marker in log):
                depth -= 1
                if depth == 0:
                    in_program = False
        return filtered

    @staticmethod
    def group_logs_by_program(logs: Iterable[str]) -> List[ParsedLogEntry]:
        """
        Groups lines by invocation scope. Entries come out in the order the
        scopes close, so inner invocations precede their callers. Lines
        outside any scope are dropped, unclosed scopes are never emitted.
        """
        entries: List[ParsedLogEntry] = []
        program_stack: List[Tuple[str, List[str]]] = []

        for log in logs:
            invoke_match = PROGRAM_INVOKE_RE.match(log)
            if invoke_match:
                program_stack.append((invoke_match.group(1), [log]))
                continue

            if not program_stack:
                continue

            program_stack[-1][1].append(log)
            if PROGRAM_SUCCESS_RE.match(log) or PROGRAM_FAILED_RE.match(log):
                program_id, frame_logs = program_stack.pop()
                entries.append(ParsedLogEntry(program_id=program_id, logs=tuple(frame_logs)))
        return entries
