# solkit/cli.py

import argparse
import json
import sys
from typing import Any, List, Optional

from .config import load_config
from .core.address import AddressService
from .core.exceptions import LogSourceError, SolkitException
from .core.seeds import AddressSeed, BytesSeed, Seed, TextSeed, U32Seed, U64Seed
from .monitoring.logs_event_processor import LogsEventProcessor, log_messages_from
from .utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_seed_arg(text: str) -> Seed:
    """
    Parses a "kind:value" seed argument.

    Kinds: str, hex, addr, u32, u64. Anything else (including text without
    a known kind) is taken as a text seed.
    """
    kind, sep, value = text.partition(":")
    if not sep:
        return TextSeed(text)
    kind = kind.lower()
    try:
        if kind == "str":
            return TextSeed(value)
        if kind == "hex":
            return BytesSeed(bytes.fromhex(value))
        if kind == "addr":
            return AddressSeed(value)
        if kind == "u32":
            return U32Seed(int(value, 0))
        if kind == "u64":
            return U64Seed(int(value, 0))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid {kind} seed '{value}': {e}")
    return TextSeed(text)


def read_logs(path: str) -> List[str]:
    """
    Reads log lines from a file ("-" for stdin). JSON input may be a list of
    lines or an RPC response carrying them; anything else (including text that
    only looks like JSON) is one line per line.
    """
    try:
        if path == "-":
            content = sys.stdin.read()
        else:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
    except OSError as e:
        raise LogSourceError(f"Cannot read logs from '{path}': {e}") from e

    stripped = content.strip()
    if stripped.startswith(("[", "{")):
        try:
            payload: Any = json.loads(stripped)
        except json.JSONDecodeError:
            # a plain log file whose first line happens to start with a bracket
            logger.debug(f"'{path}' is not JSON, reading it line by line")
        else:
            if isinstance(payload, dict) and "result" in payload:
                payload = payload["result"]
            return log_messages_from(payload)
    return [line for line in content.splitlines() if line.strip()]


def cmd_discriminator(args, processor: LogsEventProcessor, config) -> None:
    for name in args.names:
        disc = processor.get_event_discriminator(name)
        print(f"{name}\t{disc.hex()}\t{processor.get_event_discriminator_base64(name)}")


def cmd_pda(args, processor: LogsEventProcessor, config) -> None:
    service = AddressService(config["TOKEN_PROGRAM_ID"])
    pda = service.derive_pda(args.program_id, args.seeds)
    print(f"{pda.address}\t{pda.bump}")


def cmd_ata(args, processor: LogsEventProcessor, config) -> None:
    service = AddressService(config["TOKEN_PROGRAM_ID"])
    print(service.derive_ata(args.owner, args.mint, args.token_program))


def cmd_events(args, processor: LogsEventProcessor, config) -> None:
    logs = read_logs(args.logfile)
    configs = [processor.create_event_config(name, bytes) for name in args.event]
    events = processor.extract_events(logs, configs)
    for event in events:
        print(f"{event.name}\t{event.data.hex()}")
    logger.info(f"Extracted {len(events)} event(s) from {len(logs)} log line(s).")


def cmd_group(args, processor: LogsEventProcessor, config) -> None:
    for entry in processor.group_logs_by_program(read_logs(args.logfile)):
        print(f"== {entry.program_id} ({len(entry.logs)} lines)")
        for line in entry.logs:
            print(f"  {line}")


def cmd_filter(args, processor: LogsEventProcessor, config) -> None:
    for line in processor.filter_logs_by_program(read_logs(args.logfile), args.program_id):
        print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solkit", description="Solana PDA seeds and transaction log events"
    )
    parser.add_argument("--log-level", help="Override SOLKIT_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("discriminator", help="Print Anchor event discriminators")
    p.add_argument("names", nargs="+")
    p.set_defaults(func=cmd_discriminator)

    p = sub.add_parser("pda", help="Derive a program derived address")
    p.add_argument("program_id")
    p.add_argument("seeds", nargs="*", type=parse_seed_arg,
                   help="Seeds as kind:value (str, hex, addr, u32, u64)")
    p.set_defaults(func=cmd_pda)

    p = sub.add_parser("ata", help="Derive an associated token account")
    p.add_argument("owner")
    p.add_argument("mint")
    p.add_argument("--token-program", help="Token program id (default from config)")
    p.set_defaults(func=cmd_ata)

    p = sub.add_parser("events", help="Extract events from transaction logs")
    p.add_argument("logfile", help="Log file: JSON list/RPC response, else one line per log ('-' for stdin)")
    p.add_argument("--event", action="append", required=True, help="Event name (repeatable)")
    p.set_defaults(func=cmd_events)

    p = sub.add_parser("group", help="Group transaction logs by program invocation")
    p.add_argument("logfile")
    p.set_defaults(func=cmd_group)

    p = sub.add_parser("filter", help="Keep only logs inside a program's invocations")
    p.add_argument("logfile")
    p.add_argument("program_id")
    p.set_defaults(func=cmd_filter)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    if args.log_level:
        config["LOG_LEVEL"] = args.log_level.upper()
    setup_logging(config["LOG_LEVEL"], fmt=config["LOG_FORMAT"])

    try:
        args.func(args, LogsEventProcessor(), config)
    except SolkitException as e:
        logger.critical(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
