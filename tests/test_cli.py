"""Tests for the solkit command line interface."""

from __future__ import annotations

import argparse
import runpy
import json

import pytest
from solders.pubkey import Pubkey
from spl.token.instructions import get_associated_token_address

from solkit.cli import main, parse_seed_arg, read_logs
from solkit.core.exceptions import LogSourceError
from solkit.core.seeds import AddressSeed, BytesSeed, TextSeed, U32Seed, U64Seed
from tests.conftest import PROGRAM_A, anchor_discriminator, data_log

PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


class TestParseSeedArg:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("str:vault", TextSeed("vault")),
            ("hex:00ff", BytesSeed(b"\x00\xff")),
            (f"addr:{PROGRAM_ID}", AddressSeed(PROGRAM_ID)),
            ("u32:300", U32Seed(300)),
            ("u64:0x10", U64Seed(16)),
            ("global", TextSeed("global")),
            ("note:with colon", TextSeed("note:with colon")),
        ],
    )
    def test_kinds(self, text: str, expected) -> None:
        assert parse_seed_arg(text) == expected

    @pytest.mark.parametrize("text", ["u32:abc", "hex:zz"])
    def test_invalid_values(self, text: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_seed_arg(text)


class TestReadLogs:
    def test_plain_lines(self, tmp_path) -> None:
        path = tmp_path / "logs.txt"
        path.write_text("Program log: a\n\nProgram log: b\n", encoding="utf-8")
        assert read_logs(str(path)) == ["Program log: a", "Program log: b"]

    def test_json_rpc_response(self, tmp_path) -> None:
        path = tmp_path / "tx.json"
        path.write_text(json.dumps({"result": {"meta": {"logMessages": ["x"]}}}), encoding="utf-8")
        assert read_logs(str(path)) == ["x"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(LogSourceError):
            read_logs(str(tmp_path / "missing.txt"))

    def test_bracketed_plain_text_read_as_lines(self, tmp_path) -> None:
        path = tmp_path / "logs.txt"
        path.write_text("[2024-01-01] Program log: a\nProgram log: b\n", encoding="utf-8")
        assert read_logs(str(path)) == ["[2024-01-01] Program log: a", "Program log: b"]

    def test_truncated_json_read_as_lines(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("[not json", encoding="utf-8")
        assert read_logs(str(path)) == ["[not json"]


class TestMain:
    def test_discriminator(self, capsys) -> None:
        assert main(["discriminator", "TestEvent"]) == 0
        out = capsys.readouterr().out
        assert anchor_discriminator("TestEvent").hex() in out

    def test_pda(self, capsys) -> None:
        assert main(["pda", PROGRAM_ID, "str:global", "u32:1"]) == 0
        address, bump = capsys.readouterr().out.split()
        expected, expected_bump = Pubkey.find_program_address(
            [b"global", b"\x01"], Pubkey.from_string(PROGRAM_ID)
        )
        assert address == str(expected)
        assert int(bump) == expected_bump

    def test_pda_invalid_address_seed_fails(self) -> None:
        assert main(["pda", PROGRAM_ID, "addr:nope"]) == 1

    def test_ata(self, capsys) -> None:
        owner = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
        mint = "So11111111111111111111111111111111111111112"
        assert main(["ata", owner, mint]) == 0
        printed = capsys.readouterr().out.strip()
        expected = get_associated_token_address(Pubkey.from_string(owner), Pubkey.from_string(mint))
        assert printed == str(expected)

    def test_events(self, tmp_path, capsys) -> None:
        path = tmp_path / "logs.json"
        logs = ["Program log: x", data_log(anchor_discriminator("TestEvent") + b"\x2a\x2b\x2c")]
        path.write_text(json.dumps(logs), encoding="utf-8")

        assert main(["events", str(path), "--event", "TestEvent"]) == 0
        assert capsys.readouterr().out.strip() == "TestEvent\t2a2b2c"

    def test_group_and_filter(self, tmp_path, capsys, nested_logs) -> None:
        path = tmp_path / "logs.txt"
        path.write_text("\n".join(nested_logs), encoding="utf-8")

        assert main(["group", str(path)]) == 0
        assert capsys.readouterr().out.count("== ") == 2

        assert main(["filter", str(path), PROGRAM_A]) == 0
        assert capsys.readouterr().out.splitlines() == nested_logs

    def test_missing_log_file(self, tmp_path) -> None:
        assert main(["group", str(tmp_path / "nope.txt")]) == 1

    def test_module_entry_point(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.argv", ["solkit", "discriminator", "TestEvent"])
        with pytest.raises(SystemExit) as exc:
            runpy.run_module("solkit", run_name="__main__")
        assert exc.value.code == 0
        assert anchor_discriminator("TestEvent").hex() in capsys.readouterr().out
