from __future__ import annotations

import json
from pathlib import Path

import pytest

from mint.encoding.cli.main import _resolve_options, main, parse_args
from mint.encoding.domain.models import SqidsOptions


def test_encode_prints_id(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "1", "2", "3", "-nl"]) == 0

    assert capsys.readouterr().out == "86Rf07\n"


def test_decode_prints_numbers(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", "86Rf07", "-nl"]) == 0

    assert capsys.readouterr().out == "1 2 3\n"


def test_decode_of_foreign_id_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", "***", "-nl"]) == 1

    assert capsys.readouterr().out == ""


def test_validate_reports_result(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", "86Rf07", "-nl"]) == 0
    assert main(["validate", "aho1e", "-nl"]) == 1

    assert capsys.readouterr().out == "valid\ninvalid\n"


def test_no_blocklist_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "4572721", "--no-blocklist", "-nl"]) == 0

    assert capsys.readouterr().out == "aho1e\n"


def test_blocklist_file_replaces_default(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    words = tmp_path / "words.txt"
    words.write_text("# custom words\nArUO\n\n", encoding="utf-8")

    assert main(["encode", "100000", "-bf", str(words), "-nl"]) == 0

    assert capsys.readouterr().out == "QyG4\n"


def test_min_length_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "1", "2", "3", "--min-length", "8", "-nl"]) == 0

    assert capsys.readouterr().out == "86Rf07xd\n"


def test_generate_prints_requested_count(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["generate", "--count", "3", "-nl"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert len(set(lines)) == 3


def test_config_file_with_cli_override(tmp_path: Path) -> None:
    config = tmp_path / "mint.json"
    config.write_text(json.dumps({"sqid": {"min_length": 20, "blocklist": []}}), encoding="utf-8")

    args = parse_args(["encode", "1", "--config", str(config), "--min-length", "4"])

    assert _resolve_options(args) == SqidsOptions(min_length=4, blocklist=())


def test_invalid_alphabet_exits_with_message() -> None:
    with pytest.raises(SystemExit, match="at least 3"):
        main(["encode", "1", "--alphabet", "ab", "-nl"])


def test_negative_number_exits_with_message() -> None:
    with pytest.raises(SystemExit, match="between 0 and"):
        main(["encode", "-5", "-nl"])


def test_blocklist_options_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        parse_args(["encode", "1", "--no-blocklist", "--blocklist-file", str(tmp_path / "w.txt")])


def test_log_file_receives_debug_output(tmp_path: Path) -> None:
    log_path = tmp_path / "mint.log"

    assert main(["encode", "4572721", "-v", "-nl", "--log-file", str(log_path)]) == 0

    assert "blocked id 'aho1e'" in log_path.read_text(encoding="utf-8")
