from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from cardseed.core.deck import Deck
from cardseed.tools.seed_cli import main


STANDARD_HEX = "cc935c81c3ffc51e10c4d81172ac1b371f14eebe425deccc" "ade535e3bd4ce3e0"
STANDARD_SLICK_HEX = "eab6c408159fe2efdf8042b9d3a63f53c6fe1bf6c7ed2ccf" "ed22a4bfde681185"


@pytest.fixture
def deck_file(tmp_path: Path) -> Path:
    path = tmp_path / "deck.txt"
    text = Deck.new_standard().to_text().replace(" KS ", " KS\n").replace(" KC ", " KC\n")
    path.write_text(text + "\n")
    return path


def test_derive_from_file(deck_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["derive", str(deck_file)]) == 0
    assert capsys.readouterr().out.strip() == STANDARD_HEX


def test_derive_with_password_prompt(
    deck_file: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr("getpass.getpass", lambda prompt="": "slick")
    assert main(["derive", str(deck_file), "--password-prompt", "--format", "json"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert body["secret_hex"] == STANDARD_SLICK_HEX
    assert body["used_password"] is True


def test_derive_from_stdin(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(Deck.new_standard().to_text()))
    assert main(["derive"]) == 0
    assert capsys.readouterr().out.strip() == STANDARD_HEX


def test_derive_rejects_incomplete(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "short.txt"
    path.write_text("AS 2C AS")
    assert main(["derive", str(path)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "INCOMPLETE_DECK" in captured.err


def test_derive_allow_incomplete(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "short.txt"
    path.write_text("AS 2C AS")
    assert main(["derive", str(path), "--allow-incomplete"]) == 0
    out = capsys.readouterr().out.strip()
    assert bytes.fromhex(out) == Deck.from_text("AS 2C AS").derive_secret()


def test_inspect(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "deck.txt"
    path.write_text("9D\t4H\n3S")
    assert main(["inspect", str(path)]) == 0
    body = json.loads(capsys.readouterr().out)
    assert body["canonical_text"] == "9D 4H 3S"
    assert body["has_duplicates"] is False
    assert body["is_complete"] is False


def test_inspect_bad_token(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "deck.txt"
    path.write_text("9D 4Z")
    assert main(["inspect", str(path)]) == 2
    assert "BAD_CHARACTER" in capsys.readouterr().err


def test_shuffle(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["shuffle"]) == 0
    deck = Deck.from_text(capsys.readouterr().out)
    assert deck.is_complete()


def test_derive_raw_bytes(deck_file: Path, capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    assert main(["derive", str(deck_file), "--format", "bytes"]) == 0
    assert capsysbinary.readouterr().out == bytes.fromhex(STANDARD_HEX)


def test_derive_rejects_unknown_format(deck_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["derive", str(deck_file), "--format", "base64"])
    assert exc_info.value.code == 2


def test_missing_deck_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["inspect", str(tmp_path / "nope.txt")]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: UNREADABLE_DECK")


def test_deck_file_not_utf8(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "deck.txt"
    path.write_bytes(b"AS \xff\xfe 2C")
    assert main(["derive", str(path), "--allow-incomplete"]) == 2
    assert "UNREADABLE_DECK" in capsys.readouterr().err
