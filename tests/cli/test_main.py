from __future__ import annotations

from typing import List, Optional

import pytest

from chesscore.cli import main as cli
from chesscore.engine.board import STARTPOS_FEN
from chesscore.protocol.repl.loop import ReplSession


def _capture_sessions(monkeypatch: pytest.MonkeyPatch) -> List[ReplSession]:
    seen: List[ReplSession] = []

    def fake_run(session: Optional[ReplSession] = None) -> None:
        assert session is not None
        seen.append(session)

    monkeypatch.setattr(cli, "run_repl", fake_run)
    return seen


def test_parser_defaults() -> None:
    args = cli.build_parser().parse_args([])
    assert args.fen is None
    assert args.log_level == "WARNING"


def test_parser_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--log-level", "LOUD"])


def test_default_starts_shell_without_board(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _capture_sessions(monkeypatch)
    cli.main([])
    assert len(seen) == 1
    assert seen[0].board is None


def test_fen_option_preloads_board(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _capture_sessions(monkeypatch)
    cli.main(["--log-level", "DEBUG", "--fen", "8/8/8/8/8/8/8/K6k b - - 0 1"])
    assert seen[0].board is not None
    assert seen[0].board.to_fen() == "8/8/8/8/8/8/8/K6k b - - 0 1"

    cli.main(["--fen", "startpos"])
    assert seen[1].board is not None
    assert seen[1].board.to_fen() == STARTPOS_FEN


def test_bad_fen_option_exits_with_diagnostic(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    seen = _capture_sessions(monkeypatch)
    with pytest.raises(SystemExit) as exc:
        cli.main(["--fen", "8/8/8 w - - 0 1"])
    assert exc.value.code == 2
    assert "Invalid FEN: Invalid number of ranks (3)" in capsys.readouterr().err
    assert seen == []


def test_empty_fen_option_is_rejected(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    seen = _capture_sessions(monkeypatch)
    with pytest.raises(SystemExit) as exc:
        cli.main(["--fen", ""])
    assert exc.value.code == 2
    assert "Invalid FEN: Invalid number of fields (0)" in capsys.readouterr().err
    assert seen == []
