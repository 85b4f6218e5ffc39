from __future__ import annotations

from chesscore.engine.board import Board


def test_startpos_rendering() -> None:
    expected = "\n".join(
        [
            "r n b q k b n r | Next move: White",
            "p p p p p p p p | Castling rights: KQkq",
            "- - - - - - - - | En passant: -",
            "- - - - - - - - | Halfmove clock: 0",
            "- - - - - - - - | Fullmove counter: 1",
            "- - - - - - - -",
            "P P P P P P P P",
            "R N B Q K B N R",
        ]
    )
    assert str(Board.startpos()) == expected


def test_rendering_state_annotations() -> None:
    b = Board.from_fen("4k3/8/8/8/4P3/8/8/4K3 b q e3 7 42")
    lines = str(b).split("\n")
    assert len(lines) == 8
    assert lines[0] == "- - - - k - - - | Next move: Black"
    assert lines[1] == "- - - - - - - - | Castling rights: q"
    assert lines[2] == "- - - - - - - - | En passant: e3"
    assert lines[3] == "- - - - - - - - | Halfmove clock: 7"
    assert lines[4] == "- - - - P - - - | Fullmove counter: 42"
    assert lines[7] == "- - - - K - - -"


def test_rendering_without_castling_rights_keeps_label() -> None:
    b = Board.from_fen("8/8/8/8/8/8/8/8 w - - 0 1")
    assert str(b).split("\n")[1] == "- - - - - - - - | Castling rights: "
