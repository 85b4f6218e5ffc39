from __future__ import annotations

import pytest

from chesscore.engine.error import InvalidAlgNotation
from chesscore.engine.move import (
    CAPTURE,
    KNIGHT_PROMO_CAPTURE,
    MOVE_KINDS,
    QUEEN_PROMOTION,
    QUIET,
    Move,
)
from chesscore.engine.square import Square


@pytest.mark.parametrize("code", range(16))
def test_new_packs_fields(code: int) -> None:
    for from_sq in (Square.A1, Square.E2, Square.H8):
        for to_sq in (Square.A1, Square.E4, Square.H8):
            mv = Move.new(from_sq, to_sq, code)
            assert mv.from_square() is from_sq
            assert mv.to_square() is to_sq
            assert mv.from_square_unchecked() is from_sq
            assert mv.to_square_unchecked() is to_sq
            assert mv.promotion() == code


def test_bit_layout() -> None:
    mv = Move.new(Square.E2, Square.E4, QUEEN_PROMOTION)
    assert mv.raw & 0x3F == Square.E2.index()
    assert (mv.raw >> 6) & 0x3F == Square.E4.index()
    assert mv.raw >> 12 == QUEEN_PROMOTION
    assert int(mv) == mv.raw


def test_new_rejects_wide_code() -> None:
    with pytest.raises(ValueError):
        Move.new(Square.E2, Square.E4, 16)


def test_from_raw_requires_16_bits() -> None:
    assert Move.from_raw(0xFFFF).promotion() == 15
    with pytest.raises(ValueError):
        Move.from_raw(0x10000)


def test_flags_and_kind_names() -> None:
    assert Move.new(Square.D4, Square.E5, CAPTURE).is_capture()
    assert not Move.new(Square.D4, Square.E5, CAPTURE).is_promotion()
    promo_cap = Move.new(Square.B7, Square.A8, KNIGHT_PROMO_CAPTURE)
    assert promo_cap.is_capture() and promo_cap.is_promotion()
    assert promo_cap.kind() == "knight-promo-capture"
    assert Move.new(Square.E2, Square.E3, 6).kind() == "reserved"
    assert len(MOVE_KINDS) == 14


def test_from_algebraic_quiet_round_trip() -> None:
    mv = Move.from_algebraic("e2e4")
    assert mv.from_square() is Square.E2
    assert mv.to_square() is Square.E4
    assert mv.promotion() == QUIET
    assert mv.to_algebraic() == "e2e4"
    assert str(mv) == "e2e4"


@pytest.mark.parametrize("letter,code", [("n", 8), ("b", 9), ("r", 10), ("q", 11)])
def test_from_algebraic_promotions(letter: str, code: int) -> None:
    mv = Move.from_algebraic(f"e7e8{letter}")
    assert mv.promotion() == code
    assert mv.promotion() & 0b1000 != 0
    assert mv.to_algebraic() == f"e7e8{letter}"


def test_promotion_capture_serializes_like_promotion() -> None:
    mv = Move.new(Square.B7, Square.A8, KNIGHT_PROMO_CAPTURE)
    assert mv.to_algebraic() == "b7a8n"


@pytest.mark.parametrize("text", ["", "e2", "e2e", "e2e4x", "e2e4qq", "z2e4", "e2e9"])
def test_from_algebraic_rejects_bad_input(text: str) -> None:
    with pytest.raises(InvalidAlgNotation):
        Move.from_algebraic(text)
