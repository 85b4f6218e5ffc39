from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .error import InvalidAlgNotation
from .square import Square


# Move-kind codes (bits 12-15): promotion, capture, special 1, special 0
QUIET = 0
DOUBLE_PAWN_PUSH = 1
KING_CASTLE = 2
QUEEN_CASTLE = 3
CAPTURE = 4
EP_CAPTURE = 5
KNIGHT_PROMOTION = 8
BISHOP_PROMOTION = 9
ROOK_PROMOTION = 10
QUEEN_PROMOTION = 11
KNIGHT_PROMO_CAPTURE = 12
BISHOP_PROMO_CAPTURE = 13
ROOK_PROMO_CAPTURE = 14
QUEEN_PROMO_CAPTURE = 15

PROMOTION_FLAG = 0b1000
CAPTURE_FLAG = 0b0100

MOVE_KINDS: Dict[int, str] = {
    QUIET: "quiet",
    DOUBLE_PAWN_PUSH: "double-pawn-push",
    KING_CASTLE: "king-castle",
    QUEEN_CASTLE: "queen-castle",
    CAPTURE: "capture",
    EP_CAPTURE: "ep-capture",
    KNIGHT_PROMOTION: "knight-promotion",
    BISHOP_PROMOTION: "bishop-promotion",
    ROOK_PROMOTION: "rook-promotion",
    QUEEN_PROMOTION: "queen-promotion",
    KNIGHT_PROMO_CAPTURE: "knight-promo-capture",
    BISHOP_PROMO_CAPTURE: "bishop-promo-capture",
    ROOK_PROMO_CAPTURE: "rook-promo-capture",
    QUEEN_PROMO_CAPTURE: "queen-promo-capture",
}

# Promotion piece selected by the two low code bits
PROMOTION_LETTERS = "nbrq"

FROM_MASK = 0b0000_000000_111111
TO_MASK = 0b0000_111111_000000
CODE_MASK = 0b1111_000000_000000


@dataclass(frozen=True)
class Move:
    """Move packed into 16 bits.

    Attributes:
        raw (int): Bits 0-5 origin index, bits 6-11 destination index,
            bits 12-15 move-kind code (see ``MOVE_KINDS``).
    """

    raw: int

    def __post_init__(self) -> None:
        if self.raw < 0 or self.raw > 0xFFFF:
            raise ValueError(f"move encoding must fit in 16 bits: {self.raw}")

    @classmethod
    def new(cls, from_sq: Square, to_sq: Square, code: int = QUIET) -> "Move":
        """Pack origin, destination and move-kind code.

        Args:
            from_sq (Square): Origin square.
            to_sq (Square): Destination square.
            code (int): Move-kind code in 0..15. Consistency with the position
                is not checked.

        Returns:
            Move: Packed move.

        Raises:
            ValueError: If ``code`` does not fit in 4 bits.
        """
        if code < 0 or code > 15:
            raise ValueError(f"move-kind code must be 0..15: {code}")
        return cls((code << 12) | (int(to_sq) << 6) | int(from_sq))

    @classmethod
    def from_raw(cls, raw: int) -> "Move":
        return cls(raw)

    def from_square(self) -> Square:
        return Square.from_index(self.raw & FROM_MASK)

    def to_square(self) -> Square:
        return Square.from_index((self.raw & TO_MASK) >> 6)

    def from_square_unchecked(self) -> Square:
        return Square.from_index_unchecked(self.raw & FROM_MASK)

    def to_square_unchecked(self) -> Square:
        return Square.from_index_unchecked((self.raw & TO_MASK) >> 6)

    def promotion(self) -> int:
        return (self.raw & CODE_MASK) >> 12

    def is_promotion(self) -> bool:
        return self.promotion() & PROMOTION_FLAG != 0

    def is_capture(self) -> bool:
        return self.promotion() & CAPTURE_FLAG != 0

    def kind(self) -> str:
        return MOVE_KINDS.get(self.promotion(), "reserved")

    @classmethod
    def from_algebraic(cls, text: str) -> "Move":
        """Parse a move such as ``"e2e4"`` or ``"e7e8q"``.

        Without a position there is no way to tell captures, castling or en
        passant apart from quiet moves, so only codes ``QUIET`` and the four
        plain promotions are produced.

        Args:
            text (str): ``<from><to>[promo]`` with promo in ``n``, ``b``,
                ``r``, ``q``.

        Returns:
            Move: Parsed move.

        Raises:
            InvalidAlgNotation: If the length is not 4 or 5, a square is
                invalid, or the promotion letter is unknown.
        """
        if len(text) < 4 or len(text) > 5:
            raise InvalidAlgNotation(f"Invalid algebraic move notation: {text}")
        from_sq = Square.from_algebraic(text[0:2])
        to_sq = Square.from_algebraic(text[2:4])
        code = QUIET
        if len(text) == 5:
            promo = text[4]
            if promo not in PROMOTION_LETTERS:
                raise InvalidAlgNotation(f"Invalid promo piece ({text}): {promo}")
            code = PROMOTION_FLAG | PROMOTION_LETTERS.index(promo)
        return cls.new(from_sq, to_sq, code)

    def to_algebraic(self) -> str:
        """Serialize into long algebraic form.

        Returns:
            str: Move encoded like ``"e2e4"`` or ``"e7e8q"``.

        Raises:
            InvalidSquare: If a square field does not decode.
        """
        text = self.from_square().to_algebraic() + self.to_square().to_algebraic()
        code = self.promotion()
        if code & PROMOTION_FLAG:
            text += PROMOTION_LETTERS[code & 0b11]
        return text

    def __int__(self) -> int:
        return self.raw

    def __str__(self) -> str:
        return self.to_algebraic()
