from __future__ import annotations

from enum import IntEnum
from typing import Tuple

from .error import InvalidAlgNotation, InvalidSquare


FILES = "abcdefgh"
RANKS = "12345678"


class Square(IntEnum):
    """One of the 64 board cells.

    Notes:
    - Value is ``rank * 8 + file`` with a1=0 .. h8=63, rank-major from white's
      perspective.
    - ``from_index`` is the checked decoder for untrusted input;
      ``from_index_unchecked`` is for indices the caller already range-checked.
    """

    A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
    A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
    A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
    A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
    A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
    A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
    A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
    A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)

    def index(self) -> int:
        return int(self)

    def to_u16(self) -> int:
        return int(self)

    @property
    def file(self) -> int:
        return _COORDS[self][0]

    @property
    def rank(self) -> int:
        return _COORDS[self][1]

    @classmethod
    def from_index(cls, n: int) -> "Square":
        """Decode a square index.

        Args:
            n (int): Candidate index.

        Returns:
            Square: Square with index ``n``.

        Raises:
            InvalidSquare: If ``n`` is outside 0..63.
        """
        if n < 0 or n > 63:
            raise InvalidSquare(n)
        return _SQUARES[n]

    @classmethod
    def from_index_unchecked(cls, n: int) -> "Square":
        """Decode an index the caller has already range-checked.

        Raises:
            IndexError: If ``n`` is outside 0..63. This is a programming error,
                not a user-input failure.
        """
        if n < 0 or n > 63:
            raise IndexError(f"Invalid square: {n}")
        return _SQUARES[n]

    @classmethod
    def from_file_rank(cls, file: int, rank: int) -> "Square":
        """Build a square from 0-based file (a..h) and rank (1..8) coordinates.

        Raises:
            IndexError: If ``file`` or ``rank`` is outside 0..7.
        """
        if not (0 <= file < 8 and 0 <= rank < 8):
            raise IndexError(f"Invalid file({file}) or rank({rank})")
        return _SQUARES[rank * 8 + file]

    @classmethod
    def from_algebraic(cls, text: str) -> "Square":
        """Parse a square name such as ``"e4"`` (case-insensitive).

        Args:
            text (str): Exactly two characters, file letter then rank digit.

        Returns:
            Square: Parsed square.

        Raises:
            InvalidAlgNotation: If ``text`` is not exactly two characters or
                names a file or rank off the board.
        """
        lc = text.lower()
        if len(lc) != 2:
            raise InvalidAlgNotation(lc)
        if lc[0] not in FILES or lc[1] not in RANKS:
            raise InvalidAlgNotation(f"Invalid rank/file: {lc}")
        return cls.from_file_rank(FILES.index(lc[0]), RANKS.index(lc[1]))

    def to_algebraic(self) -> str:
        file, rank = _COORDS[self]
        return FILES[file] + RANKS[rank]

    def __str__(self) -> str:
        return self.to_algebraic()

    def __format__(self, format_spec: str) -> str:
        return format(self.to_algebraic(), format_spec)


# Single index <-> coordinate lookup shared by every conversion above
_SQUARES: Tuple[Square, ...] = tuple(Square)
_COORDS: Tuple[Tuple[int, int], ...] = tuple((sq.value % 8, sq.value // 8) for sq in _SQUARES)
