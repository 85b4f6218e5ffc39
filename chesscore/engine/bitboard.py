from __future__ import annotations

from typing import Iterator

from .square import Square


MASK_64 = (1 << 64) - 1


class Bitboard:
    """Set of squares packed into a 64-bit integer.

    Bit ``i`` is set when square index ``i`` is occupied::

        7 | 63 62 61 60 59 58 57 56
        6 | 55 54 53 52 51 50 49 48
        ...
        1 | 15 14 13 12 11 10 09 08
        0 | 07 06 05 04 03 02 01 00
            0  1  2  3  4  5  6  7

    Only bits 0..63 are ever stored.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = value & MASK_64

    @classmethod
    def from_square(cls, square: Square) -> "Bitboard":
        return cls(1 << square)

    @property
    def value(self) -> int:
        return self._value

    def is_occupied(self, square: Square) -> bool:
        return (self._value >> square) & 1 == 1

    def set(self, square: Square) -> None:
        self._value |= 1 << square

    def clear(self, square: Square) -> None:
        self._value &= ~(1 << square) & MASK_64

    def flip(self, square: Square) -> None:
        self._value ^= 1 << square

    def count(self) -> int:
        return self._value.bit_count()

    def is_empty(self) -> bool:
        return self._value == 0

    def is_not_empty(self) -> bool:
        return self._value != 0

    def union(self, other: "Bitboard") -> "Bitboard":
        return Bitboard(self._value | other._value)

    def xor_assign(self, other: "Bitboard") -> None:
        self._value ^= other._value

    def squares(self) -> Iterator[Square]:
        """Yield occupied squares from a1 towards h8."""
        bb = self._value
        while bb:
            lsb = bb & -bb
            yield Square.from_index_unchecked(lsb.bit_length() - 1)
            bb ^= lsb

    def copy(self) -> "Bitboard":
        return Bitboard(self._value)

    def render(self) -> str:
        """Render as 8 rows of ``1``/``0`` cells, rank 8 first.

        Returns:
            str: Rows separated by ``"\\n"`` with no trailing newline.
        """
        rows = []
        for rank in range(7, -1, -1):
            cells = [
                "1" if self.is_occupied(Square.from_file_rank(file, rank)) else "0"
                for file in range(8)
            ]
            rows.append(" ".join(cells))
        return "\n".join(rows)

    def __or__(self, other: "Bitboard") -> "Bitboard":
        return self.union(other)

    def __ior__(self, other: "Bitboard") -> "Bitboard":
        self._value |= other._value
        return self

    def __ixor__(self, other: "Bitboard") -> "Bitboard":
        self.xor_assign(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitboard):
            return NotImplemented
        return self._value == other._value

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self.is_not_empty()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Bitboard(0x{self._value:016x})"


class _ConstBitboard(Bitboard):
    """Read-only bitboard for shared constants.

    In-place mutators raise ``TypeError``; ``|=`` and ``^=`` rebind the
    name to a fresh ``Bitboard`` instead of touching the constant.
    """

    __slots__ = ()

    def set(self, square: Square) -> None:
        raise TypeError("constant bitboard cannot be modified; use copy()")

    def clear(self, square: Square) -> None:
        raise TypeError("constant bitboard cannot be modified; use copy()")

    def flip(self, square: Square) -> None:
        raise TypeError("constant bitboard cannot be modified; use copy()")

    def xor_assign(self, other: Bitboard) -> None:
        raise TypeError("constant bitboard cannot be modified; use copy()")

    def __ior__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self._value | other._value)

    def __ixor__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self._value ^ other._value)


EMPTY: Bitboard = _ConstBitboard(0)
