"""Position and move representation: squares, bitboards, packed moves, FEN."""

from .bitboard import EMPTY, Bitboard
from .board import STARTPOS_FEN, Board
from .error import ChessError, InvalidAlgNotation, InvalidFen, InvalidSquare
from .move import Move
from .square import Square

__all__ = [
    "EMPTY",
    "STARTPOS_FEN",
    "Bitboard",
    "Board",
    "ChessError",
    "InvalidAlgNotation",
    "InvalidFen",
    "InvalidSquare",
    "Move",
    "Square",
]
