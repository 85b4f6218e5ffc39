from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .bitboard import Bitboard
from .error import InvalidFen
from .move import Move
from .square import Square


STARTPOS_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

WHITE = 0
BLACK = 1

# Piece indices for bitboards: white 0-5, black 6-11
WK, WQ, WR, WB, WN, WP, BK, BQ, BR, BB, BN, BP = range(12)
PIECE_TO_CHAR = {
    WK: "K",
    WQ: "Q",
    WR: "R",
    WB: "B",
    WN: "N",
    WP: "P",
    BK: "k",
    BQ: "q",
    BR: "r",
    BB: "b",
    BN: "n",
    BP: "p",
}
CHAR_TO_PIECE = {v: k for k, v in PIECE_TO_CHAR.items()}

CASTLE_WHITE_KING = 1 << 0
CASTLE_WHITE_QUEEN = 1 << 1
CASTLE_BLACK_KING = 1 << 2
CASTLE_BLACK_QUEEN = 1 << 3
# Letter per castling bit, in bit order
CASTLING_CHARS = "KQkq"


def _parse_counter(text: str, name: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise InvalidFen(f"Invalid {name}: {text}")
    return int(text)


@dataclass
class Board:
    """Position made of twelve piece bitboards plus game state.

    Notes:
    - Squares follow ``Square`` (a1=0 .. h8=63).
    - A square is set in at most one bitboard; this holds by construction and
      is not checked.
    - ``make_move`` is a raw toggle with no bookkeeping; see its docstring.
    """

    bitboards: List[Bitboard] = field(default_factory=lambda: [Bitboard() for _ in range(12)])
    side_to_move: int = WHITE
    # bit0 K, bit1 Q, bit2 k, bit3 q
    castling_rights: int = 0
    en_passant: Optional[Square] = None
    halfmove_clock: int = 0
    fullmove_counter: int = 1
    move_stack: List[Move] = field(default_factory=list)

    @classmethod
    def startpos(cls) -> "Board":
        """Create a board initialized to the standard chess starting position."""
        return cls.from_fen(STARTPOS_FEN)

    @classmethod
    def from_fen(cls, fen: str) -> "Board":
        """Create a board from a Forsyth–Edwards Notation (FEN) string.

        Args:
            fen (str): Six whitespace-separated fields: placement, side to
                move, castling rights, en passant target, halfmove clock and
                fullmove counter.

        Returns:
            Board: Board with an empty move history.

        Raises:
            InvalidFen: If the field count, placement, side to move, castling
                rights or counters are malformed.
            InvalidAlgNotation: If the en passant target is not a square.
        """
        fields = fen.split()
        if len(fields) != 6:
            raise InvalidFen(f"Invalid number of fields ({len(fields)})")
        placement, stm, castling, ep, halfmove, fullmove = fields

        ranks = placement.split("/")
        if len(ranks) != 8:
            raise InvalidFen(f"Invalid number of ranks ({len(ranks)}): {placement}")

        bitboards = [Bitboard() for _ in range(12)]
        for rank, occupancy in zip(range(7, -1, -1), ranks):
            file = 0
            for ch in occupancy:
                if ch.isascii() and ch.isdigit():
                    empty = int(ch)
                    if empty == 0 or file + empty > 8:
                        raise InvalidFen(f"Empty squares exceed board: {occupancy}")
                    file += empty
                    continue
                if ch not in CHAR_TO_PIECE:
                    raise InvalidFen(f"Invalid piece: {ch}")
                if file > 7:
                    raise InvalidFen(f"Too many squares in rank: {occupancy}")
                bitboards[CHAR_TO_PIECE[ch]].set(Square.from_file_rank(file, rank))
                file += 1
            if file != 8:
                raise InvalidFen(f"Rank does not cover 8 squares: {occupancy}")

        if stm == "w":
            side_to_move = WHITE
        elif stm == "b":
            side_to_move = BLACK
        else:
            raise InvalidFen(f"Invalid side to move: {stm}")

        castling_rights = 0
        if castling != "-":
            for ch in castling:
                if ch not in CASTLING_CHARS:
                    raise InvalidFen(f"Invalid castling rights: {castling}")
                castling_rights |= 1 << CASTLING_CHARS.index(ch)

        en_passant = None if ep == "-" else Square.from_algebraic(ep)

        halfmove_clock = _parse_counter(halfmove, "halfmove clock")
        fullmove_counter = _parse_counter(fullmove, "fullmove counter")

        return cls(
            bitboards=bitboards,
            side_to_move=side_to_move,
            castling_rights=castling_rights,
            en_passant=en_passant,
            halfmove_clock=halfmove_clock,
            fullmove_counter=fullmove_counter,
        )

    def to_fen(self) -> str:
        """Serialize the current position into a FEN string.

        Returns:
            str: FEN string describing the board state.
        """
        ranks_str: List[str] = []
        for rank in range(7, -1, -1):
            run = 0
            row = []
            for file in range(8):
                ch = self.piece_char_at(Square.from_file_rank(file, rank))
                if ch is None:
                    run += 1
                    continue
                if run > 0:
                    row.append(str(run))
                    run = 0
                row.append(ch)
            if run > 0:
                row.append(str(run))
            ranks_str.append("".join(row))
        placement = "/".join(ranks_str)

        stm = "w" if self.side_to_move == WHITE else "b"
        castling = self._castling_letters() or "-"
        ep = self.en_passant.to_algebraic() if self.en_passant is not None else "-"
        return f"{placement} {stm} {castling} {ep} {self.halfmove_clock} {self.fullmove_counter}"

    def piece_at(self, square: Square) -> Optional[int]:
        """Return the bitboard index occupying ``square``, or ``None``."""
        for piece, bb in enumerate(self.bitboards):
            if bb.is_occupied(square):
                return piece
        return None

    def piece_char_at(self, square: Square) -> Optional[str]:
        piece = self.piece_at(square)
        return PIECE_TO_CHAR[piece] if piece is not None else None

    def occupancy(self) -> Bitboard:
        occ = Bitboard()
        for bb in self.bitboards:
            occ |= bb
        return occ

    def make_move(self, move: Move) -> None:
        """Move whatever sits on the origin square to the destination square.

        Every bitboard occupied at the origin has both the origin and the
        destination bit flipped. Nothing else changes: a piece already on the
        destination stays there, castling rooks and en passant victims are not
        touched, and side to move, castling rights, en passant target, clocks
        and ``move_stack`` are left as they were.

        Args:
            move (Move): Move whose squares were already validated.
        """
        from_sq = move.from_square_unchecked()
        to_sq = move.to_square_unchecked()
        toggle_mask = Bitboard.from_square(from_sq) | Bitboard.from_square(to_sq)
        for bb in self.bitboards:
            if bb.is_occupied(from_sq):
                bb ^= toggle_mask

    def push(self, move: Move) -> None:
        """Apply ``move`` with ``make_move`` and record it in ``move_stack``."""
        self.make_move(move)
        self.move_stack.append(move)

    def copy(self) -> "Board":
        return Board(
            bitboards=[bb.copy() for bb in self.bitboards],
            side_to_move=self.side_to_move,
            castling_rights=self.castling_rights,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_counter=self.fullmove_counter,
            move_stack=list(self.move_stack),
        )

    def _castling_letters(self) -> str:
        return "".join(ch for i, ch in enumerate(CASTLING_CHARS) if self.castling_rights & (1 << i))

    def __str__(self) -> str:
        lines = []
        for rank in range(7, -1, -1):
            cells = []
            for file in range(8):
                ch = self.piece_char_at(Square.from_file_rank(file, rank))
                cells.append(ch if ch is not None else "-")
            line = " ".join(cells)
            if rank == 7:
                side = "White" if self.side_to_move == WHITE else "Black"
                line += f" | Next move: {side}"
            elif rank == 6:
                line += f" | Castling rights: {self._castling_letters()}"
            elif rank == 5:
                ep = self.en_passant.to_algebraic() if self.en_passant is not None else "-"
                line += f" | En passant: {ep}"
            elif rank == 4:
                line += f" | Halfmove clock: {self.halfmove_clock}"
            elif rank == 3:
                line += f" | Fullmove counter: {self.fullmove_counter}"
            lines.append(line)
        return "\n".join(lines)
