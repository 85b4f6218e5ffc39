from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional, TextIO

from ... import version
from ...engine.board import CHAR_TO_PIECE, Board
from ...engine.error import ChessError
from ...engine.move import Move


logger = logging.getLogger(__name__)

Writer = Callable[[str], None]

PROMPT = "chesscore> "
HELP_TEXT = (
    "Commands: quit/q, version, help/h, position/pos, print/p, move/m, bitboard/bb"
)


class ReplSession:
    """Line-oriented command shell around a single board.

    Notes:
    - The session owns its board; nothing is stored at module level.
    - A failed command writes ``Error: ...`` and leaves the board unchanged.
    """

    def __init__(self) -> None:
        self.board: Optional[Board] = None

    def handle(self, line: str, write: Writer) -> bool:
        """Run one command line. Returns ``False`` when the session should end."""
        parts = line.split()
        if not parts:
            return True
        cmd, args = parts[0], parts[1:]

        # Argument-free commands only match when given on their own
        if cmd in ("quit", "q") and not args:
            write("bye!")
            return False
        if cmd == "version" and not args:
            write(version())
        elif cmd in ("help", "h") and not args:
            write(HELP_TEXT)
        elif cmd in ("position", "pos"):
            self.cmd_position(args, write)
        elif cmd in ("print", "p") and not args:
            self.cmd_print(write)
        elif cmd in ("move", "m"):
            self.cmd_move(args, write)
        elif cmd in ("bitboard", "bb"):
            self.cmd_bitboard(args, write)
        else:
            write(f"Unknown command: {' '.join(parts)}")
        return True

    # ---- Command handlers ----
    def cmd_position(self, args: List[str], write: Writer) -> None:
        # position startpos | position <FEN fields...>
        if args == ["startpos"]:
            self.board = Board.startpos()
            return
        try:
            board = Board.from_fen(" ".join(args))
        except ChessError as e:
            logger.debug("rejected position %r: %s", args, e)
            write(f"Error: {e}")
            return
        self.board = board

    def cmd_print(self, write: Writer) -> None:
        if self.board is None:
            write("No board loaded")
            return
        write(str(self.board))

    def cmd_move(self, args: List[str], write: Writer) -> None:
        if self.board is None:
            write("No board loaded")
            return
        if len(args) != 1:
            write("Usage: move <from><to>[promo]")
            return
        try:
            mv = Move.from_algebraic(args[0])
        except ChessError as e:
            logger.debug("rejected move %r: %s", args[0], e)
            write(f"Error: {e}")
            return
        self.board.push(mv)

    def cmd_bitboard(self, args: List[str], write: Writer) -> None:
        if self.board is None:
            write("No board loaded")
            return
        if len(args) != 1 or args[0] not in CHAR_TO_PIECE:
            write("Usage: bitboard <piece letter, one of KQRBNPkqrbnp>")
            return
        write(self.board.bitboards[CHAR_TO_PIECE[args[0]]].render())


def _stream_writer(stream: TextIO) -> Writer:
    def _w(line: str) -> None:
        # Ensure newline termination and immediate flush
        stream.write(line + "\n")
        stream.flush()

    return _w


def run_repl(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    session: Optional[ReplSession] = None,
) -> None:
    """Read commands until ``quit`` or end of input.

    The banner, prompts and command output all go to ``stdout`` (default
    ``sys.stdout``).
    """
    source = stdin if stdin is not None else sys.stdin
    sink = stdout if stdout is not None else sys.stdout
    session = session if session is not None else ReplSession()
    write = _stream_writer(sink)

    write(f"chesscore version: {version()}")
    while True:
        sink.write(PROMPT)
        sink.flush()
        raw = source.readline()
        if not raw:
            break
        if not session.handle(raw.strip(), write):
            break
