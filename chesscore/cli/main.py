from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ..engine.board import Board
from ..engine.error import ChessError
from ..protocol.repl.loop import ReplSession, run_repl


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chesscore", description="Interactive chess position shell")
    parser.add_argument(
        "--fen",
        default=None,
        help="FEN to load before the first prompt (default: no board; use 'startpos' for the start position)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    session = ReplSession()
    if args.fen == "startpos":
        session.board = Board.startpos()
    elif args.fen is not None:
        try:
            session.board = Board.from_fen(args.fen)
        except ChessError as e:
            parser.error(str(e))
    logger.info("starting shell", extra={"preloaded": session.board is not None})

    run_repl(session=session)


if __name__ == "__main__":
    main()
