from __future__ import annotations


class ChessError(ValueError):
    """Base class for parse and decode failures raised by the engine."""


class InvalidFen(ChessError):
    """A FEN string could not be parsed.

    Attributes:
        msg (str): Human-readable reason, without the ``"Invalid FEN"`` prefix.
    """

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(f"Invalid FEN: {msg}")


class InvalidAlgNotation(ChessError):
    """A square or move in algebraic notation could not be parsed.

    Attributes:
        msg (str): Human-readable reason or the offending text.
    """

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(f"Invalid algebraic notation: {msg}")


class InvalidSquare(ChessError):
    """A numeric square index fell outside 0..63.

    Attributes:
        square (int): The offending index.
    """

    def __init__(self, square: int) -> None:
        self.square = square
        super().__init__(f"Invalid square: {square}")
