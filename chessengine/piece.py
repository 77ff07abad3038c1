"""Piece kinds and the common behaviour of all pieces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar

from chessengine.alliance import Alliance


class PieceType(Enum):
    """Kind of a chess piece, valued by its letter."""

    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"

    @property
    def piece_value(self) -> int:
        """Material value of this kind of piece."""
        return _PIECE_VALUES[self]


_PIECE_VALUES = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 300,
    PieceType.BISHOP: 300,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 10000,
}


class Piece(ABC):
    """A piece of one side standing on a board coordinate."""

    piece_type: ClassVar[PieceType | None] = None

    def __init__(self, position: int, alliance: Alliance, first_move: bool = True) -> None:
        self.position = position
        self.alliance = alliance
        self.first_move = first_move

    @abstractmethod
    def calculate_legal_moves(self, board: Any) -> list:
        """Pseudo-legal moves of this piece on ``board``."""

    @abstractmethod
    def move_piece(self, move: Any) -> Piece:
        """The piece as it stands after ``move`` has been made."""

    @property
    def value(self) -> int:
        """Material value of the piece."""
        if self.piece_type is None:
            raise ValueError("Invalid piece type")
        return self.piece_type.piece_value

    @property
    def location_bonus(self) -> int:
        """Positional bonus of the piece on its current square."""
        if self.piece_type is None:
            raise ValueError("Invalid piece type")
        return self.alliance.location_bonus(self.piece_type.value, self.position)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self.position == other.position
            and self.alliance is other.alliance
            and self.piece_type is other.piece_type
            and self.first_move == other.first_move
        )

    def __hash__(self) -> int:
        return hash((self.position, self.alliance, self.piece_type, self.first_move))

    def __str__(self) -> str:
        return self.piece_type.value if self.piece_type is not None else ""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position}, "
            f"alliance={self.alliance.name}, first_move={self.first_move})"
        )