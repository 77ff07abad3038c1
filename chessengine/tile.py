"""Squares of the board, empty or holding a piece."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessengine.piece import Piece


@dataclass(frozen=True)
class Tile:
    """A board square at ``coordinate``, holding ``piece`` or nothing."""

    coordinate: int
    piece: Piece | None = None

    @property
    def is_occupied(self) -> bool:
        return self.piece is not None

    def __str__(self) -> str:
        if self.piece is None:
            return "-"
        text = str(self.piece)
        return text.lower() if self.piece.alliance.is_black else text


_EMPTY_TILES = {coordinate: Tile(coordinate) for coordinate in range(64)}


def create_tile(coordinate: int, piece: Piece | None = None) -> Tile:
    """Tile at ``coordinate``; empty tiles are shared instances."""
    if piece is None:
        try:
            return _EMPTY_TILES[coordinate]
        except KeyError:
            raise ValueError(f"invalid tile coordinate: {coordinate}") from None
    return Tile(coordinate, piece)