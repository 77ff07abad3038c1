"""Board geometry, algebraic notation and move ordering helpers."""

from __future__ import annotations

from typing import Any

from chessengine.piece import PieceType

NUM_TILES = 64
TILES_PER_ROW = 8


def _column(index: int) -> tuple[bool, ...]:
    return tuple(square % TILES_PER_ROW == index for square in range(NUM_TILES))


def _row(index: int) -> tuple[bool, ...]:
    return tuple(square // TILES_PER_ROW == index for square in range(NUM_TILES))


FIRST_COLUMN = _column(0)
SECOND_COLUMN = _column(1)
THIRD_COLUMN = _column(2)
FOURTH_COLUMN = _column(3)
FIFTH_COLUMN = _column(4)
SIXTH_COLUMN = _column(5)
SEVENTH_COLUMN = _column(6)
EIGHTH_COLUMN = _column(7)

FIRST_ROW = _row(0)
SECOND_ROW = _row(1)
THIRD_ROW = _row(2)
FOURTH_ROW = _row(3)
FIFTH_ROW = _row(4)
SIXTH_ROW = _row(5)
SEVENTH_ROW = _row(6)
EIGHTH_ROW = _row(7)

ALGEBRAIC_NOTATION: tuple[str, ...] = tuple(
    f"{file}{rank}" for rank in "87654321" for file in "abcdefgh"
)

_POSITION_TO_COORDINATE = {name: index for index, name in enumerate(ALGEBRAIC_NOTATION)}


def is_valid_tile_coordinate(coordinate: int) -> bool:
    """Whether ``coordinate`` lies on the board."""
    return 0 <= coordinate < NUM_TILES


def coordinate_at_position(position: str) -> int:
    """Coordinate of an algebraic square name such as ``"e4"``."""
    try:
        return _POSITION_TO_COORDINATE[position]
    except KeyError:
        raise ValueError(f"invalid square name: {position!r}") from None


def position_at_coordinate(coordinate: int) -> str:
    """Algebraic square name of a coordinate."""
    if not is_valid_tile_coordinate(coordinate):
        raise ValueError(f"invalid tile coordinate: {coordinate}")
    return ALGEBRAIC_NOTATION[coordinate]


def mvv_lva(move: Any) -> int:
    """Most-valuable-victim / least-valuable-attacker ordering score of a move."""
    king_value = PieceType.KING.piece_value
    moving_value = move.moved_piece.value
    if move.is_attack:
        return (move.attacked_piece.value - moving_value + king_value) * 100
    return king_value - moving_value