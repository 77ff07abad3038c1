"""The two sides of a chess game and their piece-square bonuses."""

from __future__ import annotations

from enum import Enum
from itertools import chain


class Alliance(Enum):
    """A side of the board: white moves up the board, black moves down."""

    WHITE = "white"
    BLACK = "black"

    @property
    def direction(self) -> int:
        """Coordinate step a pawn of this side takes when advancing one rank."""
        return -1 if self is Alliance.WHITE else 1

    @property
    def opposite_direction(self) -> int:
        """The direction of the other side."""
        return 1 if self is Alliance.WHITE else -1

    @property
    def is_white(self) -> bool:
        return self is Alliance.WHITE

    @property
    def is_black(self) -> bool:
        return self is Alliance.BLACK

    def is_pawn_promotion_square(self, position: int) -> bool:
        """Whether a pawn of this side promotes on ``position``."""
        if self is Alliance.BLACK:
            return 56 <= position < 64
        return 0 <= position < 8

    def location_bonus(self, piece_letter: str, position: int) -> int:
        """Positional bonus of a piece (given by its letter) standing on ``position``."""
        try:
            table = _LOCATION_BONUS[self][piece_letter]
        except KeyError:
            raise ValueError(f"unknown piece letter: {piece_letter!r}") from None
        if not 0 <= position < 64:
            raise ValueError(f"invalid tile coordinate: {position}")
        return table[position]

    def __str__(self) -> str:
        return "White" if self is Alliance.WHITE else "Black"


# Piece-square tables seen from white's side, one tuple per rank from the
# eighth rank (coordinates 0-7) down to the first (coordinates 56-63).
# Black's tables are the same ranks in reverse order.
_WHITE_RANKS: dict[str, tuple[tuple[int, ...], ...]] = {
    "P": (
        (0,) * 8,
        (50,) * 8,
        (10, 10, 20, 30, 30, 20, 10, 10),
        (5, 5, 10, 25, 25, 10, 5, 5),
        (0, 0, 0, 20, 20, 0, 0, 0),
        (5, -5, -10, 0, 0, -10, -5, 5),
        (5, 10, 10, -20, -20, 10, 10, 5),
        (0,) * 8,
    ),
    "N": (
        (-50, -40, -30, -30, -30, -30, -40, -50),
        (-40, -20, 0, 0, 0, 0, -20, -40),
        (-30, 0, 10, 15, 15, 10, 0, -30),
        (-30, 5, 15, 20, 20, 15, 5, -30),
        (-30, 0, 15, 20, 20, 15, 0, -30),
        (-30, 5, 10, 15, 15, 10, 5, -30),
        (-40, -20, 0, 5, 5, 0, -20, -40),
        (-50, -40, -30, -30, -30, -30, -40, -50),
    ),
    "B": (
        (-20,) + (-10,) * 6 + (-20,),
        (-10,) + (0,) * 6 + (-10,),
        (-10, 0, 5, 10, 10, 5, 0, -10),
        (-10, 5, 5, 10, 10, 5, 5, -10),
        (-10, 0, 10, 10, 10, 10, 0, -10),
        (-10,) + (10,) * 6 + (-10,),
        (-10, 5, 0, 0, 0, 0, 5, -10),
        (-20,) + (-10,) * 6 + (-20,),
    ),
    "R": (
        (0,) * 8,
        (5,) + (10,) * 6 + (5,),
        (-5,) + (0,) * 6 + (-5,),
        (-5,) + (0,) * 6 + (-5,),
        (-5,) + (0,) * 6 + (-5,),
        (-5,) + (0,) * 6 + (-5,),
        (-5,) + (0,) * 6 + (-5,),
        (0, 0, 0, 5, 5, 0, 0, 0),
    ),
    "Q": (
        (-20, -10, -10, -5, -5, -10, -10, -20),
        (-10,) + (0,) * 6 + (-10,),
        (-10, 0, 5, 5, 5, 5, 0, -10),
        (-5, 0, 5, 5, 5, 5, 0, -5),
        (0, 0, 5, 5, 5, 5, 0, -5),
        (-10, 5, 5, 5, 5, 5, 0, -10),
        (-10, 0, 5, 0, 0, 0, 0, -10),
        (-20, -10, -10, -5, -5, -10, -10, -20),
    ),
    "K": (
        *((-30, -40, -40, -50, -50, -40, -40, -30),) * 4,
        (-20, -30, -30, -40, -40, -30, -30, -20),
        (-10,) + (-20,) * 6 + (-10,),
        (20, 20, 0, 0, 0, 0, 20, 20),
        (20, 30, 10, 0, 0, 10, 30, 20),
    ),
}


def _flatten(ranks: tuple[tuple[int, ...], ...]) -> tuple[int, ...]:
    return tuple(chain.from_iterable(ranks))


_LOCATION_BONUS = {
    Alliance.WHITE: {letter: _flatten(ranks) for letter, ranks in _WHITE_RANKS.items()},
    Alliance.BLACK: {letter: _flatten(ranks[::-1]) for letter, ranks in _WHITE_RANKS.items()},
}