"""The pawn: the only piece whose moves depend on the side it plays for."""

from __future__ import annotations

from typing import Any, Callable

from chessengine.board_utils import (
    EIGHTH_COLUMN,
    FIRST_COLUMN,
    SECOND_ROW,
    SEVENTH_ROW,
    is_valid_tile_coordinate,
)
from chessengine.moves import (
    Move,
    PawnAttackMove,
    PawnEnPassantAttackMove,
    PawnJump,
    PawnMove,
    PawnPromotion,
)
from chessengine.piece import Piece, PieceType
from chessengine.pieces import Bishop, Knight, Queen, Rook

# Promotion choices, in the order their moves are generated.
_PROMOTION_CLASSES = (Queen, Rook, Knight, Bishop)


class Pawn(Piece):
    """Advances one square, two from its starting rank, and captures diagonally."""

    piece_type = PieceType.PAWN
    offsets = (8, 16, 7, 9)

    def calculate_legal_moves(self, board: Any) -> list[Move]:
        moves: list[Move] = []
        for offset in self.offsets:
            destination = self.position + offset * self.alliance.direction
            if not is_valid_tile_coordinate(destination):
                continue
            if offset == 8:
                moves.extend(self._advances(board, destination))
            elif offset == 16:
                moves.extend(self._jumps(board, destination))
            elif offset == 7 and not self._blocked_on_edge(left_offset=False):
                moves.extend(
                    self._captures(board, destination, self.alliance.opposite_direction)
                )
            elif offset == 9 and not self._blocked_on_edge(left_offset=True):
                moves.extend(
                    self._captures(board, destination, -self.alliance.opposite_direction)
                )
        return moves

    def move_piece(self, move: Any) -> Pawn:
        return Pawn(move.destination, move.moved_piece.alliance, False)

    def _blocked_on_edge(self, *, left_offset: bool) -> bool:
        """Whether a diagonal capture along offset 9 (or 7) would wrap around the board."""
        white = self.alliance.is_white
        if left_offset:
            return (EIGHTH_COLUMN[self.position] and not white) or (
                FIRST_COLUMN[self.position] and white
            )
        return (EIGHTH_COLUMN[self.position] and white) or (
            FIRST_COLUMN[self.position] and not white
        )

    def _promotions(self, make_input: Callable[[], Move], destination: int) -> list[Move]:
        return [
            PawnPromotion(make_input(), piece_class(destination, self.alliance, False))
            for piece_class in _PROMOTION_CLASSES
        ]

    def _advances(self, board: Any, destination: int) -> list[Move]:
        if board.tile(destination).is_occupied:
            return []
        if self.alliance.is_pawn_promotion_square(destination):
            return self._promotions(lambda: PawnMove(board, self, destination), destination)
        return [PawnMove(board, self, destination)]

    def _jumps(self, board: Any, destination: int) -> list[Move]:
        on_start_rank = (SECOND_ROW[self.position] and self.alliance.is_black) or (
            SEVENTH_ROW[self.position] and self.alliance.is_white
        )
        if not (self.first_move and on_start_rank):
            return []
        behind = self.position + self.alliance.direction * 8
        if board.tile(behind).is_occupied or board.tile(destination).is_occupied:
            return []
        return [PawnJump(board, self, destination)]

    def _captures(self, board: Any, destination: int, en_passant_step: int) -> list[Move]:
        tile = board.tile(destination)
        if tile.is_occupied:
            target = tile.piece
            if target.alliance is self.alliance:
                return []
            if self.alliance.is_pawn_promotion_square(destination):
                return self._promotions(
                    lambda: PawnAttackMove(board, self, target, destination), destination
                )
            return [PawnAttackMove(board, self, target, destination)]
        en_passant = board.en_passant_pawn
        if (
            en_passant is not None
            and en_passant.position == self.position + en_passant_step
            and en_passant.alliance is not self.alliance
        ):
            return [PawnEnPassantAttackMove(board, self, en_passant, destination)]
        return []