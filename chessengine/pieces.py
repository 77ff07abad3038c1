"""The pieces other than the pawn: bishop, king, knight, queen and rook."""

from __future__ import annotations

from typing import Any, ClassVar

from chessengine.alliance import Alliance
from chessengine.board_utils import TILES_PER_ROW, is_valid_tile_coordinate
from chessengine.moves import MajorAttackMove, MajorMove, Move
from chessengine.piece import Piece, PieceType


class _OffsetPiece(Piece):
    """A piece whose moves are fixed coordinate offsets, some of which wrap at the edges."""

    offsets: ClassVar[tuple[int, ...]] = ()
    # Offsets that would wrap around the board, keyed by the column they start from.
    edge_exclusions: ClassVar[dict[int, frozenset[int]]] = {}

    def _wraps(self, square: int, offset: int) -> bool:
        return offset in self.edge_exclusions.get(square % TILES_PER_ROW, frozenset())

    def _move_to(self, board: Any, destination: int) -> Move | None:
        """A move onto ``destination``, or None if a piece of the same side stands there."""
        tile = board.tile(destination)
        if not tile.is_occupied:
            return MajorMove(board, self, destination)
        if tile.piece.alliance is not self.alliance:
            return MajorAttackMove(board, self, tile.piece, destination)
        return None

    def move_piece(self, move: Any) -> Piece:
        return type(self)(move.destination, move.moved_piece.alliance, False)


class _SteppingPiece(_OffsetPiece):
    """A piece that jumps once along each of its offsets."""

    def calculate_legal_moves(self, board: Any) -> list[Move]:
        moves = []
        for offset in self.offsets:
            destination = self.position + offset
            if not is_valid_tile_coordinate(destination) or self._wraps(self.position, offset):
                continue
            move = self._move_to(board, destination)
            if move is not None:
                moves.append(move)
        return moves


class _SlidingPiece(_OffsetPiece):
    """A piece that slides along each of its offsets until blocked."""

    def calculate_legal_moves(self, board: Any) -> list[Move]:
        moves = []
        for offset in self.offsets:
            square = self.position
            while not self._wraps(square, offset):
                square += offset
                if not is_valid_tile_coordinate(square):
                    break
                tile = board.tile(square)
                if not tile.is_occupied:
                    moves.append(MajorMove(board, self, square))
                    continue
                if tile.piece.alliance is not self.alliance:
                    moves.append(MajorAttackMove(board, self, tile.piece, square))
                break
        return moves


class Bishop(_SlidingPiece):
    """Slides along the diagonals."""

    piece_type = PieceType.BISHOP
    offsets = (-9, -7, 7, 9)
    edge_exclusions = {0: frozenset({-9, 7}), 7: frozenset({-7, 9})}

    def calculate_legal_moves(self, board: Any) -> list[Move]:
        return super().calculate_legal_moves(board)

    def move_piece(self, move: Any) -> Bishop:
        return Bishop(move.destination, move.moved_piece.alliance, False)


class Rook(_SlidingPiece):
    """Slides along ranks and files."""

    piece_type = PieceType.ROOK
    offsets = (-8, -1, 1, 8)
    edge_exclusions = {0: frozenset({-1}), 7: frozenset({1})}

    def calculate_legal_moves(self, board: Any) -> list[Move]:
        return super().calculate_legal_moves(board)

    def move_piece(self, move: Any) -> Rook:
        return Rook(move.destination, move.moved_piece.alliance, False)


class Queen(_SlidingPiece):
    """Slides along ranks, files and diagonals."""

    piece_type = PieceType.QUEEN
    offsets = (-9, -8, -7, -1, 1, 7, 8, 9)
    edge_exclusions = {0: frozenset({-1, -9, 7}), 7: frozenset({1, -7, 9})}

    def calculate_legal_moves(self, board: Any) -> list[Move]:
        return super().calculate_legal_moves(board)

    def move_piece(self, move: Any) -> Queen:
        return Queen(move.destination, move.moved_piece.alliance, False)


class Knight(_SteppingPiece):
    """Jumps in an L shape."""

    piece_type = PieceType.KNIGHT
    offsets = (-17, -15, -10, -6, 6, 10, 15, 17)
    edge_exclusions = {
        0: frozenset({-17, -10, 6, 15}),
        1: frozenset({-10, 6}),
        6: frozenset({10, -6}),
        7: frozenset({17, 10, -6, -15}),
    }

    def calculate_legal_moves(self, board: Any) -> list[Move]:
        return super().calculate_legal_moves(board)

    def move_piece(self, move: Any) -> Knight:
        return Knight(move.destination, move.moved_piece.alliance, False)


class King(_SteppingPiece):
    """Steps one square in any direction and keeps track of its castling rights."""

    piece_type = PieceType.KING
    offsets = (-9, -8, -7, -1, 1, 7, 8, 9)
    edge_exclusions = {0: frozenset({-9, -1, 7}), 7: frozenset({-7, 1, 9})}

    def __init__(
        self,
        position: int,
        alliance: Alliance,
        first_move: bool = True,
        castled: bool = False,
        king_side_castle_capable: bool = False,
        queen_side_castle_capable: bool = False,
    ) -> None:
        super().__init__(position, alliance, first_move)
        self.castled = castled
        self.king_side_castle_capable = king_side_castle_capable
        self.queen_side_castle_capable = queen_side_castle_capable

    def calculate_legal_moves(self, board: Any) -> list[Move]:
        return super().calculate_legal_moves(board)

    def move_piece(self, move: Any) -> King:
        return King(
            move.destination,
            move.moved_piece.alliance,
            False,
            self.castled or move.is_castling,
            False,
            False,
        )