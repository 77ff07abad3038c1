"""Moves of the pieces and the result of making one."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from chessengine.alliance import Alliance
from chessengine.board_utils import position_at_coordinate
from chessengine.piece import Piece, PieceType


class MoveStatus(Enum):
    """Outcome of trying to make a move."""

    DONE = "done"
    ILLEGAL_MOVE = "illegal_move"
    LEAVES_PLAYER_IN_CHECK = "leaves_player_in_check"


def _opponent(alliance: Alliance) -> Alliance:
    return Alliance.BLACK if alliance is Alliance.WHITE else Alliance.WHITE


class Move:
    """A piece going from its square to ``destination`` on ``board``."""

    def __init__(self, board: Any, moved_piece: Piece | None, destination: int) -> None:
        self.board = board
        self.moved_piece = moved_piece
        self.destination = destination
        self.is_first_move = moved_piece.first_move if moved_piece is not None else False

    @property
    def current_coordinate(self) -> int:
        """Square the moved piece starts from."""
        return self.moved_piece.position

    @property
    def is_attack(self) -> bool:
        return False

    @property
    def is_castling(self) -> bool:
        return False

    @property
    def attacked_piece(self) -> Piece | None:
        return None

    def disambiguation_file(self) -> str:
        """File of the moved piece if another piece of its kind can reach the same square."""
        for other in self._live_board().current_legal_moves():
            if (
                other != self
                and other.destination == self.destination
                and other.moved_piece.piece_type is self.moved_piece.piece_type
            ):
                return position_at_coordinate(self.moved_piece.position)[:1]
        return ""

    def execute(self) -> Any:
        """The board that results from making this move."""
        board = self._live_board()
        mover = board.move_maker
        own = [piece for piece in board.active_pieces(mover) if piece != self.moved_piece]
        theirs = list(board.active_pieces(_opponent(mover)))
        moved = self.moved_piece.move_piece(self)
        if self.is_attack or self.moved_piece.piece_type is PieceType.PAWN:
            clock = 0
        else:
            clock = board.half_move_clock + 1
        return self._successor([*own, *theirs, moved], half_move_clock=clock)

    def undo(self) -> Any:
        """The board this move was made from came from this board."""
        return self._live_board().previous_board

    def _live_board(self) -> Any:
        if self.board is None:
            raise RuntimeError("Board expired!")
        return self.board

    def _successor(
        self,
        pieces: Iterable[Piece],
        *,
        half_move_clock: int,
        en_passant_pawn: Piece | None = None,
    ) -> Any:
        from chessengine.board import BoardBuilder

        board = self._live_board()
        mover = board.move_maker
        builder = BoardBuilder()
        for piece in pieces:
            builder.set_piece(piece)
        builder.move_maker = _opponent(mover)
        builder.en_passant_pawn = en_passant_pawn
        builder.transition_move = self
        builder.previous_board = board
        builder.half_move_clock = half_move_clock
        builder.full_move_number = board.full_move_number + (1 if mover.is_black else 0)
        return builder.build()

    def _key(self) -> tuple:
        return (self.current_coordinate, self.destination, self.moved_piece)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Move):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.destination, self.moved_piece))

    def __str__(self) -> str:
        raise NotImplementedError("Use subclass functions!")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.current_coordinate}->{self.destination})"


class MajorMove(Move):
    """A quiet move of a piece other than a pawn."""

    def __str__(self) -> str:
        return f"{self.moved_piece}{self.disambiguation_file()}{position_at_coordinate(self.destination)}"


class AttackMove(Move):
    """A move that captures ``attacked_piece``."""

    def __init__(
        self, board: Any, moved_piece: Piece, attacked_piece: Piece, destination: int
    ) -> None:
        super().__init__(board, moved_piece, destination)
        self._attacked_piece = attacked_piece

    @property
    def is_attack(self) -> bool:
        return True

    @property
    def attacked_piece(self) -> Piece:
        return self._attacked_piece

    def _key(self) -> tuple:
        return (*super()._key(), self._attacked_piece)


class MajorAttackMove(AttackMove):
    """A capture by a piece other than a pawn."""

    def __str__(self) -> str:
        return (
            f"{self.moved_piece}{self.disambiguation_file()}x"
            f"{position_at_coordinate(self.destination)}"
        )


class PawnMove(Move):
    """A pawn advancing one square."""

    def __str__(self) -> str:
        return position_at_coordinate(self.destination)


class PawnAttackMove(AttackMove):
    """A diagonal pawn capture."""

    def __str__(self) -> str:
        source_file = position_at_coordinate(self.moved_piece.position)[:1]
        return f"{source_file}x{position_at_coordinate(self.destination)}"


class PawnEnPassantAttackMove(PawnAttackMove):
    """A pawn capturing an adjacent pawn that has just jumped past it."""

    def execute(self) -> Any:
        board = self._live_board()
        mover = board.move_maker
        own = [piece for piece in board.active_pieces(mover) if piece != self.moved_piece]
        theirs = [
            piece
            for piece in board.active_pieces(_opponent(mover))
            if piece != self.attacked_piece
        ]
        moved = self.moved_piece.move_piece(self)
        return self._successor([*own, *theirs, moved], half_move_clock=0)


class PawnJump(Move):
    """A pawn advancing two squares from its starting rank."""

    def execute(self) -> Any:
        board = self._live_board()
        mover = board.move_maker
        own = [piece for piece in board.active_pieces(mover) if piece != self.moved_piece]
        theirs = list(board.active_pieces(_opponent(mover)))
        moved = self.moved_piece.move_piece(self)
        return self._successor(
            [*own, *theirs, moved], half_move_clock=0, en_passant_pawn=moved
        )

    def __str__(self) -> str:
        return position_at_coordinate(self.destination)


class PawnPromotion(Move):
    """A pawn move onto the last rank that turns the pawn into ``promoted_piece``."""

    def __init__(self, input_move: Move, promoted_piece: Piece) -> None:
        super().__init__(input_move.board, input_move.moved_piece, input_move.destination)
        self.input_move = input_move
        self.promoted_pawn = input_move.moved_piece
        self.promoted_piece = promoted_piece

    @property
    def is_attack(self) -> bool:
        return self.input_move.is_attack

    @property
    def attacked_piece(self) -> Piece | None:
        return self.input_move.attacked_piece

    def execute(self) -> Any:
        pawn_moved_board = self.input_move.execute()
        promoter = self.moved_piece.alliance
        pieces = [
            piece
            for piece in pawn_moved_board.active_pieces(promoter)
            if piece != self.promoted_pawn
        ]
        pieces.extend(pawn_moved_board.active_pieces(_opponent(promoter)))
        pieces.append(self.promoted_piece.move_piece(self))
        return self._successor(pieces, half_move_clock=0)

    def _key(self) -> tuple:
        return (*super()._key(), self.promoted_piece)

    def __str__(self) -> str:
        return f"{self.input_move}={self.promoted_piece}"


class CastleMove(Move):
    """The king moving two squares with a rook jumping over it."""

    def __init__(
        self,
        board: Any,
        moved_piece: Piece,
        destination: int,
        castling_rook: Piece,
        rook_start: int,
        rook_destination: int,
    ) -> None:
        super().__init__(board, moved_piece, destination)
        self.castling_rook = castling_rook
        self.rook_start = rook_start
        self.rook_destination = rook_destination

    @property
    def is_castling(self) -> bool:
        return True

    def execute(self) -> Any:
        board = self._live_board()
        mover = board.move_maker
        own = [
            piece
            for piece in board.active_pieces(mover)
            if piece != self.moved_piece and piece != self.castling_rook
        ]
        theirs = list(board.active_pieces(_opponent(mover)))
        king = self.moved_piece.move_piece(self)
        rook = type(self.castling_rook)(
            self.rook_destination, self.castling_rook.alliance, False
        )
        return self._successor(
            [*own, *theirs, king, rook], half_move_clock=board.half_move_clock + 1
        )

    def _key(self) -> tuple:
        return (*super()._key(), self.castling_rook)


class KingSideCastleMove(CastleMove):
    """Castling towards the h-file."""

    def __str__(self) -> str:
        return "O-O"


class QueenSideCastleMove(CastleMove):
    """Castling towards the a-file."""

    def __str__(self) -> str:
        return "O-O-O"


class NullMove(Move):
    """The absence of a move."""

    def __init__(self) -> None:
        super().__init__(None, None, -1)

    @property
    def current_coordinate(self) -> int:
        return -1

    def execute(self) -> Any:
        raise RuntimeError("Cannot execute the null move!")

    def __str__(self) -> str:
        return "Null Move"


_NULL_MOVE = NullMove()


def null_move() -> NullMove:
    """The shared null move."""
    return _NULL_MOVE


@dataclass(frozen=True)
class MoveTransition:
    """The board reached by a move, the move itself and whether it was made."""

    board: Any
    move: Move
    status: MoveStatus