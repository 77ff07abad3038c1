"""The chess board: an immutable position built from a builder."""

from __future__ import annotations

from chessengine.alliance import Alliance
from chessengine.board_utils import NUM_TILES, TILES_PER_ROW
from chessengine.moves import Move, PawnPromotion, null_move
from chessengine.pawn import Pawn
from chessengine.piece import Piece, PieceType
from chessengine.pieces import Bishop, King, Knight, Queen, Rook
from chessengine.tile import Tile, create_tile


class BoardBuilder:
    """Collects pieces and game state, then builds a :class:`Board`."""

    def __init__(self) -> None:
        self.board_config: dict[int, Piece] = {}
        self.move_maker: Alliance = Alliance.WHITE
        self.en_passant_pawn: Piece | None = None
        self.transition_move: Move | None = None
        self.previous_board: Board | None = None
        self.half_move_clock: int = 0
        self.full_move_number: int = 1

    def set_piece(self, piece: Piece) -> BoardBuilder:
        """Place ``piece`` on its square, replacing whatever stood there."""
        self.board_config[piece.position] = piece
        return self

    def build(self) -> Board:
        """The board described by this builder."""
        return Board(self)


class Board:
    """A position: 64 tiles, the side to move and the moves available to each side."""

    def __init__(self, builder: BoardBuilder) -> None:
        self.previous_board = builder.previous_board
        self.en_passant_pawn = builder.en_passant_pawn
        self.transition_move = (
            builder.transition_move if builder.transition_move is not None else null_move()
        )
        self.move_maker = builder.move_maker
        self.half_move_clock = builder.half_move_clock
        self.full_move_number = builder.full_move_number
        self._tiles: tuple[Tile, ...] = tuple(
            create_tile(coordinate, builder.board_config.get(coordinate))
            for coordinate in range(NUM_TILES)
        )
        self._pieces: dict[Alliance, tuple[Piece, ...]] = {
            alliance: tuple(
                tile.piece
                for tile in self._tiles
                if tile.piece is not None and tile.piece.alliance is alliance
            )
            for alliance in Alliance
        }
        for alliance, pieces in self._pieces.items():
            if not any(piece.piece_type is PieceType.KING for piece in pieces):
                raise ValueError(f"Invalid board: no king for {alliance}")
        self._legal_moves: dict[Alliance, tuple[Move, ...]] = {
            alliance: tuple(
                move for piece in pieces for move in piece.calculate_legal_moves(self)
            )
            for alliance, pieces in self._pieces.items()
        }

    def tile(self, coordinate: int) -> Tile:
        """The tile at ``coordinate``."""
        if not 0 <= coordinate < NUM_TILES:
            raise ValueError(f"invalid tile coordinate: {coordinate}")
        return self._tiles[coordinate]

    def active_pieces(self, alliance: Alliance) -> list[Piece]:
        """Pieces of ``alliance`` on the board, in square order."""
        return list(self._pieces[alliance])

    def all_pieces(self) -> list[Piece]:
        """White pieces followed by black pieces."""
        return [*self._pieces[Alliance.WHITE], *self._pieces[Alliance.BLACK]]

    def legal_moves(self, alliance: Alliance) -> list[Move]:
        """Moves available to ``alliance``."""
        return list(self._legal_moves[alliance])

    def current_legal_moves(self) -> list[Move]:
        """Moves available to the side to move."""
        return self.legal_moves(self.move_maker)

    def all_legal_moves(self) -> list[Move]:
        """White moves followed by black moves."""
        return [*self._legal_moves[Alliance.WHITE], *self._legal_moves[Alliance.BLACK]]

    def builder(self) -> BoardBuilder:
        """A builder holding this position, ready to be changed and rebuilt."""
        builder = BoardBuilder()
        for piece in self.all_pieces():
            builder.set_piece(piece)
        builder.move_maker = self.move_maker
        builder.en_passant_pawn = self.en_passant_pawn
        builder.transition_move = self.transition_move
        builder.previous_board = self.previous_board
        builder.half_move_clock = self.half_move_clock
        builder.full_move_number = self.full_move_number
        return builder

    @classmethod
    def create_standard_board(cls) -> Board:
        """The starting position, white to move."""
        builder = BoardBuilder()
        back_rank = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)
        for column, piece_class in enumerate(back_rank):
            builder.set_piece(piece_class(column, Alliance.BLACK))
            builder.set_piece(Pawn(TILES_PER_ROW + column, Alliance.BLACK))
            builder.set_piece(Pawn(48 + column, Alliance.WHITE))
            builder.set_piece(piece_class(56 + column, Alliance.WHITE))
        builder.move_maker = Alliance.WHITE
        return builder.build()

    def __str__(self) -> str:
        rows = (
            "".join(str(tile) for tile in self._tiles[start : start + TILES_PER_ROW])
            for start in range(0, NUM_TILES, TILES_PER_ROW)
        )
        return "".join(f"{row}\n" for row in rows)


def create_move(
    board: Board,
    current: int,
    destination: int,
    promotion_type: PieceType | None = None,
) -> Move:
    """The legal move from ``current`` to ``destination``, or the null move.

    With ``promotion_type`` only a pawn promotion to that kind of piece matches.
    """
    for move in board.all_legal_moves():
        if move.current_coordinate != current or move.destination != destination:
            continue
        if promotion_type is None:
            return move
        if isinstance(move, PawnPromotion) and move.promoted_piece.piece_type is promotion_type:
            return move
    return null_move()