import pytest

from chessengine.alliance import Alliance
from chessengine.board import Board, BoardBuilder, create_move
from chessengine.board_utils import coordinate_at_position as sq
from chessengine.moves import MajorMove, PawnPromotion, null_move
from chessengine.pawn import Pawn
from chessengine.piece import PieceType
from chessengine.pieces import Bishop, King, Knight, Queen, Rook


def _build(pieces, move_maker=Alliance.WHITE):
    builder = BoardBuilder()
    for piece in pieces:
        builder.set_piece(piece)
    builder.move_maker = move_maker
    return builder.build()


def _play(board, *steps):
    for origin, target in steps:
        move = create_move(board, sq(origin), sq(target))
        assert move is not null_move(), (origin, target)
        board = move.execute()
    return board


def _king_of(board, alliance):
    return next(p for p in board.active_pieces(alliance) if p.piece_type is PieceType.KING)


def test_initial_board():
    b = Board.create_standard_board()
    assert len(b.current_legal_moves()) == 20
    assert len(b.legal_moves(Alliance.BLACK)) == 20
    assert b.move_maker is Alliance.WHITE
    assert str(b.move_maker) == "White"
    all_moves = b.all_legal_moves()
    assert not any(m.is_attack for m in all_moves)
    assert not any(m.is_castling for m in all_moves)
    assert len(b.all_pieces()) == 32
    assert len(all_moves) == 40
    assert b.tile(35).piece is None


def test_standard_board_text():
    expected = (
        "rnbqkbnr\n"
        "pppppppp\n"
        "--------\n"
        "--------\n"
        "--------\n"
        "--------\n"
        "PPPPPPPP\n"
        "RNBQKBNR\n"
    )
    assert str(Board.create_standard_board()) == expected


def test_plain_king_move():
    b = _build([King(4, Alliance.BLACK), Pawn(12, Alliance.BLACK),
                Pawn(52, Alliance.WHITE), King(60, Alliance.WHITE)])
    assert len(b.legal_moves(Alliance.WHITE)) == 6
    assert len(b.legal_moves(Alliance.BLACK)) == 6
    m = create_move(b, sq("e1"), sq("f1"))
    assert isinstance(m, MajorMove)
    after = m.execute()
    assert after.move_maker is Alliance.BLACK
    assert after.transition_move is m
    assert after.previous_board is b
    assert m.undo() is None
    assert _king_of(after, Alliance.WHITE).position == 61
    assert after.half_move_clock == b.half_move_clock + 1
    assert after.full_move_number == b.full_move_number


def test_invalid_board_without_kings():
    builder = BoardBuilder()
    layout = (Rook, Knight, Bishop, Queen, None, Bishop, Knight, Rook)
    for column, cls in enumerate(layout):
        builder.set_piece(Pawn(8 + column, Alliance.BLACK))
        builder.set_piece(Pawn(48 + column, Alliance.WHITE))
        if cls is not None:
            builder.set_piece(cls(column, Alliance.BLACK))
            builder.set_piece(cls(56 + column, Alliance.WHITE))
    with pytest.raises(ValueError):
        builder.build()


def test_move_counters_and_en_passant_pawn():
    b = Board.create_standard_board()
    after_white = _play(b, ("e2", "e4"))
    assert after_white.en_passant_pawn.position == sq("e4")
    assert after_white.full_move_number == b.full_move_number
    after_black = _play(after_white, ("e7", "e5"))
    assert after_black.full_move_number == b.full_move_number + 1
    assert after_black.half_move_clock == 0


def test_create_move_returns_null_move_when_absent():
    b = Board.create_standard_board()
    assert create_move(b, sq("e2"), sq("e5")) is null_move()


def test_create_move_with_promotion_type():
    b = _build([King(22, Alliance.BLACK), Pawn(15, Alliance.WHITE), King(52, Alliance.WHITE)])
    move = create_move(b, sq("h7"), sq("h8"), PieceType.KNIGHT)
    assert isinstance(move, PawnPromotion)
    assert move.promoted_piece.piece_type is PieceType.KNIGHT
    assert create_move(b, sq("h7"), sq("h8"), PieceType.KING) is null_move()


def test_builder_round_trip():
    b = _play(Board.create_standard_board(), ("g1", "f3"))
    rebuilt = b.builder().build()
    assert str(rebuilt) == str(b)
    assert rebuilt.move_maker is b.move_maker
    assert len(rebuilt.all_legal_moves()) == len(b.all_legal_moves())


def test_invalid_tile_coordinate():
    with pytest.raises(ValueError):
        Board.create_standard_board().tile(64)


@pytest.mark.parametrize(
    "pieces, mover, counts, origin, targets",
    [
        (
            [King(4, Alliance.BLACK), Queen(36, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.WHITE, (31, 5), "e4",
            ["e8", "e7", "e6", "e5", "e3", "e2", "a4", "b4", "c4", "d4", "f4", "g4", "h4"],
        ),
        (
            [King(4, Alliance.BLACK), Knight(28, Alliance.BLACK),
             Knight(36, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.WHITE, (13, None), "e4",
            ["d6", "f6", "c5", "g5", "c3", "g3", "d2", "f2"],
        ),
        (
            [King(4, Alliance.BLACK), Knight(28, Alliance.BLACK),
             Knight(36, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.BLACK, (None, 13), "e5",
            ["d7", "f7", "c6", "g6", "c4", "g4", "d3", "f3"],
        ),
        (
            [King(4, Alliance.BLACK), Knight(0, Alliance.BLACK),
             Knight(56, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.WHITE, (7, 7), "a1", ["b3", "c2"],
        ),
        (
            [King(4, Alliance.BLACK), Knight(0, Alliance.BLACK),
             Knight(56, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.BLACK, (7, 7), "a8", ["b6", "c7"],
        ),
        (
            [King(4, Alliance.BLACK), Bishop(35, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.WHITE, (18, 5), "d4", ["a7", "b6", "c5", "e3", "f2", "g1", "a1", "b2"],
        ),
        (
            [King(4, Alliance.BLACK), Bishop(0, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.WHITE, (12, 5), "a8", ["b7", "c6", "d5", "e4", "f3", "g2", "h1"],
        ),
        (
            [King(4, Alliance.BLACK), Bishop(7, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.WHITE, (12, 5), "h8", ["g7", "f6", "e5", "d4", "c3", "b2", "a1"],
        ),
        (
            [King(4, Alliance.BLACK), Bishop(56, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.WHITE, (12, 5), "a1", ["b2", "c3", "d4", "e5", "f6", "g7", "h8"],
        ),
        (
            [King(4, Alliance.BLACK), Bishop(63, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.WHITE, (12, 5), "h1", ["g2", "f3", "e4", "d5", "c6", "b7", "a8"],
        ),
        (
            [King(4, Alliance.BLACK), Rook(36, Alliance.WHITE), King(60, Alliance.WHITE)],
            Alliance.WHITE, (18, 5), "e4",
            ["e8", "e7", "e6", "e5", "e3", "e2", "a4", "b4", "c4", "d4", "f4", "g4", "h4"],
        ),
    ],
)
def test_piece_moves(pieces, mover, counts, origin, targets):
    b = _build(pieces, mover)
    white_count, black_count = counts
    if white_count is not None:
        assert len(b.legal_moves(Alliance.WHITE)) == white_count
    if black_count is not None:
        assert len(b.legal_moves(Alliance.BLACK)) == black_count
    side = b.tile(sq(origin)).piece.alliance
    side_moves = b.legal_moves(side)
    for target in targets:
        move = create_move(b, sq(origin), sq(target))
        assert move in side_moves, target


def test_pawn_promotion_sequence():
    b = _build([King(22, Alliance.BLACK), Rook(3, Alliance.BLACK),
                Pawn(15, Alliance.WHITE), King(52, Alliance.WHITE)])
    t1 = create_move(b, sq("h7"), sq("h8")).execute()
    promoted = t1.tile(sq("h8")).piece
    assert promoted.piece_type is PieceType.QUEEN
    assert promoted.alliance is Alliance.WHITE
    assert t1.move_maker is Alliance.BLACK
    t2 = create_move(t1, sq("d8"), sq("h8")).execute()
    captor = t2.tile(sq("h8")).piece
    assert captor.piece_type is PieceType.ROOK
    assert captor.alliance is Alliance.BLACK
    assert len(t2.active_pieces(Alliance.WHITE)) == 1
    t3 = create_move(t2, sq("e2"), sq("d2")).execute()
    assert _king_of(t3, Alliance.WHITE).position == sq("d2")


def test_king_equality():
    b = Board.create_standard_board()
    other = Board.create_standard_board()
    assert b.tile(60).piece == other.tile(60).piece
    assert b.tile(60).piece is not other.tile(60).piece


def test_opening_moves_are_available():
    b = _play(Board.create_standard_board(), ("e2", "e4"))
    assert create_move(b, sq("e7"), sq("e5")) in b.current_legal_moves()
    assert b.move_maker is Alliance.BLACK