# chessengine

A pure-Python chess move-generation core. The board has 64 tiles, numbered
0 (a8) to 63 (h1). The package generates pseudo-legal moves for every piece.
These include pawn double steps, en passant captures and promotions. Making a
move produces a new board.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from chessengine.board import Board, create_move
from chessengine.board_utils import coordinate_at_position

board = Board.create_standard_board()
print(board)                              # 8 lines: black pieces in lower case, "-" for empty
print(len(board.current_legal_moves()))   # 20

move = create_move(board, coordinate_at_position("e2"), coordinate_at_position("e4"))
print(move)                               # e4
next_board = move.execute()
print(next_board.move_maker)              # Black
print(next_board.en_passant_pawn)         # the pawn that just jumped
```

### Building custom positions

```python
from chessengine.alliance import Alliance
from chessengine.board import BoardBuilder
from chessengine.pieces import King, Queen

builder = BoardBuilder()
builder.set_piece(King(4, Alliance.BLACK))
builder.set_piece(Queen(36, Alliance.WHITE))
builder.set_piece(King(60, Alliance.WHITE))
board = builder.build()
print(len(board.legal_moves(Alliance.WHITE)))   # 31
```

`BoardBuilder` has these attributes, which you can set before calling `build()`:

- `move_maker`
- `en_passant_pawn`
- `half_move_clock`
- `full_move_number`
- `previous_board`
- `transition_move`

`Board.builder()` returns a builder that holds an existing position.

A board that lacks a king for either side cannot be built. Building it raises `ValueError`.

### Modules

- `chessengine.alliance`: `Alliance` (`WHITE` or `BLACK`). It gives the pawn
  direction, the promotion squares and the piece-square bonus tables
  (`location_bonus`).
- `chessengine.board_utils`: conversion between coordinates and square names
  (`coordinate_at_position`, `position_at_coordinate`). It also holds the row
  and column tables and the MVV-LVA ordering score `mvv_lva`.
- `chessengine.tile`: `Tile` and `create_tile`. Empty tiles are shared.
- `chessengine.piece`: `PieceType` with material values, and the `Piece` base
  class.
- `chessengine.pieces`: `Bishop`, `King`, `Knight`, `Queen`, `Rook`.
- `chessengine.pawn`: `Pawn`.
- `chessengine.moves`: the move classes, `null_move()`, `MoveStatus` and
  `MoveTransition`. The move classes are `MajorMove`, `MajorAttackMove`,
  `PawnMove`, `PawnJump`, `PawnAttackMove`, `PawnEnPassantAttackMove`,
  `PawnPromotion`, `KingSideCastleMove` and `QueenSideCastleMove`.
- `chessengine.board`: `Board`, `BoardBuilder` and `create_move`.

`create_move(board, current, destination, promotion_type=None)` returns the
first matching move available to either side. If no move matches, it returns
the null move. Executing the null move raises `RuntimeError`. A move renders as
short algebraic notation with `str()`. Examples are `Nf3`, `exd5`, `e8=Q` and
`O-O`.

## What the package does not do

- Moves are pseudo-legal. The package does not filter out moves that leave
  your own king in check.
- It does not detect check, checkmate or stalemate.
- There is no player object. `MoveStatus` and `MoveTransition` are plain data
  holders, and nothing in the package produces them.
- The king does not generate castling moves. The castle move classes can be
  built and executed by hand.
- There is no move search or computer opponent.
- There is no graphical interface and no command-line program.