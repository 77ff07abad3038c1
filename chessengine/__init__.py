"""Chess move-generation core: boards, pieces, pseudo-legal moves and move execution."""

__version__ = "1.1.0"
__all__ = ["alliance", "board", "board_utils", "moves", "pawn", "piece", "pieces", "tile"]