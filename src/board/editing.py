"""Board editing: every operation returns a new Board."""

from typing import Optional, Union

from ..scoring.models import BOARD_COLS, BOARD_ROWS, Board, Castle, PlayerColor, Tile, TileType


class BoardEditError(IndexError):
    """Raised when an edit targets a cell outside the board."""


def empty_board(rows: int = BOARD_ROWS, cols: int = BOARD_COLS) -> Board:
    return Board.empty(rows, cols)


def _replace(board: Board, row: int, col: int, occupant: Optional[Union[Tile, Castle]]) -> Board:
    if not board.in_bounds(row, col):
        raise BoardEditError(f"Cell ({row}, {col}) is outside a {board.rows}x{board.cols} board")

    cells = tuple(
        tuple(occupant if (r, c) == (row, col) else existing for c, existing in enumerate(cells_row))
        for r, cells_row in enumerate(board.cells)
    )
    return Board(cells=cells)


def place_tile(board: Board, row: int, col: int, tile_type: TileType, value: int = 0) -> Board:
    """Place a tile, replacing whatever was in the cell (including a castle)."""
    return _replace(board, row, col, Tile(type=tile_type, value=value))


def place_castle(board: Board, row: int, col: int, color: PlayerColor, rank: int) -> Board:
    """Place a castle, replacing whatever was in the cell (including a tile)."""
    return _replace(board, row, col, Castle(color=color, rank=rank))


def erase(board: Board, row: int, col: int) -> Board:
    return _replace(board, row, col, None)
