"""Mountain-delimited segment resolution."""

from enum import Enum
from typing import Dict, List, Tuple

from .models import Board, Cell, Position, TileType


class Axis(Enum):
    """Direction of a segment walk, as a (row, col) step."""
    ROW = (0, 1)
    COLUMN = (1, 0)

    @property
    def step(self) -> Tuple[int, int]:
        return self.value


def _is_wall(board: Board, row: int, col: int) -> bool:
    return board.cell(row, col).has_tile(TileType.MOUNTAIN)


def get_segment(board: Board, row: int, col: int, axis: Axis) -> List[Cell]:
    """
    Walk the board from (row, col) along `axis` and return the segment
    containing the start cell.

    The segment stops before the nearest mountain or board edge on each side.
    Mountains are never part of a segment, so a mountain's own segment is empty.
    """
    if _is_wall(board, row, col):
        return []

    dr, dc = axis.step

    # Find the near boundary
    r, c = row, col
    while True:
        nr, nc = r - dr, c - dc
        if not board.in_bounds(nr, nc) or _is_wall(board, nr, nc):
            break
        r, c = nr, nc

    # Collect forward up to the far boundary
    cells: List[Cell] = []
    while board.in_bounds(r, c) and not _is_wall(board, r, c):
        cells.append(board.cell(r, c))
        r, c = r + dr, c + dc

    return cells


def _split_runs(line: List[Cell]) -> List[Tuple[Cell, ...]]:
    """Split one row or column into its mountain-free runs."""
    runs: List[Tuple[Cell, ...]] = []
    current: List[Cell] = []
    for cell in line:
        if cell.has_tile(TileType.MOUNTAIN):
            if current:
                runs.append(tuple(current))
            current = []
        else:
            current.append(cell)
    if current:
        runs.append(tuple(current))
    return runs


class SegmentIndex:
    """
    Row and column segments of a board, computed once.

    Every row and column is split at its mountains in a single pass; each
    non-mountain cell then maps straight to its run. Lookups return the same
    cells, in the same order, as `get_segment`.
    """

    def __init__(self, board: Board):
        self.board = board
        self._segments: Dict[Axis, Dict[Position, Tuple[Cell, ...]]] = {
            Axis.ROW: {},
            Axis.COLUMN: {},
        }

        for r in range(board.rows):
            line = [board.cell(r, c) for c in range(board.cols)]
            self._index(Axis.ROW, line)

        for c in range(board.cols):
            line = [board.cell(r, c) for r in range(board.rows)]
            self._index(Axis.COLUMN, line)

    def _index(self, axis: Axis, line: List[Cell]) -> None:
        for run in _split_runs(line):
            for cell in run:
                self._segments[axis][cell.position] = run

    def segment(self, row: int, col: int, axis: Axis) -> Tuple[Cell, ...]:
        if not self.board.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.board.rows}x{self.board.cols} board")
        return self._segments[axis].get(Position(row, col), ())

    def influencers(self, row: int, col: int) -> Tuple[Cell, ...]:
        """Row segment followed by column segment; the start cell appears in both."""
        return self.segment(row, col, Axis.ROW) + self.segment(row, col, Axis.COLUMN)
