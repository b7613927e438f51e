"""Text rendering of boards, castle statistics and scoreboards."""

from typing import List, Mapping, Optional

from ..scoring.models import Board, Cell, GameAnalysis, PlayerColor
from ..scoring.rounds import standings
from .parsing import format_token


def _cell_label(cell: Cell, analysis: Optional[GameAnalysis]) -> str:
    label = format_token(cell.occupant)
    if analysis is None or cell.occupant is None:
        return label

    if cell.castle is not None:
        stats = analysis.castle_stats.get(cell.position)
        if stats is not None and stats.wizard_bonus:
            label += "+"
    elif cell.tile.is_numeric:
        stats = analysis.tile_stats.get(cell.position)
        if stats is not None and stats.changed:
            label += f">{stats.effective_value}"
    return label


def render_board(board: Board, analysis: Optional[GameAnalysis] = None) -> str:
    """
    Render the board as an aligned text grid with 1-based row and column headers.

    With an analysis, numeric tiles whose value was modified show
    `face>effective` and castles with a wizard bonus are marked with `+`.
    """
    labels = [[_cell_label(cell, analysis) for cell in row] for row in _rows(board)]
    width = max(3, max(len(label) for row in labels for label in row))

    lines = ["   " + " ".join(str(c + 1).rjust(width) for c in range(board.cols))]
    for r, row in enumerate(labels):
        lines.append(f"{r + 1:>2} " + " ".join(label.rjust(width) for label in row))
    return '\n'.join(lines)


def _rows(board: Board) -> List[List[Cell]]:
    return [[board.cell(r, c) for c in range(board.cols)] for r in range(board.rows)]


def render_castle_report(board: Board, analysis: GameAnalysis) -> str:
    """One line per castle; a segment that collects nothing is flagged with `!`."""
    lines = []
    for cell in board.iter_castles():
        stats = analysis.castle_stats[cell.position]
        row_flag = "!" if stats.row_segment_total == 0 else ""
        col_flag = "!" if stats.col_segment_total == 0 else ""
        rank = f"{stats.rank}+{stats.wizard_bonus}" if stats.wizard_bonus else str(stats.rank)
        lines.append(
            f"{stats.color.value:<6} castle at ({cell.row + 1}, {cell.col + 1}): "
            f"row {stats.row_segment_total}{row_flag}, col {stats.col_segment_total}{col_flag}, "
            f"rank {rank} -> {stats.score}"
        )
    return '\n'.join(lines)


def render_scoreboard(
    scores: Mapping[PlayerColor, int],
    names: Optional[Mapping[PlayerColor, str]] = None,
) -> str:
    """Players ordered by descending score."""
    names = names or {}
    lines = []
    for place, (color, points) in enumerate(standings(scores), start=1):
        name = names.get(color) or color.value.title()
        lines.append(f"{place}. {name:<12} {points:>5}")
    return '\n'.join(lines)
