"""
Scoring engine for Kingdoms boards.

Scoring runs in two phases:
1. Effective values: every resource/hazard tile is resolved against the dragons
   and gold mines in its row and column segments.
2. Castle scores: every castle sums the effective values in its own row and
   column segments and multiplies each sum by its wizard-boosted rank.
"""

import logging
from typing import Dict, Iterable, List

from .models import (
    Board,
    Cell,
    CastleStats,
    GameAnalysis,
    PlayerColor,
    Position,
    ScoringError,
    Tile,
    TileStats,
    TileType,
)
from .segments import Axis, SegmentIndex


logger = logging.getLogger(__name__)

DRAGON = "Dragon"
GOLD_MINE = "Gold Mine"

# Orthogonal neighbours: up, down, left, right
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def wizard_bonus(board: Board, row: int, col: int) -> int:
    """Count wizards orthogonally adjacent to (row, col). Mountains do not block them."""
    bonus = 0
    for dr, dc in _NEIGHBOURS:
        nr, nc = row + dr, col + dc
        if board.in_bounds(nr, nc) and board.cell(nr, nc).has_tile(TileType.WIZARD):
            bonus += 1
    return bonus


def resolve_tile(tile: Tile, influencers: Iterable[Cell]) -> TileStats:
    """
    Resolve a tile's effective value from the cells of its row and column segments.

    A dragon zeroes a resource but leaves hazards alone. A gold mine then doubles
    whatever value is left. Both act on presence, so extra dragons or gold mines
    change nothing.
    """
    if tile.type in (TileType.MOUNTAIN, TileType.DRAGON, TileType.GOLD_MINE, TileType.WIZARD):
        return TileStats(type=tile.type, face_value=tile.value)
    if tile.type not in (TileType.RESOURCE, TileType.HAZARD):
        raise ScoringError(f"Cannot score tile of type {tile.type!r}")

    influencers = list(influencers)
    has_dragon = any(cell.has_tile(TileType.DRAGON) for cell in influencers)
    has_gold_mine = any(cell.has_tile(TileType.GOLD_MINE) for cell in influencers)

    effective_value = tile.value
    modifiers: List[str] = []

    if tile.type == TileType.RESOURCE and has_dragon:
        effective_value = 0
        modifiers.append(DRAGON)

    if has_gold_mine:
        effective_value *= 2
        modifiers.append(GOLD_MINE)

    return TileStats(
        type=tile.type,
        face_value=tile.value,
        effective_value=effective_value,
        modifiers=modifiers,
    )


def _segment_total(segment: Iterable[Cell], tile_stats: Dict[Position, TileStats]) -> int:
    total = 0
    for cell in segment:
        if cell.tile is not None:
            total += tile_stats[cell.position].effective_value
    return total


def analyze(board: Board) -> GameAnalysis:
    """
    Score a board.

    Returns a GameAnalysis with:
    - scores: total per player color (every color present, 0 if it has no castles)
    - tile_stats: effective value of every tile, keyed by position
    - castle_stats: segment totals and effective rank of every castle, keyed by position
    """
    segments = SegmentIndex(board)

    # Phase 1: effective value of every tile
    tile_stats: Dict[Position, TileStats] = {}
    for cell in board.iter_tiles():
        stats = resolve_tile(cell.tile, segments.influencers(cell.row, cell.col))
        if stats.modifiers:
            logger.debug(
                "Tile %s at %s: %d -> %d (%s)",
                cell.tile.type.value, cell.position,
                stats.face_value, stats.effective_value, ", ".join(stats.modifiers),
            )
        tile_stats[cell.position] = stats

    # Phase 2: castle scores
    scores: Dict[PlayerColor, int] = {color: 0 for color in PlayerColor}
    castle_stats: Dict[Position, CastleStats] = {}
    for cell in board.iter_castles():
        castle = cell.castle
        row_total = _segment_total(segments.segment(cell.row, cell.col, Axis.ROW), tile_stats)
        col_total = _segment_total(segments.segment(cell.row, cell.col, Axis.COLUMN), tile_stats)

        bonus = wizard_bonus(board, cell.row, cell.col)
        effective_rank = castle.rank + bonus
        points = row_total * effective_rank + col_total * effective_rank

        castle_stats[cell.position] = CastleStats(
            color=castle.color,
            rank=castle.rank,
            row_segment_total=row_total,
            col_segment_total=col_total,
            wizard_bonus=bonus,
            effective_rank=effective_rank,
            score=points,
        )
        scores[castle.color] += points
        logger.debug(
            "Castle %s rank %d at %s: row %d + col %d at rank %d = %d",
            castle.color.value, castle.rank, cell.position,
            row_total, col_total, effective_rank, points,
        )

    return GameAnalysis(scores=scores, tile_stats=tile_stats, castle_stats=castle_stats)


def scores_only(board: Board) -> Dict[PlayerColor, int]:
    """Convenience wrapper when you only need the per-player totals."""
    return analyze(board).scores
