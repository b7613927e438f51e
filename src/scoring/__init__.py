"""Board scoring for the Kingdoms calculator."""

from .engine import analyze, scores_only, resolve_tile, wizard_bonus
from .segments import Axis, SegmentIndex, get_segment
from .rounds import MatchAnalysis, analyze_rounds, sum_scores, standings
from .models import (
    BOARD_ROWS,
    BOARD_COLS,
    NUMERIC_TILES,
    TileType,
    PlayerColor,
    Position,
    Tile,
    Castle,
    Cell,
    Board,
    TileStats,
    CastleStats,
    GameAnalysis,
    ScoringError,
)

__all__ = [
    # Main scoring
    "analyze",
    "scores_only",
    "resolve_tile",
    "wizard_bonus",
    # Segments
    "Axis",
    "SegmentIndex",
    "get_segment",
    # Rounds
    "MatchAnalysis",
    "analyze_rounds",
    "sum_scores",
    "standings",
    # Models
    "BOARD_ROWS",
    "BOARD_COLS",
    "NUMERIC_TILES",
    "TileType",
    "PlayerColor",
    "Position",
    "Tile",
    "Castle",
    "Cell",
    "Board",
    "TileStats",
    "CastleStats",
    "GameAnalysis",
    "ScoringError",
]
