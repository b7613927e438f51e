"""Match totals across several independent boards (rounds)."""

from typing import Dict, Iterable, List, Mapping, Tuple

from pydantic import BaseModel, Field

from .engine import analyze
from .models import Board, GameAnalysis, PlayerColor


class MatchAnalysis(BaseModel):
    """Per-round analyses plus the grand total."""
    rounds: List[GameAnalysis] = Field(default_factory=list)
    totals: Dict[PlayerColor, int] = Field(default_factory=dict)


def sum_scores(score_maps: Iterable[Mapping[PlayerColor, int]]) -> Dict[PlayerColor, int]:
    """Add up per-round score mappings. Colors missing from a round count as 0."""
    totals: Dict[PlayerColor, int] = {color: 0 for color in PlayerColor}
    for scores in score_maps:
        for color, points in scores.items():
            totals[PlayerColor(color)] += points
    return totals


def analyze_rounds(boards: Iterable[Board]) -> MatchAnalysis:
    rounds = [analyze(board) for board in boards]
    return MatchAnalysis(rounds=rounds, totals=sum_scores(r.scores for r in rounds))


def standings(scores: Mapping[PlayerColor, int]) -> List[Tuple[PlayerColor, int]]:
    """
    Order players by descending score.

    Ties keep the declaration order of PlayerColor.
    """
    order = {color: i for i, color in enumerate(PlayerColor)}
    return sorted(
        ((PlayerColor(color), points) for color, points in scores.items()),
        key=lambda item: (-item[1], order[item[0]]),
    )
