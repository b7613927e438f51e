"""Data models for board input."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..scoring.models import BOARD_COLS, BOARD_ROWS, PlayerColor


class BoardError(BaseModel):
    """A single problem found while reading a board."""
    code: str
    message: str
    line: Optional[int] = None
    column: Optional[int] = None


class MatchConfig(BaseModel):
    """A match file: board size, player names and one board per round."""
    rows: int = Field(default=BOARD_ROWS, ge=1)
    cols: int = Field(default=BOARD_COLS, ge=1)
    names: Dict[PlayerColor, str] = Field(default_factory=dict)
    rounds: List[str] = Field(..., min_length=1)

    def display_name(self, color: PlayerColor) -> str:
        return self.names.get(color) or color.value.title()
