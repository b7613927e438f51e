"""Board input, editing and rendering for the Kingdoms calculator."""

from .editing import BoardEditError, empty_board, place_tile, place_castle, erase
from .models import BoardError, MatchConfig
from .parsing import parse_board, format_board
from .render import render_board, render_castle_report, render_scoreboard

__all__ = [
    # Editing
    "BoardEditError",
    "empty_board",
    "place_tile",
    "place_castle",
    "erase",
    # Models
    "BoardError",
    "MatchConfig",
    # Notation
    "parse_board",
    "format_board",
    # Rendering
    "render_board",
    "render_castle_report",
    "render_scoreboard",
]
