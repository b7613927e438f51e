"""
Board notation parsing.

One text line per board row, cells separated by whitespace:

    .       empty cell
    +N      resource worth N
    -N      hazard worth -N
    M D G W mountain, dragon, gold mine, wizard
    [CR]    castle of color C (R, B, G, Y) and rank R, e.g. [B3]

Blank lines and anything after `#` are ignored.
"""

import re
from typing import List, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from ..scoring.models import Board, Castle, PlayerColor, Tile, TileType
from .models import BoardError


SPECIAL_TOKENS = {
    "M": TileType.MOUNTAIN,
    "D": TileType.DRAGON,
    "G": TileType.GOLD_MINE,
    "W": TileType.WIZARD,
}

COLOR_INITIALS = {color.value[0]: color for color in PlayerColor}

_NUMBER = re.compile(r'^([+-])(\d+)$')
_CASTLE = re.compile(r'^\[([A-Z])(\d+)\]$', re.IGNORECASE)


def parse_token(token: str) -> Tuple[Optional[Union[Tile, Castle]], Optional[BoardError]]:
    """Parse a single cell token into its occupant, or an error."""
    if token == ".":
        return None, None

    upper = token.upper()
    if upper in SPECIAL_TOKENS:
        return Tile(type=SPECIAL_TOKENS[upper]), None

    number = _NUMBER.match(token)
    if number:
        sign, digits = number.groups()
        amount = int(digits)
        if amount == 0:
            return None, BoardError(
                code="INVALID_VALUE",
                message=f"Tile value must not be zero: '{token}'",
            )
        if sign == "+":
            return Tile(type=TileType.RESOURCE, value=amount), None
        return Tile(type=TileType.HAZARD, value=-amount), None

    castle = _CASTLE.match(token)
    if castle:
        initial, rank = castle.group(1).upper(), int(castle.group(2))
        if initial not in COLOR_INITIALS:
            return None, BoardError(
                code="INVALID_TOKEN",
                message=f"Unknown castle color '{initial}' in '{token}' (expected one of {''.join(COLOR_INITIALS)})",
            )
        try:
            return Castle(color=COLOR_INITIALS[initial], rank=rank), None
        except PydanticValidationError:
            return None, BoardError(
                code="INVALID_RANK",
                message=f"Castle rank must be 1-4, got {rank} in '{token}'",
            )

    return None, BoardError(code="INVALID_TOKEN", message=f"Unrecognized cell '{token}'")


def parse_board(
    spec: str,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
) -> Tuple[Optional[Board], List[BoardError]]:
    """
    Parse a board in text notation, collecting every error.

    If `rows` / `cols` are given the board must have exactly that size.
    Returns a tuple of (board, errors); board is None whenever errors is non-empty.
    """
    errors: List[BoardError] = []
    grid: List[Tuple[Optional[Union[Tile, Castle]], ...]] = []
    width: Optional[int] = None

    for line_no, raw in enumerate(spec.split('\n'), start=1):
        tokens = raw.split('#', 1)[0].split()
        if not tokens:
            continue

        if width is None:
            width = len(tokens)
        elif len(tokens) != width:
            errors.append(BoardError(
                code="RAGGED_ROW",
                message=f"Row has {len(tokens)} cells, expected {width}",
                line=line_no,
            ))

        row = []
        for col_no, token in enumerate(tokens, start=1):
            occupant, error = parse_token(token)
            if error is not None:
                error.line = line_no
                error.column = col_no
                errors.append(error)
            row.append(occupant)
        grid.append(tuple(row))

    if not grid:
        errors.append(BoardError(code="EMPTY_BOARD", message="Board specification is empty"))
        return None, errors

    if rows is not None and len(grid) != rows:
        errors.append(BoardError(
            code="SIZE_MISMATCH",
            message=f"Board has {len(grid)} rows, expected {rows}",
        ))
    if cols is not None and width != cols:
        errors.append(BoardError(
            code="SIZE_MISMATCH",
            message=f"Board has {width} columns, expected {cols}",
        ))

    if errors:
        return None, errors

    return Board(cells=tuple(grid)), errors


def format_token(occupant: Optional[Union[Tile, Castle]]) -> str:
    if occupant is None:
        return "."
    if isinstance(occupant, Castle):
        return f"[{occupant.color.value[0]}{occupant.rank}]"
    if occupant.type == TileType.RESOURCE:
        return f"+{occupant.value}"
    if occupant.type == TileType.HAZARD:
        return str(occupant.value)
    for token, tile_type in SPECIAL_TOKENS.items():
        if occupant.type == tile_type:
            return token
    raise ValueError(f"No notation for tile type {occupant.type!r}")


def format_board(board: Board) -> str:
    """Write a board in the notation read by `parse_board`."""
    tokens = [[format_token(occupant) for occupant in row] for row in board.cells]
    width = max(len(token) for row in tokens for token in row)
    return '\n'.join(' '.join(token.ljust(width) for token in row).rstrip() for row in tokens)
