"""Data models for board scoring."""

from enum import Enum
from typing import Annotated, Dict, Iterator, List, Literal, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


# Standard Kingdoms board size
BOARD_ROWS = 5
BOARD_COLS = 6


class TileType(str, Enum):
    RESOURCE = "RESOURCE"
    HAZARD = "HAZARD"
    MOUNTAIN = "MOUNTAIN"
    DRAGON = "DRAGON"
    GOLD_MINE = "GOLD_MINE"
    WIZARD = "WIZARD"


class PlayerColor(str, Enum):
    RED = "RED"
    BLUE = "BLUE"
    GREEN = "GREEN"
    YELLOW = "YELLOW"


# Tiles with a face value that castles collect
NUMERIC_TILES = frozenset({TileType.RESOURCE, TileType.HAZARD})


class ScoringError(ValueError):
    """Raised when the engine meets board contents it cannot score."""


class Position(NamedTuple):
    """A cell's coordinates on the board."""
    row: int
    col: int


class Tile(BaseModel):
    """A resource, hazard or special tile placed on the board."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["tile"] = "tile"
    type: TileType
    value: int = Field(default=0, strict=True)

    @model_validator(mode="after")
    def check_face_value(self) -> "Tile":
        if self.type == TileType.RESOURCE and self.value <= 0:
            raise ValueError(f"Resource value must be positive, got {self.value}")
        if self.type == TileType.HAZARD and self.value >= 0:
            raise ValueError(f"Hazard value must be negative, got {self.value}")
        if self.type not in NUMERIC_TILES and self.value != 0:
            raise ValueError(f"{self.type.value} tiles have no face value, got {self.value}")
        return self

    @property
    def is_numeric(self) -> bool:
        return self.type in NUMERIC_TILES


class Castle(BaseModel):
    """A player's castle."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["castle"] = "castle"
    color: PlayerColor
    rank: int = Field(..., ge=1, le=4, strict=True)


# A cell holds nothing, a tile, or a castle
Occupant = Annotated[Union[Tile, Castle], Field(discriminator="kind")]


class Cell(NamedTuple):
    """A single board cell and whatever occupies it."""
    row: int
    col: int
    occupant: Optional[Union[Tile, Castle]]

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)

    @property
    def tile(self) -> Optional[Tile]:
        return self.occupant if isinstance(self.occupant, Tile) else None

    @property
    def castle(self) -> Optional[Castle]:
        return self.occupant if isinstance(self.occupant, Castle) else None

    def has_tile(self, tile_type: TileType) -> bool:
        return self.tile is not None and self.tile.type == tile_type


class Board(BaseModel):
    """
    Immutable snapshot of the board grid.

    `cells[row][col]` is None for an empty cell, otherwise the Tile or Castle
    placed there. Edits go through `src.board.editing` and produce a new Board.
    """
    model_config = ConfigDict(frozen=True)

    cells: Tuple[Tuple[Optional[Occupant], ...], ...]

    @field_validator("cells")
    @classmethod
    def check_rectangular(cls, cells):
        if not cells or not cells[0]:
            raise ValueError("Board must have at least one row and one column")
        width = len(cells[0])
        for i, row in enumerate(cells):
            if len(row) != width:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {width}")
        return cells

    @classmethod
    def empty(cls, rows: int = BOARD_ROWS, cols: int = BOARD_COLS) -> "Board":
        return cls(cells=tuple(tuple(None for _ in range(cols)) for _ in range(rows)))

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} board")
        return Cell(row, col, self.cells[row][col])

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        for r, row in enumerate(self.cells):
            for c, occupant in enumerate(row):
                yield Cell(r, c, occupant)

    def iter_tiles(self) -> Iterator[Cell]:
        return (cell for cell in self.iter_cells() if cell.tile is not None)

    def iter_castles(self) -> Iterator[Cell]:
        return (cell for cell in self.iter_cells() if cell.castle is not None)


class TileStats(BaseModel):
    """Effective value of a single tile."""
    type: TileType
    face_value: int = 0
    effective_value: int = 0
    modifiers: List[str] = Field(default_factory=list)  # e.g. ["Dragon", "Gold Mine"]

    @property
    def changed(self) -> bool:
        return self.effective_value != self.face_value


class CastleStats(BaseModel):
    """Segment totals and rank used to score a single castle."""
    color: PlayerColor
    rank: int
    row_segment_total: int = 0
    col_segment_total: int = 0
    wizard_bonus: int = 0
    effective_rank: int
    score: int = 0


def _position_key(position: Tuple[int, int]) -> str:
    return f"{position[0]},{position[1]}"


def _parse_position_key(key) -> Position:
    if isinstance(key, str):
        row, _, col = key.partition(",")
        return Position(int(row), int(col))
    return key


class GameAnalysis(BaseModel):
    """Result of scoring one board."""
    scores: Dict[PlayerColor, int] = Field(default_factory=dict)
    tile_stats: Dict[Position, TileStats] = Field(default_factory=dict)
    castle_stats: Dict[Position, CastleStats] = Field(default_factory=dict)

    @field_validator("tile_stats", "castle_stats", mode="before")
    @classmethod
    def parse_position_keys(cls, stats):
        # Saved JSON keys stats by "row,col"
        if isinstance(stats, dict):
            return {_parse_position_key(key): value for key, value in stats.items()}
        return stats

    @field_serializer("tile_stats", "castle_stats")
    def serialize_stats(self, stats: Dict[Position, BaseModel], info):
        if not info.mode_is_json():
            return {pos: value.model_dump() for pos, value in stats.items()}
        # JSON object keys must be strings
        return {_position_key(pos): value.model_dump(mode="json") for pos, value in stats.items()}
