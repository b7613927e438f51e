"""
Test suite for board notation.

Covers:
- Valid boards (all token kinds, comments, case-insensitivity)
- Errors (EMPTY_BOARD, INVALID_TOKEN, INVALID_VALUE, INVALID_RANK, RAGGED_ROW, SIZE_MISMATCH)
- Writing boards back out
"""

import pytest

from src.board import empty_board, format_board, parse_board, place_castle, place_tile
from src.board.parsing import parse_token
from src.scoring import Castle, PlayerColor, Tile, TileType


STANDARD = "\n".join([
    "[R1] +5  .   M  .   .",
    ".    D   .   .  .   .",
    ".    .  [B2] -3 G   .",
    ".    .   .   .  W   .",
    ".    .   .   .  .  [Y4]",
])


class TestValidBoards:
    """Boards that parse cleanly."""

    def test_standard_board(self):
        """A full 5x6 board parses every token kind."""
        board, errors = parse_board(STANDARD, rows=5, cols=6)
        assert errors == []
        assert (board.rows, board.cols) == (5, 6)
        assert board.cell(0, 0).castle == Castle(color=PlayerColor.RED, rank=1)
        assert board.cell(0, 1).tile == Tile(type=TileType.RESOURCE, value=5)
        assert board.cell(0, 3).tile.type == TileType.MOUNTAIN
        assert board.cell(1, 1).tile.type == TileType.DRAGON
        assert board.cell(2, 2).castle.color == PlayerColor.BLUE
        assert board.cell(2, 3).tile == Tile(type=TileType.HAZARD, value=-3)
        assert board.cell(2, 4).tile.type == TileType.GOLD_MINE
        assert board.cell(3, 4).tile.type == TileType.WIZARD
        assert board.cell(4, 5).castle.rank == 4

    def test_line_numbers_count_blank_lines(self):
        """Error lines refer to the text as written, blank lines included."""
        _, errors = parse_board("\n\n. .\n. Q")
        assert (errors[0].line, errors[0].column) == (4, 2)

    def test_comments_and_blank_lines(self):
        """Comments and blank lines are skipped."""
        spec = "# round one\n\n+1 .  # first row\n\n. -1\n"
        board, errors = parse_board(spec)
        assert errors == []
        assert board.rows == 2
        assert board.cell(1, 1).tile.value == -1

    def test_case_insensitive(self):
        """Special tiles and castles are case-insensitive."""
        board, errors = parse_board("m d g w [r3] [y1]")
        assert errors == []
        assert [cell.occupant.kind for cell in board.iter_cells()] == ["tile"] * 4 + ["castle"] * 2

    def test_size_not_checked_by_default(self):
        """Any rectangular size is accepted when no size is given."""
        board, errors = parse_board(". .\n. .")
        assert errors == []
        assert (board.rows, board.cols) == (2, 2)


class TestErrors:
    """Problems are collected, not raised."""

    @pytest.mark.parametrize("spec", ["", "   \n  ", "# only a comment"])
    def test_empty_board(self, spec):
        """Nothing to parse is an EMPTY_BOARD error."""
        board, errors = parse_board(spec)
        assert board is None
        assert [e.code for e in errors] == ["EMPTY_BOARD"]

    def test_invalid_token_position(self):
        """Bad tokens report their line and cell."""
        board, errors = parse_board(". .\n. X")
        assert board is None
        assert len(errors) == 1
        assert errors[0].code == "INVALID_TOKEN"
        assert (errors[0].line, errors[0].column) == (2, 2)

    def test_zero_value(self):
        """Zero-valued tiles are rejected."""
        _, errors = parse_board("+0 -0")
        assert [e.code for e in errors] == ["INVALID_VALUE", "INVALID_VALUE"]

    def test_invalid_rank(self):
        """Castle ranks outside 1-4 are rejected."""
        _, errors = parse_board("[R0] [B5]")
        assert [e.code for e in errors] == ["INVALID_RANK", "INVALID_RANK"]

    def test_unknown_castle_color(self):
        """Castle color initials must name a player."""
        _, errors = parse_board("[X1]")
        assert errors[0].code == "INVALID_TOKEN"
        assert "X" in errors[0].message

    def test_ragged_row(self):
        """Rows must all have the same number of cells."""
        _, errors = parse_board(". . .\n. .")
        assert [e.code for e in errors] == ["RAGGED_ROW"]
        assert errors[0].line == 2

    def test_size_mismatch(self):
        """An explicit size must match."""
        _, errors = parse_board(". .\n. .", rows=5, cols=6)
        assert [e.code for e in errors] == ["SIZE_MISMATCH", "SIZE_MISMATCH"]

    def test_all_errors_collected(self):
        """Every error is reported, not just the first."""
        _, errors = parse_board("X +0\n[R9] . .")
        assert {e.code for e in errors} == {"INVALID_TOKEN", "INVALID_VALUE", "INVALID_RANK", "RAGGED_ROW"}


class TestTokens:
    """Single-token parsing."""

    def test_empty_cell(self):
        """A dot is an empty cell."""
        assert parse_token(".") == (None, None)

    def test_large_values(self):
        """Values are not limited to the printed tile set."""
        tile, error = parse_token("+12")
        assert error is None
        assert tile.value == 12


class TestFormatBoard:
    """Writing boards back to notation."""

    def test_round_trip(self):
        """A formatted board parses back to the same board."""
        board, _ = parse_board(STANDARD)
        again, errors = parse_board(format_board(board))
        assert errors == []
        assert again == board

    def test_built_board(self):
        """Boards built by editing format to the expected notation."""
        board = place_castle(empty_board(1, 3), 0, 0, PlayerColor.GREEN, 2)
        board = place_tile(board, 0, 1, TileType.HAZARD, -4)
        assert format_board(board) == "[G2] -4   ."
